"""회원 서비스 — 회원 조회, 상태/비밀번호 검증, 가입 및 로그인.

Member Service — Member lookup helpers, account-status and password checks,
registration and login. Shared by the member-info and cart services.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.member import MEMBER_STATUS_OPEN, Member
from app.repositories.member_repository import member_repository
from app.schemas.auth import LoginRequest, RegisterRequest, TokenResponse
from app.utils.exceptions import DuplicateError, NotFoundError, UnauthorizedError
from app.utils.jwt import create_access_token
from app.utils.password import hash_password, verify_password


class MemberService:
    """회원 관련 공통 비즈니스 로직을 처리하는 서비스."""

    def is_open_user(self, member: Member) -> bool:
        """탈퇴하지 않은 회원인지 확인합니다.

        Args:
            member: 회원 모델 (Member model)

        Returns:
            bool: 활성(open) 상태이면 True (True when the account is open)
        """
        return member.status == MEMBER_STATUS_OPEN

    def is_match_password(self, password: str | None, member: Member) -> bool:
        """요청 비밀번호가 회원의 저장된 비밀번호와 일치하는지 확인합니다.

        Args:
            password: 요청으로 받은 평문 비밀번호 (Plain password from the request)
            member: 저장된 회원 (Stored member holding the bcrypt hash)

        Returns:
            bool: 일치 여부 (Whether the password matches)
        """
        return verify_password(password, member.password)

    def encode_password(self, password: str) -> str:
        """평문 비밀번호를 저장용 해시로 변환합니다."""
        return hash_password(password)

    async def find_member_by_email(
        self,
        db: AsyncSession,
        email: str,
    ) -> Member:
        """이메일로 회원을 조회합니다.

        Raises:
            NotFoundError: 회원이 없을 때 (No member with this email)
        """
        member: Member | None = await member_repository.find_by_email(db, email)
        if member is None:
            raise NotFoundError("존재하지 않는 회원입니다.")
        return member

    async def find_member_by_member_id(
        self,
        db: AsyncSession,
        member_id: int,
    ) -> Member:
        """회원 ID로 회원을 조회합니다.

        Raises:
            NotFoundError: 회원이 없을 때 (No member with this id)
        """
        member: Member | None = await member_repository.get_by_id(db, member_id)
        if member is None:
            raise NotFoundError("존재하지 않는 회원입니다.")
        return member

    async def register(
        self,
        db: AsyncSession,
        data: RegisterRequest,
    ) -> TokenResponse:
        """회원가입 후 액세스 토큰을 발급합니다.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 회원가입 요청 데이터 (Registration request data)

        Returns:
            TokenResponse: 액세스 토큰 (Access token for the new member)

        Raises:
            DuplicateError: 같은 이메일이 이미 가입되어 있을 때 (Email already registered)
        """
        if await member_repository.find_by_email(db, data.email) is not None:
            raise DuplicateError("이미 가입된 이메일입니다.")

        member: Member = await member_repository.create(db, {
            "email": data.email,
            "password": self.encode_password(data.password),
            "name": data.name,
            "birth_day": data.birth_day,
            "tags": data.tags,
        })
        return TokenResponse(access_token=create_access_token({"sub": member.email}))

    async def login(
        self,
        db: AsyncSession,
        data: LoginRequest,
    ) -> TokenResponse:
        """이메일/비밀번호로 로그인하고 액세스 토큰을 발급합니다.

        Raises:
            UnauthorizedError: 인증 정보가 틀렸거나 탈퇴한 회원일 때
                               (Wrong credentials or withdrawn account)
        """
        member: Member | None = await member_repository.find_by_email(db, data.email)
        if member is None or not self.is_match_password(data.password, member):
            raise UnauthorizedError("Invalid email or password")

        if not self.is_open_user(member):
            raise UnauthorizedError("Account is withdrawn")

        return TokenResponse(access_token=create_access_token({"sub": member.email}))


# 싱글턴 인스턴스 — Singleton instance
member_service: MemberService = MemberService()
