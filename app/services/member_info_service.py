"""회원 정보 서비스 — 회원 정보 조회/수정, 나이 계산, 최근 검색어 관리.

Member Info Service — Profile read/update, age calculation and the bounded
recent-search-keyword history.

Every public operation except find_all_member_info returns a status
response and never raises: lookups that fail are converted to "fail" (and
logged), keyword failures to a "failed:<reason>" status.
"""

import logging
from datetime import date

import jwt
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.models.member import Member, SearchHistory
from app.repositories.member_repository import member_repository
from app.repositories.search_history_repository import search_history_repository
from app.schemas.common import StatusResponse
from app.schemas.member import (
    MemberInfoResponse,
    MemberInfoUpdate,
    RecentKeywordListResponse,
)
from app.services.member_service import member_service
from app.utils.exceptions import DuplicateError, NotFoundError
from app.utils.jwt import token_to_member

logger = logging.getLogger(__name__)

ADD_KEYWORD_FAILED: str = "최근 검색어 추가에 실패했습니다."
NULLABLE_PROFILE_FIELDS: frozenset[str] = frozenset({"tags"})


class MemberInfoService:
    """회원 정보 및 최근 검색어 비즈니스 로직을 처리하는 서비스.

    The authenticated identity is always passed in by the caller
    (email, or the raw Authorization header for keyword submission).
    """

    async def find_all_member_info(
        self,
        db: AsyncSession,
        email: str,
    ) -> Member:
        """전체 회원정보를 조회합니다.

        Load the full Member entity of the authenticated member.
        Performs no authentication itself.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            email: 인증된 회원 이메일 (Authenticated member email)

        Returns:
            Member: 회원 엔티티 (Member entity)

        Raises:
            NotFoundError: 존재하지 않거나 이미 탈퇴한 회원일 때
                           (Member missing or withdrawn)
        """
        member: Member | None = await member_repository.find_by_email(db, email)
        if member is None:
            raise NotFoundError("존재하지 않는 회원입니다.")

        if not member_service.is_open_user(member):
            raise NotFoundError("이미 탈퇴한 회원입니다.")
        return member

    async def find_some_member_info(
        self,
        db: AsyncSession,
        email: str,
    ) -> MemberInfoResponse:
        """일부 회원정보(이메일, 이름, 나이, 태그)를 조회합니다.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            email: 인증된 회원 이메일 (Authenticated member email)

        Returns:
            MemberInfoResponse: 성공 시 프로필과 "success", 조회 실패 시 "fail"만
                                (Profile with "success", or bare "fail")
        """
        try:
            member: Member = await self.find_all_member_info(db, email)
        except NotFoundError as e:
            logger.error(e.detail)
            return MemberInfoResponse.fail()

        return MemberInfoResponse.success(
            email=member.email,
            name=member.name,
            age=self.calculate_age(member.birth_day),
            tags=member.tags,
        )

    async def update_some_member_info(
        self,
        db: AsyncSession,
        email: str,
        data: MemberInfoUpdate,
    ) -> StatusResponse:
        """회원정보를 수정합니다.

        The current password must match before anything is changed; a new
        password is hashed before it is stored.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            email: 인증된 회원 이메일 (Authenticated member email)
            data: 수정 요청 데이터 (Update request data)

        Returns:
            StatusResponse: 수정 성공 시 "success", 조회 실패/비밀번호 불일치/저장 실패 시 "fail"
        """
        try:
            member: Member = await self.find_all_member_info(db, email)
        except NotFoundError as e:
            logger.error(e.detail)
            return StatusResponse.fail()

        if not member_service.is_match_password(data.password, member):
            return StatusResponse.fail()

        # 전달된 필드만 반영 — Only provided profile fields are applied
        update_data: dict = data.model_dump(
            exclude_unset=True, include={"name", "birth_day", "tags"}
        )
        for field, value in update_data.items():
            # NOT NULL 컬럼은 null로 지울 수 없음
            if value is None and field not in NULLABLE_PROFILE_FIELDS:
                continue
            setattr(member, field, value)

        if data.new_password:
            member.password = member_service.encode_password(data.new_password)

        try:
            await member_repository.save(db, member)
        except SQLAlchemyError as e:
            logger.error("회원정보 수정 실패: %s", e)
            return StatusResponse.fail()
        return StatusResponse.success()

    def calculate_age(self, birthday: date, today: date | None = None) -> int:
        """만 나이를 계산합니다.

        Whole years between birthday and today; one less while this year's
        birthday (month/day) has not been reached yet.

        Args:
            birthday: 생년월일 (Birth date)
            today: 기준 날짜, 없으면 오늘 (Reference date, defaults to today)

        Returns:
            int: 만 나이 (Age in whole years)
        """
        today = today or date.today()
        age: int = today.year - birthday.year
        if (today.month, today.day) < (birthday.month, birthday.day):
            age -= 1
        return age

    async def add_recent_keyword(
        self,
        db: AsyncSession,
        keyword: str,
        header: str | None,
    ) -> StatusResponse:
        """최근 검색어를 추가합니다.

        Resolves the member from the bearer header, rejects a keyword the
        member already has, evicts the oldest keyword once the member holds
        RECENT_KEYWORD_LIMIT entries, then stores the new one. The member row
        stays locked until the caller commits or rolls back.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            keyword: 검색어 (Search keyword)
            header: Authorization 헤더 값 (Raw Authorization header)

        Returns:
            StatusResponse: 성공 시 "success", 실패 시 "failed:최근 검색어 추가에 실패했습니다."
        """
        try:
            email: str = token_to_member(header)
            member: Member = await member_service.find_member_by_email(db, email)
            await member_repository.lock_by_member_id(db, member.member_id)

            if await search_history_repository.exists_by_member_id_and_search_content(
                db, member.member_id, keyword
            ):
                raise DuplicateError("이미 저장된 검색어입니다.")

            await self._evict_oldest_keywords(db, member.member_id)
            await search_history_repository.save(
                db, SearchHistory(member_id=member.member_id, search_content=keyword)
            )
        except (jwt.InvalidTokenError, NotFoundError, DuplicateError, SQLAlchemyError):
            return StatusResponse.failed(ADD_KEYWORD_FAILED)

        return StatusResponse.success()

    async def _evict_oldest_keywords(self, db: AsyncSession, member_id: int) -> None:
        """저장 개수가 한도에 도달했으면 가장 오래된 검색어부터 삭제합니다."""
        count: int = await search_history_repository.count_by_member_id(db, member_id)
        while count >= settings.RECENT_KEYWORD_LIMIT:
            history_id: int | None = await search_history_repository.find_oldest_element(db, member_id)
            if history_id is None:
                break
            await search_history_repository.delete_oldest_element(db, history_id)
            count -= 1

    async def find_recent_keywords(
        self,
        db: AsyncSession,
        email: str,
    ) -> RecentKeywordListResponse:
        """회원의 최근 검색어를 최신순으로 조회합니다.

        Returns:
            RecentKeywordListResponse: 성공 시 검색어 목록, 조회 실패 시 "fail"
        """
        try:
            member: Member = await self.find_all_member_info(db, email)
        except NotFoundError as e:
            logger.error(e.detail)
            return RecentKeywordListResponse.fail()

        histories: list[SearchHistory] = await search_history_repository.find_recent_by_member_id(
            db, member.member_id
        )
        return RecentKeywordListResponse.success(
            data_num=len(histories),
            keywords=[history.search_content for history in histories],
        )


# 싱글턴 인스턴스 — Singleton instance
member_info_service: MemberInfoService = MemberInfoService()
