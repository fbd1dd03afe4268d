"""회원 레포지토리 — 회원 조회 및 저장 쿼리.

Member Repository — Lookup and persistence queries for members.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.member import Member
from app.repositories.base import BaseRepository


class MemberRepository(BaseRepository[Member]):
    """회원 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Member)

    async def find_by_email(
        self,
        db: AsyncSession,
        email: str,
    ) -> Member | None:
        """이메일로 회원을 조회합니다.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            email: 로그인 이메일 (Login email)

        Returns:
            Member | None: 조회된 회원 또는 None (Member or None)
        """
        query: Select = select(Member).where(Member.email == email)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def lock_by_member_id(
        self,
        db: AsyncSession,
        member_id: int,
    ) -> Member | None:
        """회원 행에 쓰기 잠금을 걸고 조회합니다 (SELECT ... FOR UPDATE).

        Lock the member row for the rest of the transaction so that writers
        acting on the same member's data are serialized.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            member_id: 회원 ID (Member identifier)

        Returns:
            Member | None: 잠긴 회원 또는 None (Locked member or None)
        """
        query: Select = (
            select(Member)
            .where(Member.member_id == member_id)
            .with_for_update()
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()


# 싱글턴 인스턴스 — Singleton instance
member_repository: MemberRepository = MemberRepository()
