"""최근 검색어 레포지토리 — 회원별 검색어 기록 쿼리.

Search History Repository — Queries over a member's recent search keywords.
Insertion order is the search_history_id order, so "oldest" means the
smallest id for the member.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.member import SearchHistory
from app.repositories.base import BaseRepository


class SearchHistoryRepository(BaseRepository[SearchHistory]):
    """search_histories 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리."""

    def __init__(self) -> None:
        super().__init__(SearchHistory)

    async def exists_by_member_id_and_search_content(
        self,
        db: AsyncSession,
        member_id: int,
        search_content: str,
    ) -> bool:
        """회원이 같은 검색어를 이미 저장했는지 확인합니다."""
        return await self.exists(
            db, {"member_id": member_id, "search_content": search_content}
        )

    async def count_by_member_id(
        self,
        db: AsyncSession,
        member_id: int,
    ) -> int:
        """회원의 저장된 검색어 개수를 반환합니다."""
        return await self.count(db, {"member_id": member_id})

    async def find_oldest_element(
        self,
        db: AsyncSession,
        member_id: int,
    ) -> int | None:
        """회원의 가장 오래된 검색어 ID를 조회합니다.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            member_id: 회원 ID (Member identifier)

        Returns:
            int | None: 가장 오래된 search_history_id, 없으면 None
                        (Oldest entry id, or None when the member has none)
        """
        query: Select = (
            select(SearchHistory.search_history_id)
            .where(SearchHistory.member_id == member_id)
            .order_by(SearchHistory.search_history_id)
            .limit(1)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def delete_oldest_element(
        self,
        db: AsyncSession,
        search_history_id: int,
    ) -> bool:
        """find_oldest_element로 찾은 검색어를 삭제합니다."""
        return await self.delete(db, search_history_id)

    async def find_recent_by_member_id(
        self,
        db: AsyncSession,
        member_id: int,
    ) -> list[SearchHistory]:
        """회원의 검색어를 최신순으로 조회합니다."""
        query: Select = (
            select(SearchHistory)
            .where(SearchHistory.member_id == member_id)
            .order_by(SearchHistory.search_history_id.desc())
        )
        result = await db.execute(query)
        return list(result.scalars().all())


# 싱글턴 인스턴스 — Singleton instance
search_history_repository: SearchHistoryRepository = SearchHistoryRepository()
