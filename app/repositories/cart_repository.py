"""장바구니 레포지토리 — 회원-상품 장바구니 쿼리.

Cart Repository — Queries over member/product cart rows.
"""

from sqlalchemy import Select, delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.cart import Cart
from app.models.member import Member
from app.models.product import Product
from app.repositories.base import BaseRepository


class CartRepository(BaseRepository[Cart]):
    """carts 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Cart)

    async def exists_by_member_and_product(
        self,
        db: AsyncSession,
        member: Member,
        product: Product,
    ) -> bool:
        """회원의 장바구니에 해당 상품이 있는지 확인합니다."""
        return await self.exists(
            db, {"member_id": member.member_id, "product_id": product.product_id}
        )

    async def find_carts_by_member(
        self,
        db: AsyncSession,
        member: Member,
    ) -> list[Cart]:
        """회원의 장바구니 항목을 상품과 함께 담은 순서대로 조회합니다.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            member: 회원 (Cart owner)

        Returns:
            list[Cart]: 상품이 로드된 장바구니 항목 목록
                        (Cart rows with their product eagerly loaded)
        """
        query: Select = (
            select(Cart)
            .options(selectinload(Cart.product))
            .where(Cart.member_id == member.member_id)
            .order_by(Cart.cart_id)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def delete_cart_by_member_and_product(
        self,
        db: AsyncSession,
        member: Member,
        product: Product,
    ) -> None:
        """회원의 장바구니에서 해당 상품을 삭제합니다."""
        await db.execute(
            delete(Cart).where(
                Cart.member_id == member.member_id,
                Cart.product_id == product.product_id,
            )
        )
        await db.flush()


# 싱글턴 인스턴스 — Singleton instance
cart_repository: CartRepository = CartRepository()
