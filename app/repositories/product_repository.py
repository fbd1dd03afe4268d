"""상품 레포지토리 — 금융 상품 조회 쿼리.

Product Repository — Read queries over the polymorphic products table.
Rows come back as their concrete variant (Card, Loan, Savings, Subscription).
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.product import Product
from app.repositories.base import BaseRepository


class ProductRepository(BaseRepository[Product]):
    """products 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Product)

    async def find_by_type(
        self,
        db: AsyncSession,
        product_type: str | None = None,
    ) -> list[Product]:
        """상품 유형으로 필터링한 상품 목록을 조회합니다 (None이면 전체)."""
        products = await self.get_all(
            db,
            filters={"product_type": product_type},
            order_by=Product.product_id,
        )
        return list(products)


# 싱글턴 인스턴스 — Singleton instance
product_repository: ProductRepository = ProductRepository()
