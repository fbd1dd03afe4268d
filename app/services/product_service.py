"""상품 서비스 — 금융 상품 조회.

Product Service — Product lookup used by the cart service and product API.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.product import Product
from app.repositories.product_repository import product_repository
from app.schemas.product import ProductResponse
from app.utils.exceptions import NotFoundError


class ProductService:
    """상품 조회 비즈니스 로직을 처리하는 서비스."""

    async def find_product_by_product_id(
        self,
        db: AsyncSession,
        product_id: int,
    ) -> Product:
        """상품 ID로 상품을 조회합니다.

        Returns the concrete variant instance (Card, Loan, Savings, Subscription).

        Raises:
            NotFoundError: 상품이 없을 때 (No product with this id)
        """
        product: Product | None = await product_repository.get_by_id(db, product_id)
        if product is None:
            raise NotFoundError("존재하지 않는 상품입니다.")
        return product

    async def get_product(
        self,
        db: AsyncSession,
        product_id: int,
    ) -> ProductResponse:
        """상품 요약 정보를 조회합니다.

        Raises:
            NotFoundError: 상품이 없거나 요약을 제공하지 않는 유형일 때
        """
        product: Product = await self.find_product_by_product_id(db, product_id)
        summary: ProductResponse | None = product.to_summary()
        if summary is None:
            raise NotFoundError("존재하지 않는 상품입니다.")
        return summary

    async def list_products(
        self,
        db: AsyncSession,
        product_type: str | None = None,
    ) -> list[ProductResponse]:
        """상품 요약 목록을 조회합니다. 요약이 없는 유형은 제외됩니다."""
        products: list[Product] = await product_repository.find_by_type(db, product_type)
        summaries = (product.to_summary() for product in products)
        return [summary for summary in summaries if summary is not None]


# 싱글턴 인스턴스 — Singleton instance
product_service: ProductService = ProductService()
