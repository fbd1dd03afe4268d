"""장바구니 서비스 — 장바구니 상품 추가/조회/삭제.

Cart Service — Add, list and delete cart items for a member.
Each product converts itself to its own summary shape (to_summary()),
so listing never branches on the product variant.
"""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.cart import Cart
from app.models.member import Member
from app.models.product import Product
from app.repositories.cart_repository import cart_repository
from app.schemas.cart import CartResponse
from app.schemas.common import StatusResponse
from app.services.member_service import member_service
from app.services.product_service import product_service
from app.utils.exceptions import DuplicateError, NotFoundError

ADD_CART_FAILED: str = "장바구니 추가에 실패했습니다."
DELETE_CART_FAILED: str = "장바구니 삭제에 실패했습니다."


class CartService:
    """장바구니 비즈니스 로직을 처리하는 서비스."""

    async def add_cart(
        self,
        db: AsyncSession,
        member_id: int,
        product_id: int,
    ) -> StatusResponse:
        """장바구니에 상품을 추가합니다.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            member_id: 인증된 회원 ID (Authenticated member id)
            product_id: 추가할 상품 ID (Product to add)

        Returns:
            StatusResponse: 성공 시 "success", 이미 담긴 상품이거나 회원/상품이 없으면
                            "failed:장바구니 추가에 실패했습니다."
        """
        try:
            member: Member = await member_service.find_member_by_member_id(db, member_id)
            product: Product = await product_service.find_product_by_product_id(db, product_id)
            if await cart_repository.exists_by_member_and_product(db, member, product):
                raise DuplicateError("이미 장바구니에 담긴 상품입니다.")

            await cart_repository.save(db, Cart(member_id=member.member_id, product_id=product.product_id))
        except (NotFoundError, DuplicateError, SQLAlchemyError):
            return StatusResponse.failed(ADD_CART_FAILED)

        return StatusResponse.success()

    async def select_all_cart_products(
        self,
        db: AsyncSession,
        member_id: int,
    ) -> CartResponse:
        """회원의 장바구니 상품을 모두 조회합니다.

        data_num counts cart rows; products whose variant has no summary
        are left out of result_data.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            member_id: 인증된 회원 ID (Authenticated member id)

        Returns:
            CartResponse: 항목 수, 상태, 상품 요약 목록
                          (Item count, status and product summaries)
        """
        try:
            member: Member = await member_service.find_member_by_member_id(db, member_id)
        except NotFoundError:
            return CartResponse.fail()

        items: list[Cart] = await cart_repository.find_carts_by_member(db, member)
        summaries = (item.product.to_summary() for item in items)
        return CartResponse.success(
            data_num=len(items),
            result_data=[summary for summary in summaries if summary is not None],
        )

    async def delete_item(
        self,
        db: AsyncSession,
        member_id: int,
        product_id: int,
    ) -> StatusResponse:
        """장바구니에서 상품을 삭제합니다.

        Returns:
            StatusResponse: 성공 시 "success", 담겨 있지 않은 상품이면
                            "failed:장바구니 삭제에 실패했습니다."
        """
        try:
            member: Member = await member_service.find_member_by_member_id(db, member_id)
            product: Product = await product_service.find_product_by_product_id(db, product_id)
            if not await cart_repository.exists_by_member_and_product(db, member, product):
                raise NotFoundError("장바구니에 없는 상품입니다.")

            await cart_repository.delete_cart_by_member_and_product(db, member, product)
        except (NotFoundError, SQLAlchemyError):
            return StatusResponse.failed(DELETE_CART_FAILED)

        return StatusResponse.success()


# 싱글턴 인스턴스 — Singleton instance
cart_service: CartService = CartService()
