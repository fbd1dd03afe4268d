"""장바구니 서비스 테스트.

Cart service tests — add/delete idempotency, per-member carts, and the
per-variant product summaries returned by the cart listing.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.product import Card, Product, Savings
from app.repositories.cart_repository import cart_repository
from app.services.cart_service import cart_service

ADD_FAILED = "failed:장바구니 추가에 실패했습니다."
DELETE_FAILED = "failed:장바구니 삭제에 실패했습니다."


async def cart_size(db: AsyncSession, member_id: int) -> int:
    return await cart_repository.count(db, {"member_id": member_id})


class TestAddCart:
    """장바구니 추가 테스트."""

    async def test_add(self, db: AsyncSession, member, products):
        result = await cart_service.add_cart(db, member.member_id, products["card"].product_id)
        assert result.status == "success"
        assert await cart_size(db, member.member_id) == 1

    async def test_duplicate_add_fails(self, db: AsyncSession, member, products):
        """같은 상품을 두 번 담으면 두 번째는 실패하고 개수는 그대로."""
        product_id = products["loan"].product_id
        first = await cart_service.add_cart(db, member.member_id, product_id)
        second = await cart_service.add_cart(db, member.member_id, product_id)

        assert first.status == "success"
        assert second.status == ADD_FAILED
        assert await cart_size(db, member.member_id) == 1

    async def test_unknown_product_fails(self, db: AsyncSession, member, products):
        result = await cart_service.add_cart(db, member.member_id, 9999)
        assert result.status == ADD_FAILED
        assert await cart_size(db, member.member_id) == 0

    async def test_unknown_member_fails(self, db: AsyncSession, products):
        result = await cart_service.add_cart(db, 9999, products["card"].product_id)
        assert result.status == ADD_FAILED

    async def test_same_product_for_different_members(self, db: AsyncSession, member, other_member, products):
        product_id = products["savings"].product_id
        assert (await cart_service.add_cart(db, member.member_id, product_id)).status == "success"
        assert (await cart_service.add_cart(db, other_member.member_id, product_id)).status == "success"


class TestDeleteItem:
    """장바구니 삭제 테스트."""

    async def test_delete_twice(self, db: AsyncSession, member, products):
        """삭제 후 다시 삭제하면 성공 후 실패."""
        product_id = products["subscription"].product_id
        await cart_service.add_cart(db, member.member_id, product_id)

        first = await cart_service.delete_item(db, member.member_id, product_id)
        second = await cart_service.delete_item(db, member.member_id, product_id)

        assert first.status == "success"
        assert second.status == DELETE_FAILED
        assert await cart_size(db, member.member_id) == 0

    async def test_delete_absent_item_fails(self, db: AsyncSession, member, products):
        result = await cart_service.delete_item(db, member.member_id, products["card"].product_id)
        assert result.status == DELETE_FAILED

    async def test_delete_only_own_item(self, db: AsyncSession, member, other_member, products):
        product_id = products["card"].product_id
        await cart_service.add_cart(db, other_member.member_id, product_id)

        result = await cart_service.delete_item(db, member.member_id, product_id)
        assert result.status == DELETE_FAILED
        assert await cart_size(db, other_member.member_id) == 1

    async def test_delete_unknown_product_fails(self, db: AsyncSession, member):
        result = await cart_service.delete_item(db, member.member_id, 9999)
        assert result.status == DELETE_FAILED


class TestSelectAllCartProducts:
    """장바구니 전체 조회 테스트."""

    async def test_four_variants(self, db: AsyncSession, member, products):
        """유형별 상품 네 개는 각자의 응답 형태로 변환된다."""
        for key in ["card", "loan", "savings", "subscription"]:
            await cart_service.add_cart(db, member.member_id, products[key].product_id)

        result = await cart_service.select_all_cart_products(db, member.member_id)
        assert result.status == "success"
        assert result.data_num == 4
        assert [item.product_type for item in result.result_data] == [
            "card", "loan", "savings", "subscription",
        ]

        card, loan, savings, subscription = result.result_data
        assert card.card_type == "credit"
        assert card.annual_fee == 10000
        assert card.benefits == "5% cashback"
        assert loan.min_rate == 4.5
        assert loan.max_rate == 9.0
        assert loan.loan_limit == 30000000
        assert savings.base_rate == 3.0
        assert savings.max_rate == 4.2
        assert savings.term_months == 12
        assert subscription.monthly_payment == 100000
        assert subscription.term_months == 24
        assert all(item.company_name == "Test Bank" for item in result.result_data)

    async def test_empty_cart(self, db: AsyncSession, member):
        result = await cart_service.select_all_cart_products(db, member.member_id)
        assert result.status == "success"
        assert result.data_num == 0
        assert result.result_data == []

    async def test_unrecognized_variant_skipped(self, db: AsyncSession, member, products):
        """요약을 제공하지 않는 상품은 결과 목록에서 제외된다."""
        plain = Product(product_name="Plain", company_name="Test Bank")
        db.add(plain)
        await db.commit()

        await cart_service.add_cart(db, member.member_id, plain.product_id)
        await cart_service.add_cart(db, member.member_id, products["card"].product_id)

        result = await cart_service.select_all_cart_products(db, member.member_id)
        assert result.data_num == 2
        assert len(result.result_data) == 1
        assert result.result_data[0].product_type == "card"

    async def test_variant_with_null_columns(self, db: AsyncSession, member):
        """유형별 컬럼이 비어 있는 상품도 None 필드로 조회된다."""
        card = Card(product_name="Bare Card", company_name="Test Bank")
        savings = Savings(
            product_name="Bare Savings", company_name="Test Bank",
            savings_type="deposit", base_rate=2.0, savings_max_rate=3.0,
        )
        db.add_all([card, savings])
        await db.commit()

        await cart_service.add_cart(db, member.member_id, card.product_id)
        await cart_service.add_cart(db, member.member_id, savings.product_id)

        result = await cart_service.select_all_cart_products(db, member.member_id)
        assert result.status == "success"
        assert result.data_num == 2

        card_summary, savings_summary = result.result_data
        assert card_summary.product_type == "card"
        assert card_summary.card_type is None
        assert card_summary.annual_fee is None
        assert savings_summary.product_type == "savings"
        assert savings_summary.term_months is None
        assert savings_summary.base_rate == 2.0

    async def test_only_own_items(self, db: AsyncSession, member, other_member, products):
        await cart_service.add_cart(db, other_member.member_id, products["loan"].product_id)

        result = await cart_service.select_all_cart_products(db, member.member_id)
        assert result.data_num == 0

    async def test_unknown_member_fails(self, db: AsyncSession):
        result = await cart_service.select_all_cart_products(db, 9999)
        assert result.status == "fail"
