"""장바구니 라우터 — 장바구니 상품 추가/조회/삭제.

Cart Router — Add, list and delete the authenticated member's cart items.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_member
from app.database import get_db
from app.models.member import Member
from app.schemas.cart import CartResponse
from app.schemas.common import StatusResponse
from app.services.cart_service import cart_service

router: APIRouter = APIRouter()


@router.post("/{product_id}", response_model=StatusResponse)
async def add_cart(
    product_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_member: Annotated[Member, Depends(get_current_member)],
) -> StatusResponse:
    """장바구니에 상품을 추가합니다."""
    result: StatusResponse = await cart_service.add_cart(db, current_member.member_id, product_id)
    if result.is_success:
        await db.commit()
    return result


@router.get("", response_model=CartResponse)
async def list_cart(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_member: Annotated[Member, Depends(get_current_member)],
) -> CartResponse:
    """내 장바구니 상품을 모두 조회합니다."""
    return await cart_service.select_all_cart_products(db, current_member.member_id)


@router.delete("/{product_id}", response_model=StatusResponse)
async def delete_cart_item(
    product_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_member: Annotated[Member, Depends(get_current_member)],
) -> StatusResponse:
    """장바구니에서 상품을 삭제합니다."""
    result: StatusResponse = await cart_service.delete_item(db, current_member.member_id, product_id)
    if result.is_success:
        await db.commit()
    return result
