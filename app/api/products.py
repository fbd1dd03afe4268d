"""상품 라우터 — 금융 상품 요약 조회.

Product Router — Read-only product summaries.
"""

from typing import Annotated, Union

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.product import (
    CardResponse,
    LoanResponse,
    ProductResponse,
    SavingsResponse,
    SubscriptionResponse,
)
from app.services.product_service import product_service

router: APIRouter = APIRouter()

# 상품 유형별 응답 — Any of the four variant summaries
ProductSummaryResponse = Union[CardResponse, LoanResponse, SavingsResponse, SubscriptionResponse]


@router.get("", response_model=list[ProductSummaryResponse])
async def list_products(
    db: Annotated[AsyncSession, Depends(get_db)],
    product_type: Annotated[str | None, Query()] = None,
) -> list[ProductResponse]:
    """상품 목록을 조회합니다. product_type(card/loan/savings/subscription)으로 필터링."""
    return await product_service.list_products(db, product_type)


@router.get("/{product_id}", response_model=ProductSummaryResponse)
async def get_product(
    product_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ProductResponse:
    """상품 요약 정보를 조회합니다."""
    return await product_service.get_product(db, product_id)
