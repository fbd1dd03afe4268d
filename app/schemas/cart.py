"""장바구니 관련 Pydantic 응답 스키마 정의.

Cart response schema definitions.
"""

from typing import Annotated, Union

from pydantic import Field

from app.schemas.common import StatusResponse
from app.schemas.product import (
    CardResponse,
    LoanResponse,
    SavingsResponse,
    SubscriptionResponse,
)

# 상품 유형별 요약 — product_type 값으로 구분 (Discriminated on product_type)
ProductSummary = Annotated[
    Union[CardResponse, LoanResponse, SavingsResponse, SubscriptionResponse],
    Field(discriminator="product_type"),
]


class CartResponse(StatusResponse):
    """장바구니 전체 조회 응답 스키마.

    Attributes:
        data_num: 장바구니 항목 수 (Number of cart rows)
        result_data: 상품 유형별 요약 목록 (Per-variant product summaries)
    """

    data_num: int = 0
    result_data: list[ProductSummary] = []
