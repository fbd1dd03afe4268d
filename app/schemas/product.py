"""금융 상품 응답 Pydantic 스키마 정의.

Financial product response schema definitions.
Each product variant (card, loan, savings, subscription) has its own
summary shape; all share the ProductResponse base fields. Variant columns
are nullable, so every variant field is optional here.
"""

from typing import Literal

from pydantic import BaseModel


class ProductResponse(BaseModel):
    """상품 공통 응답 스키마.

    Fields shared by every product summary.

    Attributes:
        product_id: 상품 ID (Product identifier)
        product_type: 상품 유형 (card | loan | savings | subscription)
        product_name: 상품명 (Product name)
        company_name: 금융사명 (Issuing company)
        image_url: 상품 이미지 URL (Optional image URL)
    """

    product_id: int
    product_type: str
    product_name: str
    company_name: str
    image_url: str | None = None


class CardResponse(ProductResponse):
    """카드 상품 응답 스키마."""

    product_type: Literal["card"] = "card"
    card_type: str | None = None  # 신용/체크 (credit | check)
    annual_fee: int | None = None  # 연회비 (원)
    benefits: str | None = None


class LoanResponse(ProductResponse):
    """대출 상품 응답 스키마."""

    product_type: Literal["loan"] = "loan"
    loan_type: str | None = None
    min_rate: float | None = None  # 최저 금리 (%)
    max_rate: float | None = None  # 최고 금리 (%)
    loan_limit: int | None = None  # 대출 한도 (원)


class SavingsResponse(ProductResponse):
    """예적금 상품 응답 스키마."""

    product_type: Literal["savings"] = "savings"
    savings_type: str | None = None  # 예금/적금 (deposit | installment)
    base_rate: float | None = None
    max_rate: float | None = None
    term_months: int | None = None


class SubscriptionResponse(ProductResponse):
    """청약 상품 응답 스키마."""

    product_type: Literal["subscription"] = "subscription"
    subscription_type: str | None = None
    monthly_payment: int | None = None  # 월 납입액 (원)
    term_months: int | None = None
