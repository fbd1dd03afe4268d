"""금융 상품 SQLAlchemy ORM 모델 정의.

Financial product SQLAlchemy ORM model definitions.
Products use single-table inheritance on product_type; each concrete
variant converts itself into its own summary schema via to_summary().

Tables:
    - products: 카드/대출/예적금/청약 상품 (Card, loan, savings, subscription products)
"""

from datetime import datetime, timezone
from sqlalchemy import String, Text, DateTime, Integer, Float, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.schemas.product import (
    CardResponse,
    LoanResponse,
    ProductResponse,
    SavingsResponse,
    SubscriptionResponse,
)


class Product(Base):
    """상품 기본 모델 — 모든 금융 상품의 공통 컬럼.

    Base product model holding the columns shared by all variants.
    Variant-specific columns are nullable at the table level.

    Attributes:
        product_id: 상품 고유 식별자 (Auto-increment identifier)
        product_type: 다형성 구분자 (Polymorphic discriminator)
        product_name: 상품명 (Product name)
        company_name: 금융사명 (Issuing company)
        image_url: 이미지 URL (Optional image URL)
        description: 상품 설명 (Optional description)
        term_months: 가입 기간 (Term in months, savings and subscriptions only)
    """

    __tablename__ = "products"

    product_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_type: Mapped[str] = mapped_column(String(20), nullable=False)
    product_name: Mapped[str] = mapped_column(String(255), nullable=False)
    company_name: Mapped[str] = mapped_column(String(100), nullable=False)
    image_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    # 가입 기간(개월) — 예적금/청약에서 사용 (Term in months, savings and subscriptions)
    term_months: Mapped[int | None] = mapped_column(Integer, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        Index("ix_products_type", "product_type"),
    )

    carts = relationship("Cart", back_populates="product", cascade="all, delete-orphan")

    __mapper_args__ = {
        "polymorphic_on": "product_type",
        "polymorphic_identity": "product",
    }

    def _base_fields(self) -> dict:
        """공통 응답 필드 — Fields shared by every summary schema."""
        return {
            "product_id": self.product_id,
            "product_name": self.product_name,
            "company_name": self.company_name,
            "image_url": self.image_url,
        }

    def to_summary(self) -> ProductResponse | None:
        """상품 요약 응답으로 변환합니다. 알 수 없는 유형은 None."""
        return None


class Card(Product):
    """카드 상품 — 신용/체크 카드."""

    card_type: Mapped[str | None] = mapped_column(String(20), nullable=True)
    annual_fee: Mapped[int | None] = mapped_column(Integer, nullable=True)
    benefits: Mapped[str | None] = mapped_column(Text, nullable=True)

    __mapper_args__ = {"polymorphic_identity": "card"}

    def to_summary(self) -> CardResponse:
        return CardResponse(
            **self._base_fields(),
            card_type=self.card_type,
            annual_fee=self.annual_fee,
            benefits=self.benefits,
        )


class Loan(Product):
    """대출 상품 — 금리 범위와 한도."""

    loan_type: Mapped[str | None] = mapped_column(String(50), nullable=True)
    min_rate: Mapped[float | None] = mapped_column(Float, nullable=True)
    loan_max_rate: Mapped[float | None] = mapped_column(Float, nullable=True)
    loan_limit: Mapped[int | None] = mapped_column(Integer, nullable=True)

    __mapper_args__ = {"polymorphic_identity": "loan"}

    def to_summary(self) -> LoanResponse:
        return LoanResponse(
            **self._base_fields(),
            loan_type=self.loan_type,
            min_rate=self.min_rate,
            max_rate=self.loan_max_rate,
            loan_limit=self.loan_limit,
        )


class Savings(Product):
    """예적금 상품 — 기본/최고 금리와 가입 기간."""

    savings_type: Mapped[str | None] = mapped_column(String(20), nullable=True)
    base_rate: Mapped[float | None] = mapped_column(Float, nullable=True)
    savings_max_rate: Mapped[float | None] = mapped_column(Float, nullable=True)

    __mapper_args__ = {"polymorphic_identity": "savings"}

    def to_summary(self) -> SavingsResponse:
        return SavingsResponse(
            **self._base_fields(),
            savings_type=self.savings_type,
            base_rate=self.base_rate,
            max_rate=self.savings_max_rate,
            term_months=self.term_months,
        )


class Subscription(Product):
    """청약 상품 — 월 납입액과 기간."""

    subscription_type: Mapped[str | None] = mapped_column(String(50), nullable=True)
    monthly_payment: Mapped[int | None] = mapped_column(Integer, nullable=True)

    __mapper_args__ = {"polymorphic_identity": "subscription"}

    def to_summary(self) -> SubscriptionResponse:
        return SubscriptionResponse(
            **self._base_fields(),
            subscription_type=self.subscription_type,
            monthly_payment=self.monthly_payment,
            term_months=self.term_months,
        )
