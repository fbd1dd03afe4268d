"""장바구니 SQLAlchemy ORM 모델 정의.

Cart SQLAlchemy ORM model definition.

Tables:
    - carts: 회원-상품 장바구니 항목 (Member-product cart entries)
"""

from datetime import datetime, timezone
from sqlalchemy import DateTime, Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Cart(Base):
    """장바구니 항목 모델.

    Cart item model — one product placed in a member's cart.

    Constraints:
        uq_cart_member_product: 회원당 같은 상품은 한 번만 (One row per member/product)
    """

    __tablename__ = "carts"

    cart_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    member_id: Mapped[int] = mapped_column(Integer, ForeignKey("members.member_id", ondelete="CASCADE"), nullable=False)
    product_id: Mapped[int] = mapped_column(Integer, ForeignKey("products.product_id", ondelete="CASCADE"), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        UniqueConstraint("member_id", "product_id", name="uq_cart_member_product"),
    )

    # 관계 — Relationships
    member = relationship("Member", back_populates="carts")
    product = relationship("Product", back_populates="carts")
