"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package registers every model with the SQLAlchemy
metadata, which relationship resolution and Alembic rely on.

Modules:
    member: 회원 및 최근 검색어 (Member and SearchHistory)
    product: 금융 상품 — 카드, 대출, 예적금, 청약 (Product and its four variants)
    cart: 장바구니 항목 (Cart)
"""

from app.models.member import Member, SearchHistory
from app.models.product import Product, Card, Loan, Savings, Subscription
from app.models.cart import Cart

__all__ = [
    "Member", "SearchHistory",
    "Product", "Card", "Loan", "Savings", "Subscription",
    "Cart",
]
