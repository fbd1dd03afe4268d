"""회원 및 최근 검색어 관련 SQLAlchemy ORM 모델 정의.

Member and search history SQLAlchemy ORM model definitions.

Tables:
    - members: 회원 계정 (Member accounts, open or withdrawn)
    - search_histories: 회원별 최근 검색어 (Per-member recent search keywords)
"""

from datetime import date, datetime, timezone
from sqlalchemy import String, Date, DateTime, Integer, ForeignKey, UniqueConstraint, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base

# 회원 상태 값 — Member account status values
MEMBER_STATUS_OPEN: str = "open"
MEMBER_STATUS_WITHDRAWN: str = "withdrawn"


class Member(Base):
    """회원 모델 — 스토어 회원 계정 정보.

    Member model — a registered storefront account holder.
    Email is globally unique and acts as the login identity (JWT "sub").

    Attributes:
        member_id: 회원 고유 식별자 (Auto-increment identifier)
        email: 로그인 이메일 (Login email, unique)
        password: bcrypt 해시된 비밀번호 (bcrypt-hashed password)
        name: 이름 (Display name)
        birth_day: 생년월일 (Birth date, used for age calculation)
        tags: 관심 태그 (Comma separated interest tags, optional)
        status: 계정 상태 (open | withdrawn)
        created_at: 가입 일시 UTC (Registration timestamp)
        updated_at: 수정 일시 UTC (Last update timestamp)
    """

    __tablename__ = "members"

    member_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    # 비밀번호 해시 — 평문 저장 금지 (never store plaintext)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    birth_day: Mapped[date] = mapped_column(Date, nullable=False)
    tags: Mapped[str | None] = mapped_column(String(255), nullable=True)
    # 탈퇴 시 삭제하지 않고 상태만 변경 — Withdrawal flips status, row is kept
    status: Mapped[str] = mapped_column(String(20), nullable=False, default=MEMBER_STATUS_OPEN)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # 관계 — Relationships
    search_histories = relationship("SearchHistory", back_populates="member", cascade="all, delete-orphan")
    carts = relationship("Cart", back_populates="member", cascade="all, delete-orphan")


class SearchHistory(Base):
    """최근 검색어 모델.

    Search history model — one keyword submitted by a member.
    search_history_id grows with insertion order, so the smallest id of a
    member is that member's oldest keyword.

    Constraints:
        uq_search_history_member_content: 회원별 검색어 중복 금지
                                          (A keyword is stored once per member)
    """

    __tablename__ = "search_histories"

    search_history_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    member_id: Mapped[int] = mapped_column(Integer, ForeignKey("members.member_id", ondelete="CASCADE"), nullable=False)
    search_content: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        UniqueConstraint("member_id", "search_content", name="uq_search_history_member_content"),
        Index("ix_search_history_member_id", "member_id"),
    )

    member = relationship("Member", back_populates="search_histories")
