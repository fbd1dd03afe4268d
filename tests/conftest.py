"""테스트 인프라 — 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — In-memory SQLite database (aiosqlite), session and
httpx client fixtures. Every test gets a fresh database; fixtures commit so
their rows survive the routers' commit-on-success handling.
"""

from collections.abc import AsyncGenerator
from datetime import date

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.models import *  # noqa: F401,F403 — register all models with metadata
from app.models.member import MEMBER_STATUS_WITHDRAWN
from app.utils.jwt import create_access_token
from app.utils.password import hash_password

# ---------------------------------------------------------------------------
# 테스트 DB 설정 — 연결 하나를 공유하는 인메모리 DB
# ---------------------------------------------------------------------------
TEST_DATABASE_URL = "sqlite+aiosqlite://"

MEMBER_PASSWORD = "member123!"


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 테스트마다 스키마를 새로 생성합니다."""
    eng = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def member(db: AsyncSession):
    """활성 회원을 생성합니다."""
    from app.models.member import Member
    m = Member(
        email="member@test.com",
        password=hash_password(MEMBER_PASSWORD),
        name="Test Member",
        birth_day=date(1990, 6, 15),
        tags="카드,적금",
    )
    db.add(m)
    await db.commit()
    return m


@pytest_asyncio.fixture
async def other_member(db: AsyncSession):
    """두 번째 활성 회원을 생성합니다."""
    from app.models.member import Member
    m = Member(
        email="other@test.com",
        password=hash_password("other123!"),
        name="Other Member",
        birth_day=date(1985, 1, 1),
    )
    db.add(m)
    await db.commit()
    return m


@pytest_asyncio.fixture
async def withdrawn_member(db: AsyncSession):
    """탈퇴한 회원을 생성합니다."""
    from app.models.member import Member
    m = Member(
        email="gone@test.com",
        password=hash_password("gone123!"),
        name="Withdrawn Member",
        birth_day=date(1980, 3, 3),
        status=MEMBER_STATUS_WITHDRAWN,
    )
    db.add(m)
    await db.commit()
    return m


@pytest_asyncio.fixture
async def products(db: AsyncSession):
    """유형별 상품을 하나씩 생성합니다."""
    from app.models.product import Card, Loan, Savings, Subscription
    result = {
        "card": Card(
            product_name="Test Card", company_name="Test Bank",
            card_type="credit", annual_fee=10000, benefits="5% cashback",
        ),
        "loan": Loan(
            product_name="Test Loan", company_name="Test Bank",
            loan_type="credit", min_rate=4.5, loan_max_rate=9.0, loan_limit=30000000,
        ),
        "savings": Savings(
            product_name="Test Savings", company_name="Test Bank",
            savings_type="installment", base_rate=3.0, savings_max_rate=4.2, term_months=12,
        ),
        "subscription": Subscription(
            product_name="Test Subscription", company_name="Test Bank",
            subscription_type="housing", monthly_payment=100000, term_months=24,
        ),
    }
    db.add_all(result.values())
    await db.commit()
    return result


def make_token(member) -> str:
    """테스트용 JWT 액세스 토큰을 생성합니다."""
    return create_access_token({"sub": member.email})


@pytest.fixture
def member_token(member) -> str:
    return make_token(member)


@pytest.fixture
def withdrawn_token(withdrawn_member) -> str:
    return make_token(withdrawn_member)


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
