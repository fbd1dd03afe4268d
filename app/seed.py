"""초기 데이터 시드 스크립트 — 데모 회원 및 금융 상품 생성.

Seed script — Creates a demo member and one product of each variant.

Usage:
    python -m app.seed

Creates:
    - 1개 회원 계정: demo@finance.com / demo1234 (1 member)
    - 4개 상품: 카드, 대출, 예적금, 청약 (1 card, 1 loan, 1 savings, 1 subscription)
"""

import asyncio
from datetime import date

from sqlalchemy import select

from app.database import async_session, engine, Base
from app.models import Card, Loan, Member, Product, Savings, Subscription
from app.utils.password import hash_password


def sample_products() -> list[Product]:
    """유형별 샘플 상품 목록."""
    return [
        Card(
            product_name="데일리 포인트 카드",
            company_name="한빛카드",
            card_type="credit",
            annual_fee=15000,
            benefits="대중교통 10% 적립",
        ),
        Loan(
            product_name="직장인 신용대출",
            company_name="한빛은행",
            loan_type="credit",
            min_rate=4.2,
            loan_max_rate=7.9,
            loan_limit=50000000,
        ),
        Savings(
            product_name="자유적립 적금",
            company_name="한빛은행",
            savings_type="installment",
            base_rate=3.1,
            savings_max_rate=4.5,
            term_months=12,
        ),
        Subscription(
            product_name="주택청약종합저축",
            company_name="한빛은행",
            subscription_type="housing",
            monthly_payment=100000,
            term_months=24,
        ),
    ]


async def seed() -> None:
    """데이터베이스를 초기 데이터로 시드합니다.

    Creates tables if they don't exist, then inserts the demo member and
    the sample products.

    Idempotent: 이미 시드된 경우 건너뜁니다 (Skips if already seeded).
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        result = await db.execute(select(Product).limit(1))
        if result.scalar_one_or_none():
            print("Already seeded. Skipping.")
            return

        db.add(Member(
            email="demo@finance.com",
            password=hash_password("demo1234"),
            name="데모회원",
            birth_day=date(1995, 5, 17),
            tags="적금,카드",
        ))
        db.add_all(sample_products())

        await db.commit()
        print("Seeded: member=demo@finance.com/demo1234, products=4")


if __name__ == "__main__":
    asyncio.run(seed())
