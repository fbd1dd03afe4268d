"""create_member_product_cart

Revision ID: a1c3e5f7b9d1
Revises:
Create Date: 2026-10-18 10:00:00.000000

회원, 최근 검색어, 상품, 장바구니 테이블 생성.
Create members, search_histories, products and carts tables.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a1c3e5f7b9d1'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # members — 회원 계정 (open | withdrawn)
    op.create_table(
        'members',
        sa.Column('member_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('email', sa.String(255), nullable=False, unique=True),
        sa.Column('password', sa.String(255), nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('birth_day', sa.Date(), nullable=False),
        sa.Column('tags', sa.String(255), nullable=True),
        sa.Column('status', sa.String(20), server_default='open', nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    # search_histories — 회원별 최근 검색어 (최대 10개, id 순서 = 저장 순서)
    op.create_table(
        'search_histories',
        sa.Column('search_history_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('member_id', sa.Integer(), sa.ForeignKey('members.member_id', ondelete='CASCADE'), nullable=False),
        sa.Column('search_content', sa.String(255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint('member_id', 'search_content', name='uq_search_history_member_content'),
    )
    op.create_index('ix_search_history_member_id', 'search_histories', ['member_id'])

    # products — 단일 테이블 상속: card | loan | savings | subscription
    op.create_table(
        'products',
        sa.Column('product_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('product_type', sa.String(20), nullable=False),
        sa.Column('product_name', sa.String(255), nullable=False),
        sa.Column('company_name', sa.String(100), nullable=False),
        sa.Column('image_url', sa.String(500), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('term_months', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        # card
        sa.Column('card_type', sa.String(20), nullable=True),
        sa.Column('annual_fee', sa.Integer(), nullable=True),
        sa.Column('benefits', sa.Text(), nullable=True),
        # loan
        sa.Column('loan_type', sa.String(50), nullable=True),
        sa.Column('min_rate', sa.Float(), nullable=True),
        sa.Column('loan_max_rate', sa.Float(), nullable=True),
        sa.Column('loan_limit', sa.Integer(), nullable=True),
        # savings
        sa.Column('savings_type', sa.String(20), nullable=True),
        sa.Column('base_rate', sa.Float(), nullable=True),
        sa.Column('savings_max_rate', sa.Float(), nullable=True),
        # subscription
        sa.Column('subscription_type', sa.String(50), nullable=True),
        sa.Column('monthly_payment', sa.Integer(), nullable=True),
    )
    op.create_index('ix_products_type', 'products', ['product_type'])

    # carts — 회원당 같은 상품은 한 번만
    op.create_table(
        'carts',
        sa.Column('cart_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('member_id', sa.Integer(), sa.ForeignKey('members.member_id', ondelete='CASCADE'), nullable=False),
        sa.Column('product_id', sa.Integer(), sa.ForeignKey('products.product_id', ondelete='CASCADE'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint('member_id', 'product_id', name='uq_cart_member_product'),
    )


def downgrade() -> None:
    op.drop_table('carts')
    op.drop_index('ix_products_type', table_name='products')
    op.drop_table('products')
    op.drop_index('ix_search_history_member_id', table_name='search_histories')
    op.drop_table('search_histories')
    op.drop_table('members')
