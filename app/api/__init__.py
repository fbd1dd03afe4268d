"""API 라우터 패키지 — 모든 엔드포인트 통합.

API Router package — Aggregates every endpoint into a single router for
inclusion in the FastAPI application.

Included routers:
    - auth: 회원가입/로그인 (Member registration and login)
    - members: 내 정보, 최근 검색어 (My profile and recent keywords)
    - products: 상품 요약 조회 (Product summaries)
    - carts: 장바구니 (Cart)
"""

from fastapi import APIRouter

from app.api.auth import router as auth_router
from app.api.members import router as members_router
from app.api.products import router as products_router
from app.api.carts import router as carts_router

api_router: APIRouter = APIRouter()

api_router.include_router(auth_router, prefix="/auth", tags=["Auth"])
api_router.include_router(members_router, prefix="/members", tags=["Members"])
api_router.include_router(products_router, prefix="/products", tags=["Products"])
api_router.include_router(carts_router, prefix="/carts", tags=["Carts"])
