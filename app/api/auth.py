"""인증 라우터 — 회원가입 및 로그인.

Auth Router — Member registration and login endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.auth import LoginRequest, RegisterRequest, TokenResponse
from app.services.member_service import member_service

router: APIRouter = APIRouter()


@router.post("/register", response_model=TokenResponse, status_code=201)
async def register(
    data: RegisterRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TokenResponse:
    """회원가입 — 가입 후 바로 사용할 수 있는 액세스 토큰 발급.

    Register a member and return an access token.
    """
    result: TokenResponse = await member_service.register(db, data)
    await db.commit()
    return result


@router.post("/login", response_model=TokenResponse)
async def login(
    data: LoginRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TokenResponse:
    """로그인 — 이메일/비밀번호 확인 후 액세스 토큰 발급."""
    return await member_service.login(db, data)
