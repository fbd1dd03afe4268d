"""FastAPI 의존성 주입 모듈 — 인증된 회원 식별.

FastAPI dependency injection module — Authenticated member identity.
Routers resolve the caller here and pass the identity explicitly to the
services; services never read ambient authentication state.

Authentication Flow:
    1. 클라이언트가 Authorization: Bearer <token> 헤더를 전송
       (Client sends Authorization: Bearer <token> header)
    2. HTTPBearer가 토큰을 추출 (HTTPBearer extracts the token)
    3. decode_token()이 JWT를 검증하고 "sub"(이메일)를 반환
       (decode_token verifies the JWT; "sub" carries the member email)
    4. get_current_member는 이메일로 회원을 조회하고 탈퇴 여부를 확인
       (get_current_member loads the member and rejects withdrawn accounts)
"""

from typing import Annotated

import jwt
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.member import Member
from app.repositories.member_repository import member_repository
from app.services.member_service import member_service
from app.utils.exceptions import UnauthorizedError
from app.utils.jwt import token_to_member

# HTTP Bearer 토큰 추출기 — Authorization 헤더에서 JWT 토큰 추출
security: HTTPBearer = HTTPBearer()


async def get_current_email(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(security)],
) -> str:
    """JWT 토큰에서 인증된 회원 이메일을 추출합니다.

    Args:
        credentials: HTTP Bearer 토큰 자격 증명 (Bearer token credentials from header)

    Returns:
        str: 회원 이메일 (Member email from the "sub" claim)

    Raises:
        UnauthorizedError: 토큰이 유효하지 않거나 만료됨 (Invalid or expired token)
    """
    try:
        return token_to_member(credentials.credentials)
    except jwt.InvalidTokenError:
        raise UnauthorizedError("Invalid or expired token")


async def get_current_member(
    email: Annotated[str, Depends(get_current_email)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Member:
    """인증된 회원 엔티티를 조회합니다.

    Returns:
        Member: 탈퇴하지 않은 인증 회원 (Authenticated open member)

    Raises:
        UnauthorizedError: 회원이 없거나 탈퇴한 경우 (Member missing or withdrawn)
    """
    member: Member | None = await member_repository.find_by_email(db, email)
    if member is None or not member_service.is_open_user(member):
        raise UnauthorizedError("Member not found or withdrawn")
    return member
