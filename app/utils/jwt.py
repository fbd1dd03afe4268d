"""JWT 토큰 생성 및 검증 유틸리티 모듈.

JWT token creation and verification utility module.
Provides functions for creating access tokens, decoding them, and
resolving the member identity carried by an Authorization header.

JWT Payload Structure:
    {
        "sub": "member@example.com",  # 회원 이메일 (Member email)
        "exp": 1234567890,            # 만료 시간 UNIX timestamp (Expiration)
        "type": "access"              # 토큰 유형 (Token type discriminator)
    }
"""

from datetime import datetime, timedelta, timezone
from typing import Any
import jwt

from app.config import settings

# Authorization 헤더의 Bearer 접두사 — Bearer scheme prefix
BEARER_PREFIX: str = "Bearer "


def create_access_token(data: dict[str, Any]) -> str:
    """JWT 액세스 토큰을 생성합니다.

    Generate a JWT access token with the given payload data.
    Token expires after JWT_ACCESS_TOKEN_EXPIRE_MINUTES.

    Args:
        data: JWT 페이로드 데이터. 일반적으로 {"sub": email}
              (JWT payload data, typically {"sub": email})

    Returns:
        str: 인코딩된 JWT 문자열 (Encoded JWT token string)
    """
    to_encode: dict[str, Any] = data.copy()
    expire: datetime = datetime.now(timezone.utc) + timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": expire, "type": "access"})
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> dict[str, Any]:
    """JWT 토큰을 디코딩하고 검증합니다.

    Decode and verify a JWT token string.

    Args:
        token: JWT 토큰 문자열 (Encoded JWT token string)

    Returns:
        dict[str, Any]: 디코딩된 페이로드 딕셔너리 (Decoded payload dictionary)

    Raises:
        jwt.ExpiredSignatureError: 토큰 만료 시 (When token has expired)
        jwt.InvalidTokenError: 유효하지 않은 토큰 (When token is invalid)
    """
    return jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])


def token_to_member(header: str | None) -> str:
    """Authorization 헤더에서 회원 이메일 클레임을 추출합니다.

    Resolve the member email claim from a raw Authorization header value.
    Accepts either "Bearer <token>" or a bare token.

    Args:
        header: Authorization 헤더 값 (Raw Authorization header value)

    Returns:
        str: 토큰의 "sub" 클레임 — 회원 이메일 (Member email from the "sub" claim)

    Raises:
        jwt.InvalidTokenError: 헤더가 비어 있거나, 토큰이 유효하지 않거나,
                               액세스 토큰이 아니거나, sub 클레임이 없을 때
    """
    if not header:
        raise jwt.InvalidTokenError("Missing authorization header")

    token: str = header[len(BEARER_PREFIX):] if header.startswith(BEARER_PREFIX) else header
    payload: dict[str, Any] = decode_token(token.strip())

    if payload.get("type") != "access":
        raise jwt.InvalidTokenError("Invalid token type")
    email: str | None = payload.get("sub")
    if not email:
        raise jwt.InvalidTokenError("Token has no subject")
    return email
