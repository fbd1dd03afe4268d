"""인증 관련 Pydantic 요청/응답 스키마 정의.

Authentication request/response schema definitions.
Covers member registration, login and access token issuance.
"""

from datetime import date

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """회원 로그인 요청 스키마.

    Attributes:
        email: 로그인 이메일 (Login email)
        password: 비밀번호 (Plain text, compared to the bcrypt hash)
    """

    email: str
    password: str


class RegisterRequest(BaseModel):
    """회원가입 요청 스키마.

    Attributes:
        email: 로그인 이메일 (Login email, unique)
        password: 비밀번호 (Plain text, hashed on the server)
        name: 이름 (Display name)
        birth_day: 생년월일 (Birth date)
        tags: 관심 태그 (Interest tags, optional)
    """

    email: str
    password: str = Field(min_length=4)
    name: str
    birth_day: date
    tags: str | None = None


class TokenResponse(BaseModel):
    """JWT 토큰 발급 응답 스키마.

    Attributes:
        access_token: JWT 액세스 토큰 (Access token)
        token_type: 토큰 유형 (Always "bearer")
    """

    access_token: str
    token_type: str = "bearer"
