"""회원 정보 및 최근 검색어 관련 Pydantic 요청/응답 스키마 정의.

Member profile and recent keyword request/response schema definitions.
"""

from datetime import date

from pydantic import BaseModel, Field

from app.schemas.common import StatusResponse


class MemberInfoResponse(StatusResponse):
    """회원 일부 정보 응답 스키마.

    Partial member profile. Only status is set when the lookup fails.

    Attributes:
        email: 이메일 (Login email)
        name: 이름 (Display name)
        age: 만 나이 (Age in whole years)
        tags: 관심 태그 (Interest tags)
    """

    email: str | None = None
    name: str | None = None
    age: int | None = None
    tags: str | None = None


class MemberInfoUpdate(BaseModel):
    """회원 정보 수정 요청 스키마 (부분 업데이트).

    Profile update request. The current password is always required and
    verified before anything is saved; other fields are applied when given.
    An explicit null clears tags; name and birth_day ignore null.

    Attributes:
        password: 현재 비밀번호 (Current password, verified against the stored hash)
        new_password: 새 비밀번호 (New password, hashed before save)
        name: 변경할 이름 (New name)
        birth_day: 변경할 생년월일 (New birth date)
        tags: 변경할 관심 태그 (New interest tags)
    """

    password: str
    new_password: str | None = None
    name: str | None = Field(default=None, max_length=100)
    birth_day: date | None = None
    tags: str | None = Field(default=None, max_length=255)


class RecentKeywordRequest(BaseModel):
    """최근 검색어 추가 요청 스키마."""

    keyword: str = Field(min_length=1, max_length=255)


class RecentKeywordListResponse(StatusResponse):
    """최근 검색어 목록 응답 스키마 — 최신순.

    Attributes:
        data_num: 검색어 개수 (Number of keywords)
        keywords: 검색어 목록, 최신순 (Keywords, most recent first)
    """

    data_num: int = 0
    keywords: list[str] = []
