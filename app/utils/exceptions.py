"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes for the member and cart services.
Services raise these internally; member-info, keyword and cart operations
catch them at the service boundary and turn them into a status response,
while auth dependencies let them surface as HTTP errors.

Usage:
    from app.utils.exceptions import NotFoundError, DuplicateError
    raise NotFoundError("존재하지 않는 회원입니다.")
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found — 회원/상품/장바구니 항목을 찾을 수 없을 때.

    Raised when a member (missing or withdrawn), product or cart item
    does not exist.
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class DuplicateError(HTTPException):
    """409 Conflict — 중복 검색어, 중복 장바구니 항목, 중복 이메일 가입 시."""

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class UnauthorizedError(HTTPException):
    """401 Unauthorized — 토큰 누락/만료/위조, 로그인 실패 시."""

    def __init__(self, detail: str = "Authentication required") -> None:
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)
