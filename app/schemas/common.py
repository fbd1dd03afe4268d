"""공통 Pydantic 응답 스키마 정의.

Common response schema definitions.
StatusResponse is the uniform result object returned by every member-info,
keyword and cart operation: "success", "fail" or "failed:<reason>".
"""

from pydantic import BaseModel

STATUS_SUCCESS: str = "success"
STATUS_FAIL: str = "fail"
# 실패 사유가 있을 때의 접두사 — Prefix used when a failure carries a reason
STATUS_FAILED_PREFIX: str = "failed:"


class StatusResponse(BaseModel):
    """상태 코드 응답 스키마.

    Status-only response. Subclasses add payload fields that are filled on
    success and left empty on failure.

    Attributes:
        status: 처리 결과 (success | fail | failed:<reason>)
    """

    status: str

    @classmethod
    def success(cls, **fields):
        """성공 응답을 생성합니다."""
        return cls(status=STATUS_SUCCESS, **fields)

    @classmethod
    def fail(cls):
        """사유 없는 실패 응답을 생성합니다."""
        return cls(status=STATUS_FAIL)

    @classmethod
    def failed(cls, reason: str):
        """사유가 포함된 실패 응답을 생성합니다 ("failed:<reason>")."""
        return cls(status=f"{STATUS_FAILED_PREFIX}{reason}")

    @property
    def is_success(self) -> bool:
        return self.status == STATUS_SUCCESS
