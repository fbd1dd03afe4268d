"""회원 정보 라우터 — 내 정보 조회/수정, 최근 검색어.

Member Router — My profile read/update and recent search keywords.
Follows 3-layer architecture: Router → Service → Repository.
Writes are committed only when the service reports success; anything left
uncommitted is discarded when the request session closes.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_email
from app.database import get_db
from app.schemas.common import StatusResponse
from app.schemas.member import (
    MemberInfoResponse,
    MemberInfoUpdate,
    RecentKeywordListResponse,
    RecentKeywordRequest,
)
from app.services.member_info_service import member_info_service

router: APIRouter = APIRouter()


@router.get("/info", response_model=MemberInfoResponse)
async def get_my_info(
    db: Annotated[AsyncSession, Depends(get_db)],
    email: Annotated[str, Depends(get_current_email)],
) -> MemberInfoResponse:
    """내 정보(이메일, 이름, 나이, 태그)를 조회합니다."""
    return await member_info_service.find_some_member_info(db, email)


@router.put("/info", response_model=StatusResponse)
async def update_my_info(
    data: MemberInfoUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    email: Annotated[str, Depends(get_current_email)],
) -> StatusResponse:
    """내 정보를 수정합니다. 현재 비밀번호가 일치해야 합니다."""
    result: StatusResponse = await member_info_service.update_some_member_info(db, email, data)
    if result.is_success:
        await db.commit()
    return result


@router.post("/keywords", response_model=StatusResponse)
async def add_recent_keyword(
    data: RecentKeywordRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    authorization: Annotated[str | None, Header()] = None,
) -> StatusResponse:
    """최근 검색어를 추가합니다.

    Token problems are reported through the returned status, not as 401.
    """
    result: StatusResponse = await member_info_service.add_recent_keyword(
        db, data.keyword, authorization
    )
    if result.is_success:
        await db.commit()
    return result


@router.get("/keywords", response_model=RecentKeywordListResponse)
async def get_recent_keywords(
    db: Annotated[AsyncSession, Depends(get_db)],
    email: Annotated[str, Depends(get_current_email)],
) -> RecentKeywordListResponse:
    """최근 검색어를 최신순으로 조회합니다."""
    return await member_info_service.find_recent_keywords(db, email)
