"""회원 검색 라우터 — 동적 검색 엔드포인트.

Member Search Router — Dynamic member search endpoints.

Endpoints:
    - GET /v1/members: WHERE 다중 파라미터 방식 검색 (Parameter-list strategy)
    - GET /v2/members: 조건절 누적 방식 검색 (Accumulator strategy)
    - GET /v1/members/{member_id}: 회원 단건 조회 (Single member with team)
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_search_condition
from app.database import get_db
from app.schemas.member import MemberSearchCondition, MemberSearchResult, MemberTeamDto
from app.services.member_service import member_service

router: APIRouter = APIRouter()


@router.get("/v1/members", response_model=MemberSearchResult)
async def search_members_v1(
    db: Annotated[AsyncSession, Depends(get_db)],
    condition: Annotated[MemberSearchCondition, Depends(get_search_condition)],
) -> MemberSearchResult:
    """조건에 맞는 회원을 팀 정보와 함께 검색합니다.

    Search members joined with their team. Every parameter is optional;
    without parameters all members are returned.
    """
    return await member_service.search(db, condition)


@router.get("/v2/members", response_model=MemberSearchResult)
async def search_members_v2(
    db: Annotated[AsyncSession, Depends(get_db)],
    condition: Annotated[MemberSearchCondition, Depends(get_search_condition)],
) -> MemberSearchResult:
    """v1과 동일한 결과, 조건절 누적 방식 사용.

    Same contract as /v1/members, built with the accumulator strategy.
    """
    return await member_service.search_by_builder(db, condition)


@router.get("/v1/members/{member_id}", response_model=MemberTeamDto)
async def get_member(
    member_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MemberTeamDto:
    """회원 단건을 조회합니다. 없으면 404.

    Retrieve one member with its team, or 404 when absent.
    """
    return await member_service.get_member(db, member_id)
