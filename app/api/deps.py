"""FastAPI 의존성 주입 모듈 — 검색 조건 파싱.

FastAPI dependency injection module.
Builds a MemberSearchCondition from the camelCase query parameters
(username, teamName, ageGoe, ageLoe) shared by every search endpoint.
Non-integer age bounds are rejected by FastAPI with 422 before reaching
the service.
"""

from typing import Annotated

from fastapi import Query

from app.schemas.member import MemberSearchCondition


async def get_search_condition(
    username: Annotated[str | None, Query(description="회원 이름 일치")] = None,
    team_name: Annotated[str | None, Query(alias="teamName", description="팀 이름 일치")] = None,
    age_goe: Annotated[int | None, Query(alias="ageGoe", description="나이 하한 (이상)")] = None,
    age_loe: Annotated[int | None, Query(alias="ageLoe", description="나이 상한 (이하)")] = None,
) -> MemberSearchCondition:
    """쿼리 파라미터로 검색 조건을 만듭니다.

    Build a search condition from optional query parameters.
    Missing parameters stay None and are skipped by the search.
    """
    return MemberSearchCondition(
        username=username,
        team_name=team_name,
        age_goe=age_goe,
        age_loe=age_loe,
    )
