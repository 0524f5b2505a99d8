"""회원 검색 관련 Pydantic 요청/응답 스키마 정의.

Member search Pydantic request/response schema definitions.
Wire names are camelCase (teamName, ageGoe, memberId, ...); Python attributes
stay snake_case and either name is accepted on input.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """camelCase 직렬화 베이스 — Base model serialized with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# === 검색 조건 (Search condition) ===

class MemberSearchCondition(CamelModel):
    """회원 검색 조건 — 모든 필드 선택.

    Partially populated search condition. Every unset (None or empty) field
    is skipped; a fully unset condition matches every member.

    Attributes:
        username: 회원 이름 일치 (Exact username match)
        team_name: 팀 이름 일치 (Exact team name match)
        age_goe: 나이 하한, 포함 (Inclusive lower age bound)
        age_loe: 나이 상한, 포함 (Inclusive upper age bound)
    """

    username: str | None = None
    team_name: str | None = None
    age_goe: int | None = None  # age >= age_goe
    age_loe: int | None = None  # age <= age_loe


# === 프로젝션 (Projections) ===

class MemberTeamDto(CamelModel):
    """회원 + 팀 평면 프로젝션.

    Flat projection combining a member with its team.
    team_id / team_name are None when the member has no team.
    """

    member_id: int
    username: str | None = None
    age: int
    team_id: int | None = None
    team_name: str | None = None


class MemberSearchResult(CamelModel):
    """검색 응답 봉투 — {count, data} envelope returned by the search endpoints."""

    count: int
    data: list[MemberTeamDto]


# === 집계 (Aggregates) ===

class AgeStats(CamelModel):
    """전체 회원 나이 집계.

    Age aggregates over all members. avg/max/min are None when there are no members.
    """

    count: int
    sum: int | None = None
    avg: float | None = None
    max: int | None = None
    min: int | None = None


class TeamAgeAverage(CamelModel):
    """팀별 평균 나이 — Average member age per team."""

    team_name: str
    average_age: float
