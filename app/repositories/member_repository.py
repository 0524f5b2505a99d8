"""회원 레포지토리 — 동적 검색, 벌크 연산 및 조회 쿼리.

Member Repository — Dynamic search, bulk operations and lookup queries.

Search pipeline:
    1. 조건의 값이 있는 필드만 조건절로 변환 (Present condition fields become predicates)
    2. 모든 조건절을 AND로 결합, 없으면 WHERE 생략 (AND-combined; none means no WHERE)
    3. member LEFT OUTER JOIN team 실행 (Teamless members are kept)
    4. 각 행을 MemberTeamDto로 매핑 (Rows mapped to MemberTeamDto in store order)

Two equivalent composition styles are provided: search_by_builder grows a
clause list with if checks, search_where_param passes the results of the
per-field predicate functions straight to where().

Bulk statements bypass the session identity map. Callers must expire or
reload cached Member instances after bulk_rename / bulk_delete_older_than /
bulk_add_age.
"""

from typing import Any

from sqlalchemy import ColumnElement, Select, and_, case, delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased, joinedload

from app.models.member import Member
from app.models.team import Team
from app.repositories.base import BaseRepository
from app.schemas.member import AgeStats, MemberSearchCondition, MemberTeamDto, TeamAgeAverage


# ---------------------------------------------------------------------------
# 조건절 함수 — 값이 없으면 None (Predicate functions; None when the value is absent)
# ---------------------------------------------------------------------------
def username_eq(username: str | None) -> ColumnElement[bool] | None:
    return Member.username == username if username else None


def team_name_eq(team_name: str | None) -> ColumnElement[bool] | None:
    return Team.name == team_name if team_name else None


def age_goe(age: int | None) -> ColumnElement[bool] | None:
    return Member.age >= age if age is not None else None


def age_loe(age: int | None) -> ColumnElement[bool] | None:
    return Member.age <= age if age is not None else None


class MemberRepository(BaseRepository[Member]):
    """회원 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the member table.
    Every method performs a single round trip on the given session.
    """

    def __init__(self) -> None:
        super().__init__(Member)

    # -----------------------------------------------------------------------
    # 동적 검색 — Dynamic search
    # -----------------------------------------------------------------------
    def _member_team_query(self) -> Select:
        """회원 + 팀 프로젝션 기본 쿼리 (LEFT OUTER JOIN).

        Base projection query. LEFT OUTER JOIN keeps members without a team.
        """
        return (
            select(
                Member.id.label("member_id"),
                Member.username,
                Member.age,
                Team.id.label("team_id"),
                Team.name.label("team_name"),
            )
            .select_from(Member)
            .outerjoin(Member.team)
        )

    async def _fetch_member_team(self, db: AsyncSession, query: Select) -> list[MemberTeamDto]:
        result = await db.execute(query)
        return [MemberTeamDto.model_validate(dict(row._mapping)) for row in result.all()]

    async def search_by_builder(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
    ) -> list[MemberTeamDto]:
        """조건절 누적 방식 동적 검색.

        Accumulator-style dynamic search. Each present field appends one
        clause; the whole list is AND-combined and handed to where() once.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            condition: 검색 조건 (Partially populated search condition)

        Returns:
            list[MemberTeamDto]: 검색 결과 (Matching rows in store order)
        """
        clauses: list[ColumnElement[bool]] = []

        if condition.username:
            clauses.append(Member.username == condition.username)
        if condition.team_name:
            clauses.append(Team.name == condition.team_name)
        if condition.age_goe is not None:
            clauses.append(Member.age >= condition.age_goe)
        if condition.age_loe is not None:
            clauses.append(Member.age <= condition.age_loe)

        query: Select = self._member_team_query()
        if clauses:
            query = query.where(and_(*clauses))

        return await self._fetch_member_team(db, query)

    async def search_where_param(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
    ) -> list[MemberTeamDto]:
        """WHERE 다중 파라미터 방식 동적 검색.

        Parameter-list dynamic search. Each predicate function returns a
        clause or None; the None entries are dropped before where().
        Returns the same rows as search_by_builder for the same condition.
        """
        predicates = [
            username_eq(condition.username),
            team_name_eq(condition.team_name),
            age_goe(condition.age_goe),
            age_loe(condition.age_loe),
        ]
        query: Select = self._member_team_query().where(
            *[predicate for predicate in predicates if predicate is not None]
        )
        return await self._fetch_member_team(db, query)

    async def get_member_team(
        self,
        db: AsyncSession,
        member_id: int,
    ) -> MemberTeamDto | None:
        """ID로 회원 + 팀 프로젝션 단건 조회, 없으면 None.

        Single MemberTeamDto by member ID, or None when absent.
        """
        query: Select = self._member_team_query().where(Member.id == member_id)
        rows = await self._fetch_member_team(db, query)
        return rows[0] if rows else None

    # -----------------------------------------------------------------------
    # 단순 조회 — Plain lookups
    # -----------------------------------------------------------------------
    async def find_by_id(self, db: AsyncSession, member_id: int) -> Member | None:
        return await self.get_by_id(db, member_id)

    async def find_all(self, db: AsyncSession) -> list[Member]:
        return list(await self.get_all(db, order_by=Member.id))

    async def find_by_username(self, db: AsyncSession, username: str) -> list[Member]:
        return list(await self.get_all(db, filters={"username": username}, order_by=Member.id))

    async def find_by_team_name(
        self,
        db: AsyncSession,
        team_name: str,
    ) -> list[Member]:
        """팀에 소속된 회원 목록 (INNER JOIN).

        Members of the named team. This query is the supported way to list a
        team's members; Team.members is a read-only view.
        """
        query: Select = (
            select(Member)
            .join(Member.team)
            .where(Team.name == team_name)
            .order_by(Member.id)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def find_with_team(
        self,
        db: AsyncSession,
        member_id: int,
    ) -> Member | None:
        """팀을 페치 조인으로 함께 로드합니다.

        Load a member with its team in the same statement (JOIN fetch), so
        member.team is available without a lazy load.
        """
        query: Select = (
            select(Member)
            .options(joinedload(Member.team))
            .where(Member.id == member_id)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def find_sorted_page(
        self,
        db: AsyncSession,
        offset: int = 0,
        limit: int = 20,
    ) -> list[Member]:
        """나이 내림차순, 이름 오름차순(NULL 마지막) 정렬 후 페이징.

        Members ordered by age DESC, username ASC NULLS LAST, then paged.
        """
        query: Select = (
            select(Member)
            .order_by(Member.age.desc(), Member.username.asc().nulls_last(), Member.id)
            .offset(offset)
            .limit(limit)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    # -----------------------------------------------------------------------
    # 집계 및 서브쿼리 — Aggregates and subqueries
    # -----------------------------------------------------------------------
    async def age_stats(self, db: AsyncSession) -> AgeStats:
        query: Select = select(
            func.count(Member.id),
            func.sum(Member.age),
            func.avg(Member.age),
            func.max(Member.age),
            func.min(Member.age),
        )
        count, total, avg, oldest, youngest = (await db.execute(query)).one()
        return AgeStats(
            count=count,
            sum=total,
            avg=float(avg) if avg is not None else None,
            max=oldest,
            min=youngest,
        )

    async def team_average_ages(self, db: AsyncSession) -> list[TeamAgeAverage]:
        """팀 이름별 평균 나이 (팀 이름 순) — Average age grouped by team name."""
        query: Select = (
            select(Team.name, func.avg(Member.age))
            .select_from(Member)
            .join(Member.team)
            .group_by(Team.name)
            .order_by(Team.name)
        )
        result = await db.execute(query)
        return [
            TeamAgeAverage(team_name=name, average_age=float(average))
            for name, average in result.all()
        ]

    async def find_oldest(self, db: AsyncSession) -> list[Member]:
        """나이가 최댓값인 회원 — Members whose age equals max(age)."""
        member_sub = aliased(Member)
        query: Select = (
            select(Member)
            .where(Member.age == select(func.max(member_sub.age)).scalar_subquery())
            .order_by(Member.id)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def find_at_least_average_age(self, db: AsyncSession) -> list[Member]:
        """나이가 평균 이상인 회원 — Members with age >= avg(age)."""
        member_sub = aliased(Member)
        query: Select = (
            select(Member)
            .where(Member.age >= select(func.avg(member_sub.age)).scalar_subquery())
            .order_by(Member.id)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def age_brackets(self, db: AsyncSession) -> list[tuple[str | None, str]]:
        """CASE 식으로 연령대 분류 — (username, bracket) pairs from a CASE expression."""
        bracket = case(
            (Member.age.between(10, 19), "10s"),
            (Member.age.between(20, 29), "20s"),
            (Member.age.between(30, 39), "30s"),
            (Member.age.between(40, 49), "40s"),
            else_="other",
        )
        query: Select = select(Member.username, bracket.label("bracket")).order_by(Member.id)
        result = await db.execute(query)
        return [(username, label) for username, label in result.all()]

    # -----------------------------------------------------------------------
    # 벌크 연산 — Bulk operations (identity map is NOT synchronized)
    # -----------------------------------------------------------------------
    async def _execute_bulk(self, db: AsyncSession, statement: Any) -> int:
        result = await db.execute(statement.execution_options(synchronize_session=False))
        return result.rowcount

    async def bulk_rename(
        self,
        db: AsyncSession,
        new_username: str,
        below_age: int,
    ) -> int:
        """나이가 below_age 미만인 회원의 이름을 일괄 변경합니다.

        Set username for every member younger than below_age.

        Returns:
            int: 변경된 행 수 (Number of affected rows)
        """
        statement = update(Member).where(Member.age < below_age).values(username=new_username)
        return await self._execute_bulk(db, statement)

    async def bulk_delete_older_than(self, db: AsyncSession, age: int) -> int:
        """나이가 age 초과인 회원 일괄 삭제, 팀은 유지.

        Delete every member strictly older than age. Teams are left untouched.
        """
        statement = delete(Member).where(Member.age > age)
        return await self._execute_bulk(db, statement)

    async def bulk_add_age(self, db: AsyncSession, delta: int) -> int:
        # 빼기는 음수 delta (negative delta subtracts)
        statement = update(Member).values(age=Member.age + delta)
        return await self._execute_bulk(db, statement)


# 싱글턴 인스턴스 — Singleton instance
member_repository: MemberRepository = MemberRepository()
