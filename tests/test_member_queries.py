"""회원 조회 쿼리 테스트.

Member lookup and query catalogue tests — save/find, team membership,
fetch join, paging with NULLS LAST, aggregates, subqueries and CASE.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Member
from app.repositories.member_repository import member_repository
from app.repositories.team_repository import team_repository


class TestBasicLookups:
    """저장 및 기본 조회."""

    async def test_save_and_find(self, db: AsyncSession):
        """저장 후 ID, 전체, 이름으로 조회."""
        member = await member_repository.save(db, Member(username="member1", age=10))
        assert member.id is not None

        assert await member_repository.find_by_id(db, member.id) is member
        assert await member_repository.find_all(db) == [member]
        assert await member_repository.find_by_username(db, "member1") == [member]

    async def test_find_by_id_missing_returns_none(self, db: AsyncSession, members):
        """없는 ID는 예외가 아닌 None."""
        assert await member_repository.find_by_id(db, 999_999) is None

    async def test_get_member_team_missing_returns_none(self, db: AsyncSession, members):
        assert await member_repository.get_member_team(db, 999_999) is None

    async def test_find_by_username_no_match(self, db: AsyncSession, members):
        assert await member_repository.find_by_username(db, "ghost") == []

    async def test_team_lookup_by_name(self, db: AsyncSession, teams):
        team = await team_repository.get_by_name(db, "TeamB")
        assert team.id == teams["TeamB"].id
        assert await team_repository.get_by_name(db, "TeamZ") is None


class TestTeamMembers:
    """팀 소속 회원 조회."""

    async def test_find_by_team_name(self, db: AsyncSession, teamless_member):
        """TeamA 소속 회원만, 팀 없는 회원 제외."""
        result = await member_repository.find_by_team_name(db, "TeamA")
        assert [m.username for m in result] == ["Member1", "Member2"]

    async def test_find_with_team_loads_team(self, db: AsyncSession, members):
        """페치 조인으로 팀이 함께 로드됨."""
        member_id = members["Member3"].id
        db.expunge_all()

        member = await member_repository.find_with_team(db, member_id)
        assert "team" in member.__dict__
        assert member.team.name == "TeamB"

    async def test_find_with_team_teamless(self, db: AsyncSession, teamless_member):
        member_id = teamless_member.id
        db.expunge_all()

        member = await member_repository.find_with_team(db, member_id)
        assert member.team is None


class TestSortingAndPaging:
    """정렬 및 페이징."""

    async def test_sort_age_desc_username_nulls_last(self, db: AsyncSession, members):
        """나이 내림차순, 이름 오름차순, NULL 이름은 마지막."""
        for username in ("member5", "member6", None):
            await member_repository.save(db, Member(username=username, age=100))

        result = await member_repository.find_sorted_page(db, offset=0, limit=3)
        assert [m.username for m in result] == ["member5", "member6", None]

    async def test_paging(self, db: AsyncSession, members):
        result = await member_repository.find_sorted_page(db, offset=1, limit=2)
        assert [m.username for m in result] == ["Member3", "Member2"]


class TestAggregates:
    """집계 함수."""

    async def test_age_stats(self, db: AsyncSession, members):
        stats = await member_repository.age_stats(db)
        assert stats.count == 4
        assert stats.sum == 100
        assert stats.avg == 25
        assert stats.max == 40
        assert stats.min == 10

    async def test_age_stats_empty(self, db: AsyncSession):
        stats = await member_repository.age_stats(db)
        assert stats.count == 0
        assert stats.avg is None

    async def test_team_average_ages(self, db: AsyncSession, teamless_member):
        """팀별 평균 나이, 팀 없는 회원 제외."""
        result = await member_repository.team_average_ages(db)
        assert [(r.team_name, r.average_age) for r in result] == [
            ("TeamA", 15),
            ("TeamB", 35),
        ]


class TestSubqueries:
    """서브쿼리."""

    async def test_find_oldest(self, db: AsyncSession, members):
        result = await member_repository.find_oldest(db)
        assert [m.age for m in result] == [40]

    async def test_find_at_least_average_age(self, db: AsyncSession, members):
        result = await member_repository.find_at_least_average_age(db)
        assert [m.age for m in result] == [30, 40]


class TestCaseExpression:
    """CASE 식."""

    async def test_age_brackets(self, db: AsyncSession, members):
        await member_repository.save(db, Member(username="old", age=70))
        result = await member_repository.age_brackets(db)
        assert result == [
            ("Member1", "10s"),
            ("Member2", "20s"),
            ("Member3", "30s"),
            ("Member4", "40s"),
            ("old", "other"),
        ]
