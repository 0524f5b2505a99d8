"""회원 검색 API 테스트.

Member search API tests — query parameter binding, {count, data} envelope,
camelCase wire names, validation and 404 handling.
"""

from httpx import AsyncClient

URL_V1 = "/v1/members"
URL_V2 = "/v2/members"


class TestHealth:
    async def test_health(self, client: AsyncClient):
        res = await client.get("/health")
        assert res.status_code == 200
        assert res.json() == {"status": "ok"}


class TestSearchMembers:
    """GET /v1/members."""

    async def test_search_by_team_and_age(self, client: AsyncClient, members, teams):
        """teamName=TeamB, ageGoe=32, ageLoe=40 → Member4."""
        res = await client.get(URL_V1, params={"teamName": "TeamB", "ageGoe": 32, "ageLoe": 40})
        assert res.status_code == 200
        assert res.json() == {
            "count": 1,
            "data": [{
                "memberId": members["Member4"].id,
                "username": "Member4",
                "age": 40,
                "teamId": teams["TeamB"].id,
                "teamName": "TeamB",
            }],
        }

    async def test_search_without_params(self, client: AsyncClient, members):
        """파라미터 없이 전체 조회."""
        res = await client.get(URL_V1)
        assert res.status_code == 200
        data = res.json()
        assert data["count"] == 4
        assert sorted(d["username"] for d in data["data"]) == ["Member1", "Member2", "Member3", "Member4"]

    async def test_search_by_username(self, client: AsyncClient, members):
        res = await client.get(URL_V1, params={"username": "Member1"})
        assert res.status_code == 200
        assert [d["age"] for d in res.json()["data"]] == [10]

    async def test_inverted_bounds(self, client: AsyncClient, members):
        """범위가 뒤집히면 빈 결과."""
        res = await client.get(URL_V1, params={"ageGoe": 25, "ageLoe": 20})
        assert res.status_code == 200
        assert res.json() == {"count": 0, "data": []}

    async def test_teamless_member_has_null_team(self, client: AsyncClient, teamless_member):
        res = await client.get(URL_V1, params={"username": "Solo"})
        assert res.status_code == 200
        row = res.json()["data"][0]
        assert row["teamId"] is None
        assert row["teamName"] is None

    async def test_invalid_age_param(self, client: AsyncClient):
        """정수가 아닌 나이 조건은 422."""
        res = await client.get(URL_V1, params={"ageGoe": "abc"})
        assert res.status_code == 422


class TestSearchMembersV2:
    """GET /v2/members — v1과 동일한 결과."""

    async def test_same_as_v1(self, client: AsyncClient, teamless_member):
        for params in [
            {},
            {"teamName": "TeamA"},
            {"ageGoe": 15, "ageLoe": 45},
            {"username": "Member3", "teamName": "TeamB"},
            {"ageGoe": 25, "ageLoe": 20},
        ]:
            v1 = (await client.get(URL_V1, params=params)).json()
            v2 = (await client.get(URL_V2, params=params)).json()
            assert v1["count"] == v2["count"]
            key = lambda d: d["memberId"]  # noqa: E731
            assert sorted(v1["data"], key=key) == sorted(v2["data"], key=key)


class TestGetMember:
    """GET /v1/members/{member_id}."""

    async def test_get_member(self, client: AsyncClient, members):
        member = members["Member2"]
        res = await client.get(f"{URL_V1}/{member.id}")
        assert res.status_code == 200
        data = res.json()
        assert data["username"] == "Member2"
        assert data["teamName"] == "TeamA"

    async def test_get_nonexistent_member(self, client: AsyncClient, members):
        """존재하지 않는 회원 조회 시 404."""
        res = await client.get(f"{URL_V1}/999999")
        assert res.status_code == 404
        assert res.json()["detail"] == "Member not found"
