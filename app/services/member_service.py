"""회원 서비스 — 회원 검색 비즈니스 로직.

Member Service — Business logic behind the member search endpoints.
Wraps repository results into response envelopes and maps absent
single-record lookups to NotFoundError.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.repositories.member_repository import member_repository
from app.schemas.member import MemberSearchCondition, MemberSearchResult, MemberTeamDto
from app.utils.exceptions import NotFoundError


class MemberService:
    """회원 관련 비즈니스 로직을 처리하는 서비스.

    Service handling member search business logic.
    """

    def _to_result(self, rows: list[MemberTeamDto]) -> MemberSearchResult:
        return MemberSearchResult(count=len(rows), data=rows)

    async def search(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
    ) -> MemberSearchResult:
        """WHERE 다중 파라미터 방식으로 회원을 검색합니다.

        Search members with the parameter-list strategy.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            condition: 검색 조건 (Search condition, every field optional)

        Returns:
            MemberSearchResult: {count, data} 응답 (Envelope with row count and rows)
        """
        rows: list[MemberTeamDto] = await member_repository.search_where_param(db, condition)
        return self._to_result(rows)

    async def search_by_builder(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
    ) -> MemberSearchResult:
        """조건절 누적 방식 검색 — Search with the accumulator strategy."""
        rows: list[MemberTeamDto] = await member_repository.search_by_builder(db, condition)
        return self._to_result(rows)

    async def get_member(
        self,
        db: AsyncSession,
        member_id: int,
    ) -> MemberTeamDto:
        """회원 단건을 팀 정보와 함께 조회합니다.

        Retrieve one member joined with its team.

        Raises:
            NotFoundError: 회원을 찾을 수 없을 때 (Member not found)
        """
        row: MemberTeamDto | None = await member_repository.get_member_team(db, member_id)
        if row is None:
            raise NotFoundError("Member not found")
        return row


# 싱글턴 인스턴스 — Singleton instance
member_service: MemberService = MemberService()
