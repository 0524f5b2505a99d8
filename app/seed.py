"""샘플 데이터 시드 스크립트 — 팀 2개, 회원 100명 생성.

Seed script — Creates the sample teams and members.
Runs on startup under APP_PROFILE=local, or manually.

Usage:
    python -m app.seed

Creates:
    - 2개 팀: TeamA, TeamB (2 teams)
    - 100명 회원: Member0 ~ Member99, 나이 = 번호, 짝수는 TeamA / 홀수는 TeamB
      (100 members, age = index, even index in TeamA, odd in TeamB)
"""

import asyncio

from sqlalchemy import select

from app.database import Base, async_session, engine
from app.models import Member, Team

SAMPLE_MEMBER_COUNT: int = 100


async def seed() -> None:
    """데이터베이스를 샘플 데이터로 시드합니다.

    Create tables if needed and insert the sample data.

    Idempotent: 회원이 이미 있으면 건너뜁니다 (Skips if any member exists).
    """
    # 테이블 생성 — Create all tables from ORM metadata
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        result = await db.execute(select(Member.id).limit(1))
        if result.scalar_one_or_none() is not None:
            print("Already seeded. Skipping.")
            return

        # 팀을 회원보다 먼저 생성 — Teams are created before their members
        team_a: Team = Team(name="TeamA")
        team_b: Team = Team(name="TeamB")
        db.add_all([team_a, team_b])
        await db.flush()

        for i in range(SAMPLE_MEMBER_COUNT):
            selected_team: Team = team_a if i % 2 == 0 else team_b
            db.add(Member(username=f"Member{i}", age=i, team_id=selected_team.id))

        await db.commit()
        print(f"Seeded: teams=2, members={SAMPLE_MEMBER_COUNT}")


if __name__ == "__main__":
    asyncio.run(seed())
