"""테스트 인프라 — 임시 DB, 세션, httpx 클라이언트, 샘플 회원 픽스처.

Test infrastructure — Temporary database, session, httpx client and the
four-member sample fixture. Runs on in-memory SQLite (aiosqlite) unless
TEST_DATABASE_URL points somewhere else. Schema is created and dropped per test.
"""

import os
from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.models import Member, Team
from app.repositories.member_repository import member_repository
from app.repositories.team_repository import team_repository

# ---------------------------------------------------------------------------
# 테스트 DB 설정
# ---------------------------------------------------------------------------
TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 테스트마다 스키마를 생성/삭제합니다."""
    options = {"poolclass": StaticPool} if TEST_DATABASE_URL.startswith("sqlite") else {}
    eng = create_async_engine(TEST_DATABASE_URL, echo=False, **options)

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await eng.dispose()


@pytest_asyncio.fixture
async def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def teams(db: AsyncSession) -> dict[str, Team]:
    """TeamA, TeamB를 생성합니다."""
    return {
        name: await team_repository.create(db, {"name": name})
        for name in ("TeamA", "TeamB")
    }


@pytest_asyncio.fixture
async def members(db: AsyncSession, teams: dict[str, Team]) -> dict[str, Member]:
    """Member1(10, TeamA), Member2(20, TeamA), Member3(30, TeamB), Member4(40, TeamB)."""
    result = {}
    for username, age, team_name in [
        ("Member1", 10, "TeamA"),
        ("Member2", 20, "TeamA"),
        ("Member3", 30, "TeamB"),
        ("Member4", 40, "TeamB"),
    ]:
        member = Member(username=username, age=age, team_id=teams[team_name].id)
        result[username] = await member_repository.save(db, member)
    return result


@pytest_asyncio.fixture
async def teamless_member(db: AsyncSession, members: dict[str, Member]) -> Member:
    """팀이 없는 회원을 추가합니다."""
    return await member_repository.create(db, {"username": "Solo", "age": 50})
