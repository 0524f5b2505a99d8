"""회원 검색 저장소 연결 모듈.

Store connection for the member search service. DATABASE_URL picks the
driver: asyncpg for PostgreSQL deployments, aiosqlite for local runs and
tests. Every ORM model (Team, Member) registers on ``Base.metadata``, which
``create_all`` in the seed script and the Alembic env both read.
"""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from app.config import settings


def _engine_options(url: str) -> dict[str, Any]:
    """URL의 드라이버에 맞는 엔진 옵션.

    asyncpg gets a sized connection pool and no prepared-statement cache
    (PgBouncer in transaction mode). aiosqlite keeps SQLAlchemy's defaults;
    its pool does not accept pool_size.
    """
    if url.startswith("postgresql+asyncpg"):
        return {
            "pool_size": 5,
            "max_overflow": 10,
            "connect_args": {"statement_cache_size": 0},
        }
    return {}


# DEBUG=True 이면 검색 SQL 출력 (echoes the generated search SQL)
engine: AsyncEngine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    pool_pre_ping=True,
    **_engine_options(settings.DATABASE_URL),
)

# 커밋 후에도 회원/팀 속성 유지 — 만료된 속성은 AsyncSession에서 지연 로딩 불가
async_session: async_sessionmaker[AsyncSession] = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Team/Member 테이블 메타데이터 등록용 베이스."""


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """요청당 하나의 세션 — 검색 엔드포인트용 FastAPI 의존성.

    Search endpoints only read, so nothing is committed here; the session is
    closed (and any implicit transaction rolled back) when the request ends.
    Tests override this dependency with their own rollback-scoped session.
    """
    async with async_session() as session:
        yield session
