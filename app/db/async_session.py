"""Async SQLAlchemy engine and session management for the problem list store."""

from __future__ import annotations

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from app.core.config import Settings, settings


def _to_async_uri(uri: str) -> str:
    for prefix in ("postgresql+psycopg2://", "postgresql://", "postgres://"):
        if uri.startswith(prefix):
            return uri.replace(prefix, "postgresql+asyncpg://", 1)
    return uri


def build_async_engine(app_settings: Settings) -> AsyncEngine:
    return create_async_engine(
        _to_async_uri(app_settings.sqlalchemy_database_uri),
        pool_pre_ping=True,
        pool_recycle=1800,
    )


async_engine = build_async_engine(settings)

AsyncSessionLocal = async_sessionmaker(
    bind=async_engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    async with AsyncSessionLocal() as db:
        yield db
