from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator, Optional

from dotenv import load_dotenv
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from .models import Base

load_dotenv()

logger = logging.getLogger(__name__)

IN_MEMORY_URL = "sqlite+aiosqlite:///:memory:"


@dataclass(frozen=True)
class DatabaseConfig:
    url: str = IN_MEMORY_URL
    echo: bool = False

    @property
    def in_memory(self) -> bool:
        return ":memory:" in self.url or "mode=memory" in self.url


def load_config_from_env() -> DatabaseConfig:
    """
    Reads the store configuration from environment variables.
    Upper layers never see it, they only receive a ready Database.
    """
    url = os.getenv("DATABASE_URL", IN_MEMORY_URL)
    echo = os.getenv("DATABASE_ECHO", "0").lower() in ("1", "true", "yes")

    return DatabaseConfig(url=url, echo=echo)


class Database:
    """
    Owns the SQLAlchemy engine and session factory for the todo store.

    The store is volatile: with the default in-memory URL everything lives
    in a single shared connection and disappears on close().
    """

    def __init__(self, config: DatabaseConfig) -> None:
        self._config = config
        self._engine: Optional[AsyncEngine] = None
        self._sessions: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def connected(self) -> bool:
        return self._engine is not None

    async def connect(self) -> None:
        if self._engine is not None:
            return

        if self._config.in_memory:
            # every session must reuse the one connection holding the data
            engine = create_async_engine(
                self._config.url,
                echo=self._config.echo,
                poolclass=StaticPool,
                connect_args={"check_same_thread": False},
            )
        else:
            engine = create_async_engine(self._config.url, echo=self._config.echo)

        async with engine.begin() as connection:
            await connection.run_sync(Base.metadata.create_all)

        self._engine = engine
        self._sessions = async_sessionmaker(engine, expire_on_commit=False)
        logger.info("Database connected (in_memory=%s)", self._config.in_memory)

    async def close(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._sessions = None
            logger.info("Database closed")

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Short-lived session; commits on success, rolls back on error.
        """
        if self._sessions is None:
            raise RuntimeError("Database is not connected")

        async with self._sessions() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
