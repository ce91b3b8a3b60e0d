from __future__ import annotations

import logging
from collections.abc import Iterator

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool

from menu_catalog.core.config import Settings

logger = logging.getLogger(__name__)


class Database:
    """Engine plus session factory, owned by one application instance."""

    def __init__(self, database_url: str, *, pool_size: int = 5, max_overflow: int = 10) -> None:
        if database_url.startswith("sqlite"):
            # a single shared connection keeps in-memory databases alive across sessions
            self.engine: Engine = create_engine(
                database_url,
                echo=False,
                future=True,
                poolclass=StaticPool,
                connect_args={"check_same_thread": False},
            )
        else:
            self.engine = create_engine(
                database_url,
                echo=False,
                future=True,
                poolclass=QueuePool,
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_timeout=30,
                pool_recycle=1800,
                pool_pre_ping=True,
            )
        self._session_factory = sessionmaker(
            bind=self.engine, expire_on_commit=False, autoflush=False, future=True
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )

    def session(self) -> Session:
        return self._session_factory()

    def get_session(self) -> Iterator[Session]:
        db = self.session()
        try:
            yield db
        finally:
            db.close()

    def health_check(self) -> bool:
        try:
            with self.session() as db:
                db.execute(text("SELECT 1"))
            return True
        except Exception as exc:  # noqa: BLE001
            logger.error("Database health check failed: %s", exc)
            return False

    def dispose(self) -> None:
        self.engine.dispose()
