"""Database connectivity probe backed by a SQLAlchemy engine."""

from __future__ import annotations

import structlog
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from skeleton.services.results import ProbeResult

logger = structlog.get_logger()


class DatabaseProbe:
    """Obtains a live connection to the configured database on demand."""

    def __init__(self, url: str) -> None:
        self.url = url
        self._engine: Engine | None = None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            self._engine = create_engine(self.url, pool_pre_ping=True)
        return self._engine

    def get_connection(self) -> ProbeResult:
        """Open and release one connection from the pool.

        Every failure, engine creation included, is returned as a result.
        """
        try:
            with self.engine.connect():
                pass
        except Exception as exc:  # missing drivers surface as ImportError
            logger.warning("database_probe_failed", error=str(exc))
            return ProbeResult.failure(exc)
        return ProbeResult.success()

    def dispose(self) -> None:
        """Close pooled connections, if the engine was ever created."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
