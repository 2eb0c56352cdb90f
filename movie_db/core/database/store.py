"""
Store handle owning the engine and session factory of one database unit.

``MovieStore`` is created once, passed explicitly to whoever needs database
access, and closed once. There is no module-level engine: two stores opened
on different units are fully independent.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import Session

from movie_db.core.config import DatabaseConfig, settings
from movie_db.core.errors import StoreClosedError
from movie_db.core.logging_config import get_logger

from .utils import create_all, create_engine, create_sessionmaker

logger = get_logger(__name__)


class MovieStore:
    """Handle on an opened database unit."""

    def __init__(self, unit_name: str, engine: Engine, session_factory: sessionmaker[Session]) -> None:
        self.unit_name = unit_name
        self.engine = engine
        self.session_factory = session_factory
        self._closed = False

    @classmethod
    def open(cls, config: Optional[DatabaseConfig] = None) -> "MovieStore":
        """Open the configured unit and make sure its tables exist.

        Args:
            config: Database unit to open; defaults to ``settings.database``

        Returns:
            An open store
        """
        config = config or settings.database
        engine = create_engine(config.resolved_url(), echo=config.echo)
        create_all(engine)
        logger.info(f"Opened store for unit '{config.unit_name}' ({engine.url.render_as_string(hide_password=True)})")
        return cls(config.unit_name, engine, create_sessionmaker(engine))

    @property
    def closed(self) -> bool:
        return self._closed

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Yield a fresh session, closed on exit whatever the outcome.

        Raises:
            StoreClosedError: If the store was already closed
        """
        if self._closed:
            raise StoreClosedError(self.unit_name)
        session = self.session_factory()
        try:
            yield session
        finally:
            session.close()

    def close(self) -> None:
        """Dispose the engine. Closing twice is a no-op."""
        if self._closed:
            return
        self.engine.dispose()
        self._closed = True
        logger.info(f"Closed store for unit '{self.unit_name}'")

    def __enter__(self) -> "MovieStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"MovieStore(unit_name={self.unit_name}, closed={self._closed})"
