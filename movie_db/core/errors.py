"""Error types for the movie_db package.

Defines a small hierarchy of exceptions raised while preparing the store.
Query failures are not wrapped: they surface as SQLAlchemy exceptions.
"""

from __future__ import annotations


class MovieDbError(Exception):
    """Base error for all movie_db exceptions."""


class FixtureLoadError(MovieDbError):
    """Raised when a fixture script cannot be located, read or executed."""

    def __init__(self, resource: str, message: str) -> None:
        self.resource = resource
        super().__init__(f"Failed to load fixture '{resource}': {message}")


class StoreClosedError(MovieDbError):
    """Raised when a session is requested from a store that was closed."""

    def __init__(self, unit_name: str) -> None:
        super().__init__(f"Store for unit '{unit_name}' is closed")
