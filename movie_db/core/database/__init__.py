"""
Database layer for movie_db.

Structure:
- entities/: SQLModel table models, one module per table
- repositories/: Read-only query layer
- store.py: MovieStore handle (engine + session factory for one unit)
- fixtures.py: Idempotent fixture loading from a SQL script
- utils.py: Engine, session factory and table creation helpers
"""

from .base import Base
from .fixtures import FixtureLoader, load_fixture, resolve_fixture, split_statements
from .store import MovieStore
from .utils import create_all, create_engine, create_sessionmaker

__all__ = [
    "Base",
    "FixtureLoader",
    "MovieStore",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "load_fixture",
    "resolve_fixture",
    "split_statements",
]
