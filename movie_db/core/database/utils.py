"""
Database utility functions for engine and session management.

This module provides the core utility functions for creating database engines
and session factories.

Functions:
- create_engine: Creates a SQLAlchemy engine, enabling FK enforcement on SQLite
- create_sessionmaker: Creates a SQLModel session factory with safe defaults
- create_all: Creates all tables from the entity metadata
"""

from __future__ import annotations

from sqlalchemy import event
from sqlalchemy import create_engine as sa_create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import Session

from . import entities  # noqa: F401  (registers tables on the metadata)
from .base import Base


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine(db_url: str, *, echo: bool = False) -> Engine:
    """Create a SQLAlchemy engine.

    SQLite does not enforce foreign keys unless asked to per connection, so a
    connect hook turns enforcement on for every pooled SQLite connection.

    Args:
        db_url: Database connection URL
        echo: Log every emitted statement

    Returns:
        Configured Engine instance
    """
    engine = sa_create_engine(db_url, echo=echo, pool_pre_ping=True)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def create_sessionmaker(engine: Engine) -> sessionmaker[Session]:
    """Create a ``sessionmaker`` producing SQLModel sessions.

    Args:
        engine: SQLAlchemy engine

    Returns:
        Configured session factory
    """
    return sessionmaker(bind=engine, class_=Session, expire_on_commit=False)


def create_all(engine: Engine) -> None:
    """Create all tables for the current entity metadata.

    Existing tables are left untouched.

    Args:
        engine: SQLAlchemy engine
    """
    Base.metadata.create_all(engine)
