"""Unit tests for MovieStore and the engine helpers."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from sqlalchemy import inspect, text
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from movie_db.core.config import DatabaseConfig
from movie_db.core.database import MovieStore, create_engine, create_sessionmaker
from movie_db.core.errors import StoreClosedError


@pytest.fixture
def config(tmp_path: Path) -> DatabaseConfig:
    return DatabaseConfig(unit_name="unit_test", url=f"sqlite:///{tmp_path / 'unit.sqlite3'}")


class TestSessionScope:
    """Session acquisition and release, with a mocked factory."""

    @pytest.fixture
    def store(self):
        return MovieStore("mocked", engine=MagicMock(), session_factory=MagicMock())

    def test_session_closed_after_success(self, store):
        with store.session() as session:
            assert session is store.session_factory.return_value

        session.close.assert_called_once()

    def test_session_closed_after_failure(self, store):
        with pytest.raises(AssertionError):
            with store.session():
                raise AssertionError("query mismatch")

        store.session_factory.return_value.close.assert_called_once()

    def test_close_disposes_engine_once(self, store):
        store.close()
        store.close()

        store.engine.dispose.assert_called_once()
        assert store.closed

    def test_session_after_close_raises(self, store):
        store.close()

        with pytest.raises(StoreClosedError, match="mocked"):
            with store.session():
                pass
        store.session_factory.assert_not_called()


class TestOpen:
    """MovieStore.open against a SQLite file."""

    def test_open_creates_tables(self, config):
        with MovieStore.open(config) as store:
            tables = set(inspect(store.engine).get_table_names())

        assert {"actor", "director", "film", "film_director", "role"} <= tables
        assert store.closed

    def test_open_yields_sqlmodel_sessions(self, config):
        with MovieStore.open(config) as store, store.session() as session:
            assert isinstance(session, Session)
            assert store.unit_name == "unit_test"

    def test_reopen_keeps_existing_rows(self, config):
        with MovieStore.open(config) as store, store.session() as session:
            session.exec(text("INSERT INTO actor (id, identity) VALUES (1, 'A.J. Danna')"))
            session.commit()

        with MovieStore.open(config) as store, store.session() as session:
            assert session.exec(text("SELECT COUNT(*) FROM actor")).scalar_one() == 1

    def test_sqlite_enforces_foreign_keys(self, config):
        with MovieStore.open(config) as store, store.session() as session:
            with pytest.raises(IntegrityError):
                session.exec(text("INSERT INTO role (id, name, actor_id, film_id) VALUES (1, 'Ghost', 99, 99)"))
                session.flush()


class TestEngineHelpers:
    def test_sessionmaker_does_not_expire_on_commit(self):
        engine = create_engine("sqlite://")
        try:
            factory = create_sessionmaker(engine)
            assert factory.kw["expire_on_commit"] is False
            assert issubclass(factory.class_, Session)
        finally:
            engine.dispose()

    def test_foreign_keys_pragma_on_new_connections(self):
        engine = create_engine("sqlite://")
        try:
            with engine.connect() as connection:
                assert connection.exec_driver_sql("PRAGMA foreign_keys").scalar_one() == 1
        finally:
            engine.dispose()
