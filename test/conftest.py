"""Shared pytest fixtures for the movie_db test suite.

The suite-wide ``movie_store`` is opened once, populated once from
``resources/data.sql`` and closed at the end of the run. Each test that needs
the database gets its own session from ``db_session``, closed after the test
whatever its outcome.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Optional

import pytest
from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlmodel import Session

# Load test/.env before movie_db reads its settings at import time
TEST_ROOT = Path(__file__).resolve().parent
load_dotenv(TEST_ROOT / ".env", override=False)

from movie_db.core.config import DatabaseConfig  # noqa: E402
from movie_db.core.database import FixtureLoader, MovieStore, resolve_fixture  # noqa: E402
from movie_db.core.database.repositories import RepoBundle, build_repos  # noqa: E402
from movie_db.core.logging_config import setup_logging  # noqa: E402

RESOURCES = TEST_ROOT / "resources"
FIXTURE_NAME = "data.sql"


class SuiteSettings(BaseSettings):
    """Test-only settings, bound from the environment or ``test/.env``."""

    model_config = SettingsConfigDict(
        env_file=str(TEST_ROOT / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    reference_fixture: Optional[Path] = Field(
        default=None,
        alias="MOVIE_DB_REFERENCE_FIXTURE",
        description="SQL script of the full reference dataset; reference tests are skipped without it",
    )
    reference_database_url: Optional[str] = Field(
        default=None,
        alias="MOVIE_DB_REFERENCE_DATABASE_URL",
        description="Database holding the reference dataset; defaults to a temporary SQLite file",
    )


@pytest.fixture(scope="session")
def suite_settings() -> SuiteSettings:
    return SuiteSettings()


@pytest.fixture(scope="session", autouse=True)
def _configure_logging() -> None:
    setup_logging(log_level="INFO", log_format="simple", enable_file=False)


@pytest.fixture(scope="session")
def fixture_path() -> Path:
    """Location of the bundled fixture script."""
    return resolve_fixture(FIXTURE_NAME, RESOURCES)


@pytest.fixture(scope="session")
def movie_store(tmp_path_factory: pytest.TempPathFactory, fixture_path: Path) -> Iterator[MovieStore]:
    """Suite-wide store populated once from the bundled fixture."""
    db_file = tmp_path_factory.mktemp("movie_db") / "movie_db.sqlite3"
    store = MovieStore.open(DatabaseConfig(unit_name="movie_db", url=f"sqlite:///{db_file}"))
    FixtureLoader(store, fixture_path).ensure_loaded()
    try:
        yield store
    finally:
        store.close()


@pytest.fixture
def db_session(movie_store: MovieStore) -> Iterator[Session]:
    """Fresh session per test on the suite-wide store."""
    with movie_store.session() as session:
        yield session


@pytest.fixture
def repos(db_session: Session) -> RepoBundle:
    return build_repos(db_session)


@pytest.fixture
def empty_store(tmp_path: Path) -> Iterator[MovieStore]:
    """Store with tables but no rows, private to one test."""
    store = MovieStore.open(DatabaseConfig(unit_name="scratch", url=f"sqlite:///{tmp_path / 'scratch.sqlite3'}"))
    try:
        yield store
    finally:
        store.close()
