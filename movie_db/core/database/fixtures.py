"""
Fixture loading for an empty store.

A fixture is a text resource of SQL statements in the store's native dialect,
separated by ``;``. Loading is idempotent per store: if any actor row exists
the script is not run again. The presence check and the inserts share one
transaction, which is enough for a single process initializing the store;
concurrent first-time loads from several processes are not supported.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Union

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select

from movie_db.core.errors import FixtureLoadError
from movie_db.core.logging_config import get_logger

from .entities import Actor
from .store import MovieStore

logger = get_logger(__name__)

STATEMENT_SEPARATOR = ";"
LINE_COMMENT = "--"


def resolve_fixture(name: str, root: Union[str, Path]) -> Path:
    """Locate a fixture resource relative to a resource root.

    Args:
        name: Relative resource name, e.g. ``data.sql``
        root: Resource root directory

    Returns:
        Path to the existing resource

    Raises:
        FixtureLoadError: If no such file exists under ``root``
    """
    path = Path(root) / name
    if not path.is_file():
        raise FixtureLoadError(name, f"no such resource under {root}")
    return path


def read_script(path: Union[str, Path]) -> str:
    """Read a fixture script as UTF-8 text.

    Raises:
        FixtureLoadError: Wrapping the underlying read or decode error
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FixtureLoadError(str(path), str(exc)) from exc


def split_statements(script: str) -> List[str]:
    """Split a script into its non-empty statements, in order.

    Whole-line ``--`` comments are dropped before splitting. The split is
    textual: a ``;`` inside a string literal also ends a statement.
    """
    lines = [line for line in script.splitlines() if not line.lstrip().startswith(LINE_COMMENT)]
    chunks = "\n".join(lines).split(STATEMENT_SEPARATOR)
    return [chunk.strip() for chunk in chunks if chunk.strip()]


def count_actors(session) -> int:
    return session.exec(select(func.count()).select_from(Actor)).one()


def load_fixture(store: MovieStore, path: Union[str, Path]) -> bool:
    """Populate ``store`` from the script at ``path`` unless it already holds actors.

    Args:
        store: Open store to populate
        path: Fixture script location

    Returns:
        True if the script was executed, False if the store was already populated

    Raises:
        FixtureLoadError: If the script cannot be read or one of its statements fails;
            nothing from the script is kept in that case
    """
    with store.session() as session:
        with session.begin():
            existing = count_actors(session)
            if existing:
                logger.info(f"Store '{store.unit_name}' already holds {existing} actors, skipping fixture {path}")
                return False

            statements = split_statements(read_script(path))
            connection = session.connection()
            for index, statement in enumerate(statements, start=1):
                try:
                    connection.exec_driver_sql(statement)
                except SQLAlchemyError as exc:
                    raise FixtureLoadError(str(path), f"statement {index} failed: {exc}") from exc

    logger.info(f"Loaded {len(statements)} statements from {path} into store '{store.unit_name}'")
    return True


class FixtureLoader:
    """Runs ``load_fixture`` at most once per loader instance.

    The harness keeps one loader for the whole run and calls ``ensure_loaded``
    freely; only the first call touches the database.
    """

    def __init__(self, store: MovieStore, path: Union[str, Path]) -> None:
        self.store = store
        self.path = Path(path)
        self._done = False
        self.loaded = False

    def ensure_loaded(self) -> bool:
        """Load the fixture on first call.

        Returns:
            True if this loader executed the script during its first call
        """
        if not self._done:
            self.loaded = load_fixture(self.store, self.path)
            self._done = True
        return self.loaded
