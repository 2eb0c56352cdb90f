"""movie_db.

Data-access layer over a relational movie database: actors, directors, films
and the roles that link actors to films.

High-level architecture
-----------------------

- ``movie_db.core.config``: pydantic-settings configuration (log settings and
  the named database unit).
- ``movie_db.core.logging_config``: centralized logging setup.
- ``movie_db.core.database``:

  - SQLModel entities with explicit foreign keys (no lazy-loaded relations).
  - ``MovieStore``, an explicitly passed handle owning the engine and the
    session factory.
  - The fixture loader that populates an empty store from a SQL script.
  - Read-only repositories exposing the parametrized queries.

Typical workflow
----------------

1. Open a ``MovieStore`` from a ``DatabaseConfig``.
2. Populate it once with ``load_fixture``.
3. Open a session per unit of work and query it through ``build_repos``.
4. Close the store.
"""

__version__ = "0.1.0"
