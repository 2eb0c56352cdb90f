"""
Actor repository.

Each query is a module-level select with named bind parameters, bound at
execution time. Queries that traverse roles into films are ``DISTINCT``:
an actor reachable through several roles is returned once. Every result is
ordered by identity.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import bindparam, extract
from sqlmodel import Session, col, select

from movie_db.core.logging_config import get_logger

from ..entities import Actor, Director, Film, FilmDirector, Role
from .base import ReadOnlyRepository

logger = get_logger(__name__)

_ACTORS_IN_FILMS = (
    select(Actor)
    .join(Role, col(Role.actor_id) == col(Actor.id))
    .join(Film, col(Film.id) == col(Role.film_id))
)

ACTORS_SORTED_BY_IDENTITY = select(Actor).order_by(col(Actor.identity))

ACTORS_BY_IDENTITY = (
    select(Actor)
    .where(col(Actor.identity) == bindparam("identity"))
    .order_by(col(Actor.id))
)

ACTORS_BY_BIRTH_YEAR = (
    select(Actor)
    .where(extract("year", col(Actor.birthdate)) == bindparam("year"))
    .order_by(col(Actor.identity))
)

# One row per matching role: no DISTINCT.
ACTORS_BY_ROLE_NAME = (
    select(Actor)
    .join(Role, col(Role.actor_id) == col(Actor.id))
    .where(col(Role.name) == bindparam("role"))
    .order_by(col(Actor.identity), col(Role.id))
)

ACTORS_BY_FILM_YEAR = (
    _ACTORS_IN_FILMS.where(col(Film.year) == bindparam("year"))
    .distinct()
    .order_by(col(Actor.identity))
)

ACTORS_BY_COUNTRY = (
    _ACTORS_IN_FILMS.where(col(Film.country) == bindparam("country"))
    .distinct()
    .order_by(col(Actor.identity))
)

ACTORS_BY_COUNTRY_AND_YEAR = (
    _ACTORS_IN_FILMS.where(
        col(Film.country) == bindparam("country"),
        col(Film.year) == bindparam("year"),
    )
    .distinct()
    .order_by(col(Actor.identity))
)

ACTORS_BY_DIRECTOR_BETWEEN_YEARS = (
    _ACTORS_IN_FILMS.join(FilmDirector, col(FilmDirector.film_id) == col(Film.id))
    .join(Director, col(Director.id) == col(FilmDirector.director_id))
    .where(
        col(Director.identity) == bindparam("director"),
        col(Film.year).between(bindparam("start"), bindparam("end")),
    )
    .distinct()
    .order_by(col(Actor.identity))
)


class ActorRepository(ReadOnlyRepository[Actor]):
    """Repository for actor queries using SQLModel."""

    def __init__(self, session: Session) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLModel Session for database operations
        """
        super().__init__(session, Actor)

    def _fetch(self, stmt, **params) -> List[Actor]:
        logger.debug(f"Actor query with params {params}")
        return list(self.session.exec(stmt, params=params or None).all())

    def list_sorted_by_identity(self) -> List[Actor]:
        """All actors in ascending identity order."""
        return self._fetch(ACTORS_SORTED_BY_IDENTITY)

    def find_by_identity(self, identity: str) -> List[Actor]:
        """Actors whose identity equals ``identity`` exactly."""
        return self._fetch(ACTORS_BY_IDENTITY, identity=identity)

    def get_by_identity(self, identity: str) -> Optional[Actor]:
        """First actor with this identity, or None."""
        matches = self.find_by_identity(identity)
        return matches[0] if matches else None

    def find_by_birth_year(self, year: int) -> List[Actor]:
        """Actors born in ``year``. Actors with no known birthdate never match."""
        return self._fetch(ACTORS_BY_BIRTH_YEAR, year=year)

    def find_by_role_name(self, role: str) -> List[Actor]:
        """Actors who played a character named ``role``.

        An actor appears once per matching role, so playing the same
        character in two films yields two entries.
        """
        return self._fetch(ACTORS_BY_ROLE_NAME, role=role)

    def find_by_film_year(self, year: int) -> List[Actor]:
        """Distinct actors with a role in a film released in ``year``."""
        return self._fetch(ACTORS_BY_FILM_YEAR, year=year)

    def find_by_country(self, country: str) -> List[Actor]:
        """Distinct actors with a role in a film produced in ``country``."""
        return self._fetch(ACTORS_BY_COUNTRY, country=country)

    def find_by_country_and_year(self, country: str, year: int) -> List[Actor]:
        """Distinct actors with a role in a film from ``country`` released in ``year``."""
        return self._fetch(ACTORS_BY_COUNTRY_AND_YEAR, country=country, year=year)

    def find_by_director_between_years(self, director: str, start: int, end: int) -> List[Actor]:
        """Distinct actors directed by ``director`` in a film released between two years.

        Args:
            director: Director identity, matched exactly
            start: First release year, inclusive
            end: Last release year, inclusive

        Returns:
            Actors ordered by identity
        """
        return self._fetch(ACTORS_BY_DIRECTOR_BETWEEN_YEARS, director=director, start=start, end=end)
