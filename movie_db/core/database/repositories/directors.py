"""
Director repository.
"""

from __future__ import annotations

from typing import List

from sqlalchemy import bindparam
from sqlmodel import Session, col, select

from movie_db.core.logging_config import get_logger

from ..entities import Actor, Director, Film, FilmDirector, Role
from .base import ReadOnlyRepository

logger = get_logger(__name__)

DIRECTORS_SORTED_BY_IDENTITY = select(Director).order_by(col(Director.identity))

# Director -> film -> role -> actor, the reverse of the actor-side traversal.
DIRECTORS_BY_ACTOR = (
    select(Director)
    .join(FilmDirector, col(FilmDirector.director_id) == col(Director.id))
    .join(Film, col(Film.id) == col(FilmDirector.film_id))
    .join(Role, col(Role.film_id) == col(Film.id))
    .join(Actor, col(Actor.id) == col(Role.actor_id))
    .where(col(Actor.identity) == bindparam("actor"))
    .distinct()
    .order_by(col(Director.identity))
)


class DirectorRepository(ReadOnlyRepository[Director]):
    """Repository for director queries using SQLModel."""

    def __init__(self, session: Session) -> None:
        super().__init__(session, Director)

    def list_sorted_by_identity(self) -> List[Director]:
        """All directors in ascending identity order."""
        return list(self.session.exec(DIRECTORS_SORTED_BY_IDENTITY).all())

    def find_by_actor(self, actor: str) -> List[Director]:
        """Distinct directors of the films in which ``actor`` played a role.

        Args:
            actor: Actor identity, matched exactly

        Returns:
            Directors ordered by identity
        """
        logger.debug(f"Director query for actor {actor!r}")
        return list(self.session.exec(DIRECTORS_BY_ACTOR, params={"actor": actor}).all())
