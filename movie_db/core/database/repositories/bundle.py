"""
Repository bundle for dependency injection.

This module provides a convenience bundle of the repositories sharing one
session.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlmodel import Session

from ..entities import Film, Role
from .actors import ActorRepository
from .base import ReadOnlyRepository
from .directors import DirectorRepository


@dataclass(frozen=True)
class RepoBundle:
    """Convenience bundle of all repositories over a single session."""

    actors: ActorRepository
    directors: DirectorRepository
    films: ReadOnlyRepository[Film]
    roles: ReadOnlyRepository[Role]


def build_repos(session: Session) -> RepoBundle:
    """Build a RepoBundle from an existing session.

    Args:
        session: Open SQLModel session

    Returns:
        Bundle containing all repository instances
    """
    return RepoBundle(
        actors=ActorRepository(session),
        directors=DirectorRepository(session),
        films=ReadOnlyRepository(session, Film),
        roles=ReadOnlyRepository(session, Role),
    )
