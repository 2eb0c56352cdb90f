"""
Identity index: display name to record id for actors and directors.

Built once from a session, then consulted in memory. Useful to resolve the
names used by the queries into primary keys without touching the ORM.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Tuple

from sqlmodel import Session, col, select

from ..entities import Actor, Director


def _first_id_per_identity(rows: Iterable[Tuple[int, str]]) -> Dict[str, int]:
    index: Dict[str, int] = {}
    for record_id, identity in rows:
        index.setdefault(identity, record_id)
    return index


@dataclass(frozen=True)
class IdentityIndex:
    """Read-only maps of identity to id. On duplicate identities the lowest id wins."""

    actors: Mapping[str, int] = field(default_factory=dict)
    directors: Mapping[str, int] = field(default_factory=dict)

    @classmethod
    def build(cls, session: Session) -> "IdentityIndex":
        actor_rows = session.exec(select(Actor.id, Actor.identity).order_by(col(Actor.id))).all()
        director_rows = session.exec(select(Director.id, Director.identity).order_by(col(Director.id))).all()
        return cls(
            actors=MappingProxyType(_first_id_per_identity(actor_rows)),
            directors=MappingProxyType(_first_id_per_identity(director_rows)),
        )

    def actor_id(self, identity: str) -> int:
        """Id of the actor named ``identity``; KeyError if unknown."""
        return self.actors[identity]

    def director_id(self, identity: str) -> int:
        """Id of the director named ``identity``; KeyError if unknown."""
        return self.directors[identity]

    def __len__(self) -> int:
        return len(self.actors) + len(self.directors)
