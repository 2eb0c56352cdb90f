"""
Role entity models.

A role is the character an actor plays in a film. It is the join entity of
the actor/film many-to-many relation and carries the character name.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field

from ..base import Base


class RoleBase(Base):
    """Base fields for role entity."""

    name: str = Field(index=True, min_length=1, max_length=255, description="Character name")


class Role(RoleBase, table=True):
    """Entity linking one actor to one film.

    Table: role
    """

    __tablename__ = "role"

    id: Optional[int] = Field(default=None, primary_key=True)

    # Foreign keys
    actor_id: int = Field(foreign_key="actor.id", index=True)
    film_id: int = Field(foreign_key="film.id", index=True)

    def __repr__(self) -> str:
        return f"Role(id={self.id}, name={self.name}, actor_id={self.actor_id}, film_id={self.film_id})"
