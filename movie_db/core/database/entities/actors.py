"""
Actor entity models.

An actor is identified by its full display name (``identity``). The films an
actor played in are reachable only through explicit joins on ``role``.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from sqlmodel import Field

from ..base import Base


class ActorBase(Base):
    """Base fields for actor entity."""

    identity: str = Field(index=True, min_length=1, max_length=255, description="Full display name of the actor")
    birthdate: Optional[date] = Field(default=None, description="Date of birth, unknown for some actors")


class Actor(ActorBase, table=True):
    """Entity for a person credited with at least one role, or none yet.

    Table: actor
    """

    __tablename__ = "actor"

    id: Optional[int] = Field(default=None, primary_key=True)

    def __repr__(self) -> str:
        return f"Actor(id={self.id}, identity={self.identity})"
