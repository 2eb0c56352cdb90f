"""
Director entity models.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field

from ..base import Base


class DirectorBase(Base):
    """Base fields for director entity."""

    identity: str = Field(index=True, min_length=1, max_length=255, description="Full display name of the director")


class Director(DirectorBase, table=True):
    """Entity for a film director.

    Films are linked through ``film_director``; a film may list several
    directors.

    Table: director
    """

    __tablename__ = "director"

    id: Optional[int] = Field(default=None, primary_key=True)

    def __repr__(self) -> str:
        return f"Director(id={self.id}, identity={self.identity})"
