"""
Film entity models.

This module contains the film table and the ``film_director`` link table
that carries the many-to-many relation between films and directors.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field

from ..base import Base


class FilmBase(Base):
    """Base fields for film entity."""

    title: str = Field(min_length=1, max_length=255, description="Film title")
    year: int = Field(index=True, ge=1800, le=2200, description="Release year")
    country: str = Field(index=True, min_length=1, max_length=100, description="Production country name")


class Film(FilmBase, table=True):
    """Entity for a released film.

    Table: film
    """

    __tablename__ = "film"

    id: Optional[int] = Field(default=None, primary_key=True)

    def __repr__(self) -> str:
        return f"Film(id={self.id}, title={self.title}, year={self.year})"


class FilmDirector(Base, table=True):
    """Link between a film and one of its directors.

    Table: film_director
    """

    __tablename__ = "film_director"

    film_id: int = Field(foreign_key="film.id", primary_key=True)
    director_id: int = Field(foreign_key="director.id", primary_key=True, index=True)

    def __repr__(self) -> str:
        return f"FilmDirector(film_id={self.film_id}, director_id={self.director_id})"
