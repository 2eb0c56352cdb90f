"""
Base repository and query building utilities.

Repositories in this package are read-only: the store is populated once by
the fixture loader and never mutated through the query layer.
"""

from __future__ import annotations

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import func
from sqlmodel import Session, SQLModel, select

# Generic type for SQLModel entities
EntityType = TypeVar("EntityType", bound=SQLModel)


class ReadOnlyRepository(Generic[EntityType]):
    """Common read operations over one SQLModel entity."""

    def __init__(self, session: Session, model: Type[EntityType]) -> None:
        """Initialize repository with database session and SQLModel entity class.

        Args:
            session: SQLModel Session for database operations
            model: SQLModel entity class for this repository
        """
        self.session = session
        self.model = model

    def get_by_id(self, entity_id: int) -> Optional[EntityType]:
        """Get entity by its primary key, or None if absent."""
        return self.session.get(self.model, entity_id)

    def count(self) -> int:
        """Count the rows of this entity's table."""
        return self.session.exec(select(func.count()).select_from(self.model)).one()

    def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[EntityType]:
        """List entities with optional pagination and equality filtering.

        Args:
            limit: Maximum number of records to return
            offset: Number of records to skip
            filters: Field name to value; unknown fields and None values are ignored

        Returns:
            List of entity instances
        """
        stmt = select(self.model).order_by(*self.model.__table__.primary_key.columns)

        if filters:
            stmt = QueryBuilder.apply_filters(stmt, self.model, filters)

        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)

        return list(self.session.exec(stmt))


class QueryBuilder:
    """Utility class for building SQLModel-based database queries."""

    @staticmethod
    def apply_filters(stmt, model: Type[EntityType], filters: Dict[str, Any]):
        """Apply equality filters to a SQLModel select statement.

        Args:
            stmt: SQLModel select statement
            model: SQLModel entity class
            filters: Dictionary of field filters

        Returns:
            Modified select statement with filters applied
        """
        for key, value in filters.items():
            if value is not None and hasattr(model, key):
                stmt = stmt.where(getattr(model, key) == value)
        return stmt

    @staticmethod
    def apply_pagination(stmt, limit: Optional[int], offset: Optional[int]):
        """Apply pagination to a SQLModel select statement.

        Args:
            stmt: SQLModel select statement
            limit: Maximum number of records
            offset: Number of records to skip

        Returns:
            Modified select statement with pagination applied
        """
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset is not None:
            stmt = stmt.offset(offset)
        return stmt
