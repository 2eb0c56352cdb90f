"""
Database repository layer using SQLModel.

Read-only repositories exposing the parametrized movie queries.

Modules:
- base: ReadOnlyRepository and QueryBuilder utilities
- actors: Actor queries (by identity, birth year, role, film year, country, director)
- directors: Director queries (by actor)
- index: Identity to id index for actors and directors
- bundle: RepoBundle over one session
"""

from .actors import ActorRepository
from .base import QueryBuilder, ReadOnlyRepository
from .bundle import RepoBundle, build_repos
from .directors import DirectorRepository
from .index import IdentityIndex

__all__ = [
    "ActorRepository",
    "DirectorRepository",
    "IdentityIndex",
    "QueryBuilder",
    "ReadOnlyRepository",
    "RepoBundle",
    "build_repos",
]
