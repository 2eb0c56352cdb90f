"""
Database entity models.

Each module represents a single table, except ``films`` which also holds
the film/director link table. Relations are plain foreign-key columns;
traversals are expressed as explicit joins by the repositories.

Modules:
- actors: Actor records keyed by display name
- directors: Director records keyed by display name
- films: Films and the film_director link table
- roles: Characters linking actors to films
"""

from .actors import Actor, ActorBase
from .directors import Director, DirectorBase
from .films import Film, FilmBase, FilmDirector
from .roles import Role, RoleBase

__all__ = [
    "Actor",
    "ActorBase",
    "Director",
    "DirectorBase",
    "Film",
    "FilmBase",
    "FilmDirector",
    "Role",
    "RoleBase",
]
