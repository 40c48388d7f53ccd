"""
Repository layer.

Repositories own the records of one entity and expose lookup and CRUD
operations over a backing store.  Every lookup returns ``Optional``:
``None`` is the single "absent" signal; failures raise the exceptions
in ``core.errors``.
"""

from .player_repository import PlayerRepository, InMemoryPlayerRepository
from .user_repository import UserRepository, SQLiteUserRepository
from .product_repository import ProductRepository, InMemoryProductRepository

__all__ = [
    "PlayerRepository",
    "InMemoryPlayerRepository",
    "UserRepository",
    "SQLiteUserRepository",
    "ProductRepository",
    "InMemoryProductRepository",
]
