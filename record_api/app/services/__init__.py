"""
Service layer.

Services are thin pass-throughs between the API handlers and the
repositories.  They hold a repository instance and nothing else, so
a different store can be swapped in without touching the handlers.
"""

from .player_service import PlayerService
from .user_service import UserService
from .product_service import ProductService

__all__ = ["PlayerService", "UserService", "ProductService"]
