"""
Top-level API router.

Aggregates the domain routers.  The whole router is mounted under
``/api`` by ``main.create_app`` and guarded by the API key dependency.
"""

from fastapi import APIRouter, Depends

from record_api.app.core.security import require_api_key
from record_api.app.api.endpoints import players, products, users

router = APIRouter(dependencies=[Depends(require_api_key)])

# Player and user routes define their own singular/plural paths
# (``/player/{id}``, ``/players``), so they are included without prefix.
router.include_router(players.router, tags=["players"])
router.include_router(users.router, tags=["users"])
router.include_router(products.router, prefix="/products", tags=["products"])
