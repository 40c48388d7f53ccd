"""
FastAPI dependencies resolving the services stored on ``app.state``.

``create_app`` builds one instance of each service; handlers receive
them through ``Depends`` so tests can override them with
``app.dependency_overrides``.
"""

from fastapi import Request

from record_api.app.services.player_service import PlayerService
from record_api.app.services.product_service import ProductService
from record_api.app.services.user_service import UserService


def get_player_service(request: Request) -> PlayerService:
    return request.app.state.player_service


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service


def get_product_service(request: Request) -> ProductService:
    return request.app.state.product_service
