"""
Business logic for users.

``UserService`` forwards every call to a ``UserRepository``.  Lookups
return ``None`` when the user does not exist; writes propagate
``RecordNotFoundError`` and ``DuplicateRecordError`` from the store so
the API layer can choose the matching status code.
"""

import logging
from typing import List, Optional

from record_api.app.repositories.user_repository import UserRepository
from record_api.app.schemas.user import User, UserCreate, UserUpdate

logger = logging.getLogger(__name__)


class UserService:
    """Service for managing users."""

    def __init__(self, repository: UserRepository) -> None:
        self.repository = repository

    async def get_by_id(self, user_id: int) -> Optional[User]:
        return self.repository.find_by_id(user_id)

    async def get_by_email(self, email: str) -> Optional[User]:
        return self.repository.find_by_email(email)

    async def get_all(self) -> List[User]:
        return self.repository.find_all()

    async def create(self, data: UserCreate) -> User:
        logger.info("Registering user %s", data.email)
        return self.repository.insert(data)

    async def update(self, data: UserUpdate) -> User:
        """Replace a user's attributes.

        With an ``id`` both name and email are replaced; without one
        the user is located by ``email`` and only the name changes.
        """
        if data.id is None:
            return self.repository.update_by_email(data.email, data.name)
        return self.repository.update(User(id=data.id, name=data.name, email=data.email))

    async def delete_by_id(self, user_id: int) -> bool:
        return self.repository.delete_by_id(user_id)

    async def delete_by_email(self, email: str) -> bool:
        return self.repository.delete_by_email(email)
