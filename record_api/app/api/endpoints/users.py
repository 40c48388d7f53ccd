"""
User endpoints.

Two families of routes share the ``/user`` path:

* ``/user`` with a query string or JSON body answers with short plain
  text messages ("User Found", "User created successfully", ...).
* ``/user/{id}``, ``/user/by-email`` and ``/users`` answer with user
  JSON.

Unknown users always produce ``404``; an email that is already taken
produces ``409``.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import PlainTextResponse

from record_api.app.core.errors import DuplicateRecordError, RecordNotFoundError
from record_api.app.schemas.user import User, UserCreate, UserUpdate
from record_api.app.services.user_service import UserService
from record_api.app.api.deps import get_user_service

router = APIRouter()

USER_NOT_FOUND = "User not found"
USER_EXISTS = "User already exists"


def _text(message: str, status_code: int = status.HTTP_200_OK) -> PlainTextResponse:
    return PlainTextResponse(message, status_code=status_code)


def _not_found() -> PlainTextResponse:
    return _text(USER_NOT_FOUND, status.HTTP_404_NOT_FOUND)


@router.get("/user", response_class=PlainTextResponse)
async def check_user(
    email: str = Query(...),
    service: UserService = Depends(get_user_service),
) -> PlainTextResponse:
    """Answer ``User Found`` if a user with ``email`` exists, else 404."""
    user = await service.get_by_email(email)
    if user is None:
        return _not_found()
    return _text("User Found")


@router.post("/user", response_class=PlainTextResponse)
async def create_user(
    user_in: UserCreate,
    service: UserService = Depends(get_user_service),
) -> PlainTextResponse:
    """Create a user; 409 if the email is already registered."""
    try:
        await service.create(user_in)
    except DuplicateRecordError:
        return _text(USER_EXISTS, status.HTTP_409_CONFLICT)
    return _text("User created successfully")


@router.put("/user", response_class=PlainTextResponse)
async def update_user(
    user_in: UserUpdate,
    service: UserService = Depends(get_user_service),
) -> PlainTextResponse:
    """Replace a user's name and email (by id), or its name (by email)."""
    try:
        await service.update(user_in)
    except RecordNotFoundError:
        return _not_found()
    except DuplicateRecordError:
        return _text(USER_EXISTS, status.HTTP_409_CONFLICT)
    return _text("User updated successfully")


@router.delete("/user", response_class=PlainTextResponse)
async def delete_user_by_email(
    email: str = Query(...),
    service: UserService = Depends(get_user_service),
) -> PlainTextResponse:
    """Delete the user with ``email``; 404 if there is none."""
    deleted = await service.delete_by_email(email)
    if not deleted:
        return _not_found()
    return _text("User deleted successfully")


# Declared before ``/user/{user_id}`` so the literal path wins.
@router.get("/user/by-email", response_model=User)
async def get_user_by_email(
    email: str = Query(...),
    service: UserService = Depends(get_user_service),
) -> User:
    """Return the user with ``email`` as JSON, or 404."""
    user = await service.get_by_email(email)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return user


@router.get("/user/{user_id}", response_model=User)
async def get_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
) -> User:
    """Return the user with ``user_id`` as JSON, or 404."""
    user = await service.get_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return user


@router.delete("/user/{user_id}", response_class=PlainTextResponse)
async def delete_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
) -> PlainTextResponse:
    """Delete the user with ``user_id``; 404 if there is none."""
    deleted = await service.delete_by_id(user_id)
    if not deleted:
        return _not_found()
    return _text("User deleted successfully")


@router.get("/users", response_model=List[User])
async def list_users(service: UserService = Depends(get_user_service)) -> List[User]:
    """Return every user ordered by id."""
    return await service.get_all()
