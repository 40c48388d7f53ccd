"""
Tests for UserService forwarding, with the repository mocked out.
"""
from __future__ import annotations

import asyncio
from unittest.mock import MagicMock

import pytest

from record_api.app.core.errors import RecordNotFoundError
from record_api.app.repositories.user_repository import UserRepository
from record_api.app.schemas.user import User, UserCreate, UserUpdate
from record_api.app.services.user_service import UserService


@pytest.fixture
def repo():
    return MagicMock(spec=UserRepository)


@pytest.fixture
def service(repo):
    return UserService(repo)


def test_get_by_email_returns_repository_result(service, repo):
    user = User(id=1, name="Alice", email="a@x.com")
    repo.find_by_email.return_value = user
    assert asyncio.run(service.get_by_email("a@x.com")) is user
    repo.find_by_email.assert_called_once_with("a@x.com")


def test_get_by_id_absent(service, repo):
    repo.find_by_id.return_value = None
    assert asyncio.run(service.get_by_id(7)) is None


def test_create_forwards_payload(service, repo):
    data = UserCreate(name="Alice", email="a@x.com")
    repo.insert.return_value = User(id=1, name="Alice", email="a@x.com")
    created = asyncio.run(service.create(data))
    repo.insert.assert_called_once_with(data)
    assert created.id == 1


def test_update_with_id_replaces_by_id(service, repo):
    repo.update.return_value = User(id=3, name="N", email="n@x.com")
    asyncio.run(service.update(UserUpdate(id=3, name="N", email="n@x.com")))
    repo.update.assert_called_once_with(User(id=3, name="N", email="n@x.com"))
    repo.update_by_email.assert_not_called()


def test_update_without_id_goes_by_email(service, repo):
    repo.update_by_email.return_value = User(id=3, name="N", email="n@x.com")
    asyncio.run(service.update(UserUpdate(name="N", email="n@x.com")))
    repo.update_by_email.assert_called_once_with("n@x.com", "N")
    repo.update.assert_not_called()


def test_update_propagates_not_found(service, repo):
    repo.update.side_effect = RecordNotFoundError("missing")
    with pytest.raises(RecordNotFoundError):
        asyncio.run(service.update(UserUpdate(id=9, name="N", email="n@x.com")))


def test_delete_by_email_returns_flag(service, repo):
    repo.delete_by_email.return_value = False
    assert asyncio.run(service.delete_by_email("n@x.com")) is False
