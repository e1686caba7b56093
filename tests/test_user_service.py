"""Tests unitaires pour UserService."""

from typing import List, Optional

import pytest

from application.services.user_service import UserService
from domain.entities.user import User
from domain.repositories.user_repository import UserRepository
from infrastructure.security.password_hasher import PasswordHasher


class InMemoryUserRepository(UserRepository):
    """Implémentation en mémoire de UserRepository pour les tests."""

    def __init__(self) -> None:
        self._users: List[User] = []

    def find_by_id(self, user_id: str) -> Optional[User]:
        return next((u for u in self._users if u.id == user_id), None)

    def find_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self._users if u.username == username), None)

    def save(self, user: User) -> User:
        self._users = [u for u in self._users if u.id != user.id] + [user]
        return user


@pytest.fixture(scope="module")
def password_hasher():
    return PasswordHasher(rounds=10)


@pytest.fixture
def service(password_hasher):
    return UserService(InMemoryUserRepository(), password_hasher)


def test_create_user_stores_a_bcrypt_hash(service):
    user = service.create_user("camille", "s3cret")

    assert user.hashed_password != "s3cret"
    assert user.hashed_password.startswith("$2b$10$")
    assert service.get_user(user.id) == user


def test_create_user_duplicate_raises_value_error(service):
    service.create_user("camille", "s3cret")

    with pytest.raises(ValueError, match="already exists"):
        service.create_user("camille", "autre")


def test_authenticate_success(service):
    user = service.create_user("camille", "s3cret")

    assert service.authenticate("camille", "s3cret") == user


def test_authenticate_unknown_user_and_wrong_password_look_the_same(service):
    service.create_user("camille", "s3cret")

    assert service.authenticate("inconnu", "s3cret") is None
    assert service.authenticate("camille", "mauvais") is None


def test_username_lookup_is_exact(service):
    service.create_user("Superadmin", "Administrator")

    assert service.authenticate("superadmin", "Administrator") is None


def test_ensure_seed_user_is_idempotent(service):
    first = service.ensure_seed_user("Superadmin", "Administrator")
    second = service.ensure_seed_user("Superadmin", "autre-mot-de-passe")

    assert first.id == second.id
    assert service.user_repository.find_by_username("Superadmin").id == first.id
    assert service.authenticate("Superadmin", "Administrator") is not None


def test_unreadable_stored_hash_fails_verification(password_hasher):
    assert password_hasher.verify("x", "not-a-bcrypt-hash") is False
