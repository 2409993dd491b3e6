"""User records, request bodies and the thread-safe in-memory user store."""

from __future__ import annotations

import json
import threading
from dataclasses import dataclass, replace
from typing import Any


class ValidationError(ValueError):
    """Raised when a request body does not hold the expected data."""


class UserNotFoundError(LookupError):
    """Raised when no user has the requested id."""

    def __init__(self, user_id: int) -> None:
        super().__init__(f"user {user_id} not found")
        self.user_id = user_id


@dataclass
class User:
    """A user in the system."""

    id: int
    name: str
    email: str

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON representation of the user."""
        return {"id": self.id, "name": self.name, "email": self.email}


def _decode_object(data: Any) -> dict[str, Any]:
    """Turn raw JSON text or an already decoded value into a JSON object."""
    if isinstance(data, (str, bytes, bytearray)):
        try:
            data = json.loads(data)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ValidationError("request body is not valid JSON") from exc
    if data is None:
        raise ValidationError("request body is empty")
    if not isinstance(data, dict):
        raise ValidationError("request body must be a JSON object")
    return data


def _string_field(obj: dict[str, Any], key: str) -> str:
    value = obj.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(f"field {key!r} must be a string")
    return value


@dataclass(frozen=True)
class CreateUserRequest:
    """Body of a request that creates a user; both fields are required."""

    name: str
    email: str

    @classmethod
    def from_json(cls, data: Any) -> CreateUserRequest:
        """Build a request from JSON text or a decoded JSON object."""
        obj = _decode_object(data)
        name = _string_field(obj, "name")
        email = _string_field(obj, "email")
        if not name or not email:
            raise ValidationError("name and email are required")
        return cls(name=name, email=email)


@dataclass(frozen=True)
class UpdateUserRequest:
    """Body of a request that updates a user; empty fields are left unchanged."""

    name: str = ""
    email: str = ""

    @classmethod
    def from_json(cls, data: Any) -> UpdateUserRequest:
        """Build a request from JSON text or a decoded JSON object."""
        obj = _decode_object(data)
        return cls(name=_string_field(obj, "name"), email=_string_field(obj, "email"))


class UserStore:
    """In-memory user storage, safe to share between threads."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._users: dict[int, User] = {}
        self._next_id = 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def create_user(self, name: str, email: str) -> User:
        """Store a new user under the next free id and return it."""
        with self._lock:
            user = User(id=self._next_id, name=name, email=email)
            self._users[user.id] = user
            self._next_id += 1
            return replace(user)

    def get_all_users(self) -> list[User]:
        """Return copies of all stored users."""
        with self._lock:
            return [replace(user) for user in self._users.values()]

    def get_user(self, user_id: int) -> User:
        """Return the user with the given id."""
        with self._lock:
            try:
                return replace(self._users[user_id])
            except KeyError:
                raise UserNotFoundError(user_id) from None

    def update_user(
        self, user_id: int, name: str | None = None, email: str | None = None
    ) -> User:
        """Change the non-empty fields of a user and return the result."""
        with self._lock:
            try:
                user = self._users[user_id]
            except KeyError:
                raise UserNotFoundError(user_id) from None
            if name:
                user.name = name
            if email:
                user.email = email
            return replace(user)

    def delete_user(self, user_id: int) -> None:
        """Remove the user with the given id."""
        with self._lock:
            try:
                del self._users[user_id]
            except KeyError:
                raise UserNotFoundError(user_id) from None

    def reset(self) -> None:
        """Remove every user and restart ids from 1."""
        with self._lock:
            self._users.clear()
            self._next_id = 1


_SEED_USERS = (
    CreateUserRequest(name="Alice", email="alice@example.com"),
    CreateUserRequest(name="Bob", email="bob@example.com"),
    CreateUserRequest(name="Charlie", email="charlie@example.com"),
)


def seeded_store() -> UserStore:
    """Return a new store holding the initial users."""
    store = UserStore()
    for seed in _SEED_USERS:
        store.create_user(seed.name, seed.email)
    return store