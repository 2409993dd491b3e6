"""Swagger 2.0 description of the user management API."""

from __future__ import annotations

from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any

TITLE = "User Management API"
VERSION = "1.0"
DESCRIPTION = (
    "A lightweight REST API for managing users (Create, Read, Update, Delete) "
    "with in-memory data storage."
)

_MEDIA_TYPE = "application/json"
_TAG = "Users"
_SCHEMA_TYPES = {int: "integer", str: "string"}


@dataclass(frozen=True)
class _Model:
    """A JSON object schema: its properties with examples, and its required keys."""

    examples: dict[str, Any]
    required: tuple[str, ...] = ()

    def schema(self) -> dict[str, Any]:
        result: dict[str, Any] = {"type": "object"}
        if self.required:
            result["required"] = sorted(self.required)
        result["properties"] = {
            prop: {"type": _SCHEMA_TYPES[type(example)], "example": example}
            for prop, example in sorted(self.examples.items())
        }
        return result


_MODELS: dict[str, _Model] = {
    "CreateUserRequest": _Model(
        {"name": "Alice", "email": "alice@example.com"}, ("name", "email")
    ),
    "ErrorResponse": _Model({"error": "User not found"}),
    "MessageResponse": _Model({"message": "User deleted"}),
    "UpdateUserRequest": _Model(
        {"name": "Alice Updated", "email": "alice.updated@example.com"}
    ),
    "User": _Model(
        {"id": 1, "name": "Alice", "email": "alice@example.com"}, ("name", "email")
    ),
}


@dataclass(frozen=True)
class _Endpoint:
    """One operation on one path, described compactly."""

    path: str
    method: str
    summary: str
    description: str
    responses: tuple[tuple[int, str | None], ...]
    with_id: bool = False
    body: tuple[str, str] | None = field(default=None)

    def operation(self) -> dict[str, Any]:
        op: dict[str, Any] = {"description": self.description}
        if self.body is not None:
            op["consumes"] = [_MEDIA_TYPE]
        op["produces"] = [_MEDIA_TYPE]
        op["tags"] = [_TAG]
        op["summary"] = self.summary

        parameters = []
        if self.with_id:
            parameters.append(
                {
                    "type": "integer",
                    "description": "User ID",
                    "name": "id",
                    "in": "path",
                    "required": True,
                }
            )
        if self.body is not None:
            text, model = self.body
            parameters.append(
                {
                    "description": text,
                    "name": "user",
                    "in": "body",
                    "required": True,
                    "schema": _ref(model),
                }
            )
        if parameters:
            op["parameters"] = parameters

        op["responses"] = {
            str(code): {
                "description": HTTPStatus(code).phrase,
                "schema": _ref(model) if model else {"type": "array", "items": _ref("User")},
            }
            for code, model in self.responses
        }
        return op


def _ref(model: str) -> dict[str, str]:
    return {"$ref": "#/definitions/" + model}


# A response model of None stands for a list of users.
_ENDPOINTS = (
    _Endpoint(
        "/users", "get", "Get all users", "Get a list of all users", ((200, None),)
    ),
    _Endpoint(
        "/users",
        "post",
        "Create a new user",
        "Create a new user with name and email",
        ((201, "User"), (400, "ErrorResponse")),
        body=("User data", "CreateUserRequest"),
    ),
    _Endpoint(
        "/users/{id}",
        "get",
        "Get a user by ID",
        "Get user data by user ID",
        ((200, "User"), (404, "ErrorResponse")),
        with_id=True,
    ),
    _Endpoint(
        "/users/{id}",
        "put",
        "Update a user",
        "Update user data by user ID",
        ((200, "User"), (400, "ErrorResponse"), (404, "ErrorResponse")),
        with_id=True,
        body=("Updated user data", "UpdateUserRequest"),
    ),
    _Endpoint(
        "/users/{id}",
        "delete",
        "Delete a user",
        "Delete a user by user ID",
        ((200, "MessageResponse"), (404, "ErrorResponse")),
        with_id=True,
    ),
)


def _paths() -> dict[str, Any]:
    paths: dict[str, dict[str, Any]] = {}
    for endpoint in _ENDPOINTS:
        paths.setdefault(endpoint.path, {})[endpoint.method] = endpoint.operation()
    return paths


def swagger_spec(host: str = "localhost:5000", base_path: str = "/") -> dict[str, Any]:
    """Return a fresh Swagger document for the API served at host and base_path."""
    return {
        "schemes": [],
        "swagger": "2.0",
        "info": {
            "description": DESCRIPTION,
            "title": TITLE,
            "contact": {},
            "version": VERSION,
        },
        "host": host,
        "basePath": base_path,
        "paths": _paths(),
        "definitions": {name: model.schema() for name, model in _MODELS.items()},
    }