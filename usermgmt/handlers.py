"""HTTP handlers for the /users resource."""

from __future__ import annotations

import re
from http import HTTPStatus

from flask import Blueprint, Response, jsonify, request

from usermgmt.models import (
    CreateUserRequest,
    UpdateUserRequest,
    UserNotFoundError,
    UserStore,
    ValidationError,
)

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
_ID_MIN = -(2**63)
_ID_MAX = 2**63 - 1


class _ApiError(Exception):
    """An error that is answered with a JSON error body."""

    def __init__(self, status: HTTPStatus, message: str) -> None:
        super().__init__(message)
        self.status = status
        self.message = message


def _error_response(status: HTTPStatus, message: str) -> tuple[Response, int]:
    return jsonify({"error": message}), int(status)


def _parse_id(raw: str) -> int:
    """Parse a decimal user id the way a strict integer parser would."""
    if _ID_PATTERN.fullmatch(raw):
        value = int(raw)
        if _ID_MIN <= value <= _ID_MAX:
            return value
    raise _ApiError(HTTPStatus.BAD_REQUEST, "Invalid user ID")


def create_blueprint(store: UserStore) -> Blueprint:
    """Return a blueprint serving CRUD routes under /users backed by store."""
    users = Blueprint("users", __name__, url_prefix="/users")

    @users.errorhandler(_ApiError)
    def _handle_api_error(exc: _ApiError) -> tuple[Response, int]:
        return _error_response(exc.status, exc.message)

    @users.errorhandler(UserNotFoundError)
    def _handle_not_found(exc: UserNotFoundError) -> tuple[Response, int]:
        return _error_response(HTTPStatus.NOT_FOUND, "User not found")

    @users.post("")
    def create_user() -> tuple[Response, int]:
        try:
            body = CreateUserRequest.from_json(request.get_data())
        except ValidationError:
            raise _ApiError(HTTPStatus.BAD_REQUEST, "Name and email are required") from None
        user = store.create_user(body.name, body.email)
        return jsonify(user.to_dict()), int(HTTPStatus.CREATED)

    @users.get("")
    def list_users() -> Response:
        return jsonify([user.to_dict() for user in store.get_all_users()])

    @users.get("/<user_id>")
    def get_user(user_id: str) -> Response:
        return jsonify(store.get_user(_parse_id(user_id)).to_dict())

    @users.put("/<user_id>")
    def update_user(user_id: str) -> Response:
        ident = _parse_id(user_id)
        try:
            body = UpdateUserRequest.from_json(request.get_data())
        except ValidationError:
            raise _ApiError(HTTPStatus.BAD_REQUEST, "No data provided") from None
        return jsonify(store.update_user(ident, body.name, body.email).to_dict())

    @users.delete("/<user_id>")
    def delete_user(user_id: str) -> Response:
        store.delete_user(_parse_id(user_id))
        return jsonify({"message": "User deleted"})

    return users