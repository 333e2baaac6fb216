"""Errors raised by route handlers and rendered as problem details."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fastapi import status


@dataclass(eq=False)
class DomainError(Exception):
    """Error with a stable code, a short title and the HTTP status to answer with."""

    code: str
    http_status: int
    message: str
    title: str | None = None
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        return self.message


class UsernameTaken(DomainError):
    def __init__(self, username: str):
        super().__init__(
            code="USERNAME_TAKEN",
            http_status=status.HTTP_409_CONFLICT,
            message=f"Username {username!r} is already registered",
            title="Username taken",
            details={"username": username},
        )


class UserCreateFailed(DomainError):
    def __init__(self):
        super().__init__(
            code="USER_CREATE_FAILED",
            http_status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="The user could not be saved",
            title="User not saved",
        )
