"""Render DomainError as an RFC 7807 ``application/problem+json`` response."""
from __future__ import annotations

import logging
from http import HTTPStatus

from fastapi import Request
from fastapi.responses import JSONResponse

from .domain_errors import DomainError

PROBLEM_MEDIA_TYPE = "application/problem+json"
PROBLEM_TYPE_BASE = "/problems/"

logger = logging.getLogger(__name__)


def problem_type(code: str) -> str:
    """``USERNAME_TAKEN`` -> ``/problems/username-taken`` (relative URI, resolved against the API host)."""
    return PROBLEM_TYPE_BASE + code.lower().replace("_", "-")


def problem_payload(exc: DomainError, *, instance: str | None = None) -> dict[str, object]:
    title = exc.title
    if title is None:
        try:
            title = HTTPStatus(exc.http_status).phrase
        except ValueError:
            title = exc.code.replace("_", " ").capitalize()

    payload: dict[str, object] = {
        "type": problem_type(exc.code),
        "title": title,
        "status": exc.http_status,
        "detail": exc.message,
        "code": exc.code,
    }
    if instance is not None:
        payload["instance"] = instance
    if exc.details is not None:
        payload["details"] = exc.details
    return payload


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    if exc.http_status >= 500:
        logger.error("%s %s answered %s (%d)", request.method, request.url.path, exc.code, exc.http_status)
    return JSONResponse(
        status_code=exc.http_status,
        content=problem_payload(exc, instance=request.url.path),
        media_type=PROBLEM_MEDIA_TYPE,
    )
