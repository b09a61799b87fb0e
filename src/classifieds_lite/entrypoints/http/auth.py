"""Caller identity plumbing.

Authentication happens upstream: the identity provider's proxy verifies the
session and forwards the subject id in a trusted header. This module only
moves that value into the request context and hands it to routes.
"""

from __future__ import annotations

import os
from typing import Awaitable, Callable

from fastapi import FastAPI, Request, Response

from classifieds_lite.domain.errors import UnauthorizedError
from classifieds_lite.domain.listing import CallerIdentity

DEFAULT_SUBJECT_HEADER = "X-Auth-Subject"


def auth_subject_header() -> str:
    return os.getenv("AUTH_SUBJECT_HEADER") or DEFAULT_SUBJECT_HEADER


def install_caller_context(app: FastAPI, header_name: str | None = None) -> None:
    """Attach ``request.state.caller`` to every request.

    Args:
        app: FastAPI application instance
        header_name: Trusted header carrying the subject id (defaults to AUTH_SUBJECT_HEADER)
    """
    header = header_name or auth_subject_header()

    @app.middleware("http")
    async def attach_caller(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        subject_id = request.headers.get(header, "").strip()
        request.state.caller = CallerIdentity(subject_id=subject_id) if subject_id else None
        return await call_next(request)


def optional_caller(request: Request) -> CallerIdentity | None:
    return getattr(request.state, "caller", None)


def require_caller(request: Request) -> CallerIdentity:
    """Return the caller from the request context or fail with 401."""
    caller = optional_caller(request)
    if caller is None:
        raise UnauthorizedError("Authentication required")
    return caller
