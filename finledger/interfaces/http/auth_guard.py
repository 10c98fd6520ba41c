# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

from flask import g, request

from finledger.application.use_cases.users.authenticate_user import (
    AuthenticateUserUseCase, extract_bearer_token)
from finledger.domain.users.exceptions import AuthenticationError
from finledger.shared.logging import logger


class AuthGuard:
    """Resolves the caller from ``Authorization: Bearer`` and hands it to the view as ``user_id``."""

    def __init__(self, *, authenticate: AuthenticateUserUseCase) -> None:
        self._authenticate = authenticate

    def resolve(self) -> int:
        token = extract_bearer_token(request.headers.get("Authorization"))
        try:
            user_id = self._authenticate.execute(token)
        except AuthenticationError as exc:
            logger.warning(
                f"Auth failed ({type(exc).__name__}) on {request.method} {request.path}"
            )
            raise
        g.user_id = user_id
        logger.debug(f"Auth OK: user={user_id} {request.method} {request.path}")
        return user_id

    def __call__(self, f: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(f)
        def inner(*a, **kw):
            kw["user_id"] = self.resolve()
            return f(*a, **kw)

        return inner
