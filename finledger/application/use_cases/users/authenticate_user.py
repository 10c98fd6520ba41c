# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Bearer-token check run in front of every ledger operation."""

from __future__ import annotations

from finledger.domain.users.exceptions import MissingTokenError
from finledger.domain.users.repositories import TokenService

BEARER_PREFIX = "bearer "


def extract_bearer_token(header: str | None) -> str | None:
    """Return the token from an ``Authorization`` header value, or ``None``."""

    if not header:
        return None
    if header[: len(BEARER_PREFIX)].lower() != BEARER_PREFIX:
        return None
    token = header[len(BEARER_PREFIX):].strip()
    return token or None


class AuthenticateUserUseCase:
    def __init__(self, *, tokens: TokenService) -> None:
        self._tokens = tokens

    def execute(self, token: str | None) -> int:
        if not token:
            raise MissingTokenError()
        return self._tokens.verify(token)
