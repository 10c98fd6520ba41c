# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Stateless access tokens.

Tokens are HS256 JWTs carrying the user id in ``sub`` and an absolute
``exp``. Nothing is persisted server side, so expiry is the only way a
token stops working.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import jwt

from finledger.domain.users.entities import AccessToken
from finledger.domain.users.exceptions import ExpiredTokenError, InvalidTokenError
from finledger.domain.users.repositories import TokenService

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


class JwtTokenService(TokenService):
    def __init__(
        self,
        *,
        secret_key: str,
        ttl: timedelta = timedelta(hours=1),
        algorithm: str = "HS256",
        issuer: str = "finledger",
        clock: Clock = utc_now,
    ) -> None:
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        self._secret_key = secret_key
        self._ttl = ttl
        self._algorithm = algorithm
        self._issuer = issuer
        self._clock = clock

    def issue(self, user_id: int) -> AccessToken:
        now = self._clock()
        expires_at = now + self._ttl
        payload = {
            "sub": str(user_id),
            "iss": self._issuer,
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        token = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return AccessToken(user_id=user_id, token=token, expires_at=expires_at)

    def verify(self, token: str) -> int:
        """Return the user id bound to ``token``.

        Signature, issuer and claim shape are checked by PyJWT; expiry is
        checked against the injected clock.
        """

        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                issuer=self._issuer,
                options={
                    "require": ["sub", "exp", "iss"],
                    "verify_exp": False,
                    "verify_iat": False,
                },
            )
        except jwt.InvalidTokenError as exc:
            raise InvalidTokenError() from exc

        try:
            exp = int(payload["exp"])
            user_id = int(payload["sub"])
        except (TypeError, ValueError) as exc:
            raise InvalidTokenError() from exc

        if self._clock().timestamp() >= exp:
            raise ExpiredTokenError()
        return user_id
