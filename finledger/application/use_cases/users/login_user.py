# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from finledger.domain.users.entities import AccessToken, check_secret, normalize_email
from finledger.domain.users.exceptions import InvalidCredentialsError, UserNotFoundError
from finledger.domain.users.repositories import PasswordHasher, TokenService, UserRepository
from finledger.shared.logging import logger


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenService,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    @cached_property
    def _dummy_hash(self) -> str:
        # verified for unknown emails so both failure paths cost one hash check
        return self._password_hasher.hash("finledger-dummy-secret")

    def execute(self, email: str, secret: str) -> AccessToken:
        email = normalize_email(email)
        secret = check_secret(secret)

        user = self._users.find_by_email(email)
        if user is None:
            self._password_hasher.verify(secret, self._dummy_hash)
            logger.info("users.login: unknown email")
            raise UserNotFoundError()

        if not self._password_hasher.verify(secret, user.password_hash):
            logger.info(f"users.login: bad secret user_id={user.id}")
            raise InvalidCredentialsError()

        token = self._tokens.issue(user.id)
        logger.info(
            f"users.login: ok user_id={user.id} exp={token.expires_at.isoformat()}"
        )
        return token
