# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from finledger.domain.users.entities import User, check_secret, normalize_email
from finledger.domain.users.exceptions import DuplicateEmailError
from finledger.domain.users.repositories import PasswordHasher, UserRepository
from finledger.shared.logging import logger


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, email: str, secret: str) -> User:
        email = normalize_email(email)
        secret = check_secret(secret)

        if self._users.find_by_email(email):
            raise DuplicateEmailError()
        hashed = self._password_hasher.hash(secret)
        user = User(id=0, email=email, password_hash=hashed, created_at=datetime.now(UTC))
        persisted = self._users.add(user)
        logger.info(f"users.register: created user_id={persisted.id}")
        return persisted
