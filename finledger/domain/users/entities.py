# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime

from finledger.domain.exceptions import InvariantViolation


@dataclass(slots=True, frozen=True)
class User:
    id: int
    email: str
    password_hash: str
    created_at: datetime


@dataclass(slots=True, frozen=True)
class AccessToken:
    """Signed bearer token handed to the client after login."""

    user_id: int
    token: str
    expires_at: datetime


EMAIL_MAX_LENGTH = 254
SECRET_MAX_LENGTH = 128
_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def normalize_email(value: object) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvariantViolation("is required", field="email")
    email = value.strip().lower()
    if len(email) > EMAIL_MAX_LENGTH or not _EMAIL_RE.match(email):
        raise InvariantViolation("is not a valid email address", field="email")
    return email


def check_secret(value: object) -> str:
    if not isinstance(value, str) or not value:
        raise InvariantViolation("is required", field="secret")
    if len(value) > SECRET_MAX_LENGTH:
        raise InvariantViolation(
            f"must be at most {SECRET_MAX_LENGTH} characters", field="secret"
        )
    return value
