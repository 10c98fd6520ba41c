# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from finledger.shared.errors.base import DomainError


class DuplicateEmailError(DomainError):
    default_code = "duplicate_email"
    default_message = "A user with this email already exists"


class InvalidCredentialsError(DomainError):
    default_code = "invalid_credentials"
    default_message = "Invalid email or password"


class UserNotFoundError(InvalidCredentialsError):
    """Unknown email at login. Renders exactly like a wrong password."""


class AuthenticationError(DomainError):
    """Base for every auth-guard rejection; all render as one 401 body."""

    default_code = "unauthorized"
    default_status = HTTPStatus.UNAUTHORIZED
    default_message = "Authentication required"


class MissingTokenError(AuthenticationError):
    pass


class InvalidTokenError(AuthenticationError):
    pass


class ExpiredTokenError(AuthenticationError):
    pass
