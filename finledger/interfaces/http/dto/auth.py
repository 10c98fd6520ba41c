# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from finledger.domain.users.entities import EMAIL_MAX_LENGTH, SECRET_MAX_LENGTH


class CredentialsDTO(BaseModel):
    """Body of both auth endpoints. Email format is checked by the use cases."""

    email: str = Field(min_length=1, max_length=EMAIL_MAX_LENGTH)
    secret: str = Field(min_length=1, max_length=SECRET_MAX_LENGTH)


class RegisterRequestDTO(CredentialsDTO):
    pass


class LoginRequestDTO(CredentialsDTO):
    pass


class RegisterSuccessDTO(BaseModel):
    message: str = "user registered"
    id: int


class TokenDTO(BaseModel):
    token: str
    token_type: str = "bearer"
    expires_at: datetime
