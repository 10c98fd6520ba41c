# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, ClassVar

GENERIC_SERVER_MESSAGE = "Internal server error"


@dataclass(slots=True, eq=False)
class AppError(Exception):
    """An error with a stable client-facing ``code`` and the HTTP status it renders as."""

    code: str
    status: HTTPStatus
    message: str | None = None
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message or self.code)

    @property
    def is_server_error(self) -> bool:
        return self.status >= HTTPStatus.INTERNAL_SERVER_ERROR

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.code}
        if self.message:
            body["message"] = self.message
        if self.context:
            body["context"] = dict(self.context)
        return body


class DomainError(AppError):
    """Business-rule failure.

    Subclasses only declare ``default_code``, ``default_status`` and
    ``default_message``; raising them needs no arguments.
    """

    default_code: ClassVar[str] = "domain_error"
    default_status: ClassVar[HTTPStatus] = HTTPStatus.BAD_REQUEST
    default_message: ClassVar[str | None] = None

    def __init__(
        self, message: str | None = None, *, context: Mapping[str, Any] | None = None
    ) -> None:
        cls = type(self)
        super().__init__(
            code=cls.default_code,
            status=cls.default_status,
            message=message or cls.default_message,
            context=context,
        )


class ValidationError(AppError):
    def __init__(
        self, message: str = "Invalid request", *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__(
            code="validation_error",
            status=HTTPStatus.BAD_REQUEST,
            message=message,
            context=context,
        )


class StoreError(AppError):
    """Persistence failure. Clients only ever see ``internal_error``."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            code="internal_error",
            status=HTTPStatus.INTERNAL_SERVER_ERROR,
            message=GENERIC_SERVER_MESSAGE,
        )
        self.operation = operation
