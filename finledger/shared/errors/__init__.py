# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .base import GENERIC_SERVER_MESSAGE, AppError, DomainError, StoreError, ValidationError
from .http import error_response, register_error_handler
from .validation import format_pydantic_errors, raise_validation_error

__all__ = [
    "GENERIC_SERVER_MESSAGE",
    "AppError",
    "DomainError",
    "StoreError",
    "ValidationError",
    "error_response",
    "format_pydantic_errors",
    "raise_validation_error",
    "register_error_handler",
]
