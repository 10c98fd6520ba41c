# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from finledger.shared.errors.base import ValidationError


class InvariantViolationError(ValidationError):
    def __init__(self, message: str, *, field: str | None = None):
        context = {"fields": [field]} if field else None
        super().__init__(f"{field}: {message}" if field else message, context=context)
        self.field = field


InvariantViolation = InvariantViolationError
