# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .exceptions import InvariantViolation, InvariantViolationError
from .ledger.entities import Transaction, TransactionDraft, TransactionKind
from .users.entities import AccessToken, User

__all__ = [
    "AccessToken",
    "InvariantViolation",
    "InvariantViolationError",
    "Transaction",
    "TransactionDraft",
    "TransactionKind",
    "User",
]
