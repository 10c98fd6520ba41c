# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Transaction, TransactionDraft


class TransactionRepository(Protocol):
    def list_for_owner(self, owner_id: int) -> Sequence[Transaction]: ...
    def add(self, owner_id: int, draft: TransactionDraft) -> Transaction: ...
