# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from finledger.domain.ledger.entities import Transaction
from finledger.domain.ledger.repositories import TransactionRepository


class ListTransactionsUseCase:
    def __init__(self, *, transactions: TransactionRepository) -> None:
        self._transactions = transactions

    def execute(self, owner_id: int) -> Sequence[Transaction]:
        return self._transactions.list_for_owner(owner_id)
