# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from decimal import Decimal

from finledger.domain.ledger.entities import Transaction, TransactionDraft, TransactionKind
from finledger.domain.ledger.repositories import TransactionRepository
from finledger.shared.logging import logger


class CreateTransactionUseCase:
    def __init__(self, *, transactions: TransactionRepository) -> None:
        self._transactions = transactions

    def execute(
        self,
        owner_id: int,
        amount: Decimal | int | float | str,
        kind: TransactionKind | str,
        counterparty: str | None = None,
    ) -> Transaction:
        draft = TransactionDraft.build(amount, kind, counterparty)
        created = self._transactions.add(owner_id, draft)
        logger.info(
            f"ledger.create: ok user_id={owner_id} tx_id={created.id} kind={created.kind}"
        )
        return created
