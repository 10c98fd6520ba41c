# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.orm import Session

from finledger.domain.ledger.entities import Transaction, TransactionDraft, TransactionKind
from finledger.domain.ledger.repositories import TransactionRepository
from finledger.infrastructure.db.models import LedgerTransaction
from finledger.infrastructure.unit_of_work import store_operation

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(UTC)


def _to_domain(row: LedgerTransaction) -> Transaction:
    timestamp = row.timestamp
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=UTC)
    return Transaction(
        id=row.id,
        owner_id=row.owner_id,
        amount=row.amount,
        kind=TransactionKind(row.kind),
        counterparty=row.counterparty,
        timestamp=timestamp,
    )


class SqlAlchemyTransactionRepository(TransactionRepository):
    def __init__(self, session_factory: Callable[[], Session], clock: Clock = _utc_now) -> None:
        self._session_factory = session_factory
        self._clock = clock

    def list_for_owner(self, owner_id: int) -> list[Transaction]:
        with store_operation(self._session_factory, "transactions.list") as session:
            rows = session.scalars(
                select(LedgerTransaction)
                .where(LedgerTransaction.owner_id == owner_id)
                .order_by(LedgerTransaction.id.asc())
            ).all()
            return [_to_domain(row) for row in rows]

    def add(self, owner_id: int, draft: TransactionDraft) -> Transaction:
        with store_operation(self._session_factory, "transactions.add") as session:
            row = LedgerTransaction(
                owner_id=owner_id,
                amount=draft.amount,
                kind=draft.kind.value,
                counterparty=draft.counterparty,
                timestamp=self._clock(),
            )
            session.add(row)
            session.flush()
            return _to_domain(row)
