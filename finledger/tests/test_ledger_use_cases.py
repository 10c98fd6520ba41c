from __future__ import annotations

from datetime import UTC, datetime
from decimal import Decimal

import pytest

from finledger.application.use_cases.ledger.create_transaction import CreateTransactionUseCase
from finledger.application.use_cases.ledger.list_transactions import ListTransactionsUseCase
from finledger.domain.ledger.entities import Transaction, TransactionDraft, TransactionKind
from finledger.domain.ledger.repositories import TransactionRepository
from finledger.shared.errors import ValidationError


class InMemoryTransactionRepository(TransactionRepository):
    def __init__(self) -> None:
        self.rows: list[Transaction] = []

    def list_for_owner(self, owner_id: int) -> list[Transaction]:
        return [tx for tx in self.rows if tx.owner_id == owner_id]

    def add(self, owner_id: int, draft: TransactionDraft) -> Transaction:
        tx = Transaction(
            id=len(self.rows) + 1,
            owner_id=owner_id,
            amount=draft.amount,
            kind=draft.kind,
            counterparty=draft.counterparty,
            timestamp=datetime.now(UTC),
        )
        self.rows.append(tx)
        return tx


@pytest.fixture()
def repo() -> InMemoryTransactionRepository:
    return InMemoryTransactionRepository()


@pytest.fixture()
def create(repo: InMemoryTransactionRepository) -> CreateTransactionUseCase:
    return CreateTransactionUseCase(transactions=repo)


@pytest.fixture()
def list_(repo: InMemoryTransactionRepository) -> ListTransactionsUseCase:
    return ListTransactionsUseCase(transactions=repo)


def test_create_then_list_contains_record_once(
    create: CreateTransactionUseCase, list_: ListTransactionsUseCase
) -> None:
    created = create.execute(1, 50, "deposit")

    listed = list_.execute(1)

    assert listed == [created]
    assert created.owner_id == 1
    assert created.amount == Decimal("50")
    assert created.kind is TransactionKind.DEPOSIT
    assert created.timestamp is not None


def test_transfer_keeps_counterparty(create: CreateTransactionUseCase) -> None:
    created = create.execute(1, "-20.25", "transfer", "bob")
    assert created.counterparty == "bob"
    assert created.amount == Decimal("-20.25")


def test_ownership_isolation(
    create: CreateTransactionUseCase, list_: ListTransactionsUseCase
) -> None:
    a = create.execute(1, 10, "deposit")
    b = create.execute(2, 99, "withdrawal")

    assert list_.execute(1) == [a]
    assert list_.execute(2) == [b]
    assert list_.execute(3) == []


def test_invalid_kind_creates_nothing(
    create: CreateTransactionUseCase, repo: InMemoryTransactionRepository
) -> None:
    with pytest.raises(ValidationError):
        create.execute(1, 10, "invalid-kind")
    assert repo.rows == []


def test_invalid_amount_creates_nothing(
    create: CreateTransactionUseCase, repo: InMemoryTransactionRepository
) -> None:
    with pytest.raises(ValidationError):
        create.execute(1, "ten", "deposit")
    assert repo.rows == []


def test_list_preserves_insertion_order(
    create: CreateTransactionUseCase, list_: ListTransactionsUseCase
) -> None:
    ids = [create.execute(1, n, "deposit").id for n in (3, 1, 2)]
    assert [tx.id for tx in list_.execute(1)] == ids
