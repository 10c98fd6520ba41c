# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Ledger entities and the rules a transaction must satisfy before it is stored."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import StrEnum
from typing import Any

from finledger.domain.exceptions import InvariantViolation

AMOUNT_SCALE = 2
# 13 integer digits plus 2 decimals stay exact as a JSON (IEEE double) number
AMOUNT_LIMIT = Decimal(10) ** 13
_AMOUNT_QUANTUM = Decimal(1).scaleb(-AMOUNT_SCALE)
COUNTERPARTY_MAX_LENGTH = 128


class TransactionKind(StrEnum):
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    TRANSFER = "transfer"


def parse_kind(value: Any) -> TransactionKind:
    if isinstance(value, TransactionKind):
        return value
    try:
        return TransactionKind(value)
    except ValueError:
        allowed = ", ".join(kind.value for kind in TransactionKind)
        raise InvariantViolation(f"must be one of: {allowed}", field="kind") from None


def parse_amount(value: Any) -> Decimal:
    """Coerce ``value`` into a finite Decimal with at most two fractional digits.

    Sign is not checked: zero and negative amounts are valid ledger entries.
    """

    if value is None:
        raise InvariantViolation("is required", field="amount")
    if isinstance(value, bool) or not isinstance(value, (int, float, str, Decimal)):
        raise InvariantViolation("must be a number", field="amount")
    try:
        amount = Decimal(str(value).strip()) if not isinstance(value, Decimal) else value
    except InvalidOperation:
        raise InvariantViolation("must be a number", field="amount") from None
    if not amount.is_finite():
        raise InvariantViolation("must be a finite number", field="amount")
    if abs(amount) >= AMOUNT_LIMIT:
        raise InvariantViolation("is out of range", field="amount")
    # compares by value, so trailing zeros ("1.000") are fine
    quantized = amount.quantize(_AMOUNT_QUANTUM)
    if quantized != amount:
        raise InvariantViolation(
            f"supports at most {AMOUNT_SCALE} decimal places", field="amount"
        )
    return quantized


def parse_counterparty(value: Any, kind: TransactionKind) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvariantViolation("must be a string", field="counterparty")
    value = value.strip()
    if not value:
        return None
    if kind is not TransactionKind.TRANSFER:
        raise InvariantViolation("is only allowed for transfers", field="counterparty")
    if len(value) > COUNTERPARTY_MAX_LENGTH:
        raise InvariantViolation(
            f"must be at most {COUNTERPARTY_MAX_LENGTH} characters", field="counterparty"
        )
    return value


@dataclass(slots=True, frozen=True)
class TransactionDraft:
    """Validated input for a new ledger entry. Owner and timestamp are not part of it."""

    amount: Decimal
    kind: TransactionKind
    counterparty: str | None = None

    @classmethod
    def build(cls, amount: Any, kind: Any, counterparty: Any = None) -> TransactionDraft:
        parsed_kind = parse_kind(kind)
        return cls(
            amount=parse_amount(amount),
            kind=parsed_kind,
            counterparty=parse_counterparty(counterparty, parsed_kind),
        )


@dataclass(slots=True, frozen=True)
class Transaction:
    id: int
    owner_id: int
    amount: Decimal
    kind: TransactionKind
    counterparty: str | None
    timestamp: datetime
