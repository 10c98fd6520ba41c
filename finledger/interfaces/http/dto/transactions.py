# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, field_validator

from finledger.domain.ledger.entities import (COUNTERPARTY_MAX_LENGTH, Transaction,
                                              TransactionKind)

JsonAmount = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CreateTransactionRequestDTO(BaseModel):
    # owner/user_id fields sent by clients are dropped, never trusted
    model_config = ConfigDict(extra="ignore")

    amount: Decimal = Field(allow_inf_nan=False)
    kind: TransactionKind
    counterparty: str | None = Field(default=None, max_length=COUNTERPARTY_MAX_LENGTH)

    @field_validator("amount", mode="before")
    @classmethod
    def reject_bool(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("must be a number")
        return value


class TransactionDTO(BaseModel):
    id: int
    owner: int
    amount: JsonAmount
    kind: TransactionKind
    counterparty: str | None
    timestamp: datetime

    @classmethod
    def from_entity(cls, tx: Transaction) -> TransactionDTO:
        return cls(
            id=tx.id,
            owner=tx.owner_id,
            amount=tx.amount,
            kind=tx.kind,
            counterparty=tx.counterparty,
            timestamp=tx.timestamp,
        )
