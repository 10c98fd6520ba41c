# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus
from time import perf_counter

from flask import Blueprint, Response, jsonify

from finledger.application.use_cases.ledger.create_transaction import CreateTransactionUseCase
from finledger.application.use_cases.ledger.list_transactions import ListTransactionsUseCase
from finledger.interfaces.http.auth_guard import AuthGuard
from finledger.interfaces.http.dto.transactions import (CreateTransactionRequestDTO,
                                                        TransactionDTO)
from finledger.interfaces.http.request_body import parse_json_body
from finledger.shared.logging import logger


class TransactionsController:
    def __init__(
        self,
        *,
        guard: AuthGuard,
        list_use_case: ListTransactionsUseCase,
        create_use_case: CreateTransactionUseCase,
    ) -> None:
        self._guard = guard
        self._list_use_case = list_use_case
        self._create_use_case = create_use_case

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("transactions", __name__)
        bp.add_url_rule(
            "/transactions",
            endpoint="list_transactions",
            view_func=self._guard(self.list_transactions),
            methods=["GET"],
        )
        bp.add_url_rule(
            "/transactions",
            endpoint="create_transaction",
            view_func=self._guard(self.create),
            methods=["POST"],
        )
        return bp

    def list_transactions(self, user_id: int) -> tuple[Response, int]:
        t0 = perf_counter()
        items = self._list_use_case.execute(user_id)
        dt = (perf_counter() - t0) * 1000
        logger.info(f"transactions.list: ok (user_id={user_id}, n={len(items)}, dt_ms={dt:.0f})")
        payload = [TransactionDTO.from_entity(tx).model_dump(mode="json") for tx in items]
        return jsonify(payload), HTTPStatus.OK

    def create(self, user_id: int) -> tuple[Response, int]:
        body = parse_json_body(CreateTransactionRequestDTO)
        created = self._create_use_case.execute(
            user_id, body.amount, body.kind, body.counterparty
        )
        return jsonify(TransactionDTO.from_entity(created).model_dump(mode="json")), HTTPStatus.CREATED
