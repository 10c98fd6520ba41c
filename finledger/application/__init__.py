# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.ledger.create_transaction import CreateTransactionUseCase
from .use_cases.ledger.list_transactions import ListTransactionsUseCase
from .use_cases.users.authenticate_user import AuthenticateUserUseCase
from .use_cases.users.login_user import LoginUserUseCase
from .use_cases.users.register_user import RegisterUserUseCase

__all__ = [
    "AuthenticateUserUseCase",
    "CreateTransactionUseCase",
    "ListTransactionsUseCase",
    "LoginUserUseCase",
    "RegisterUserUseCase",
]
