# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from finledger.application.services.password_hashing import WerkzeugPasswordHasher
from finledger.application.services.tokens import JwtTokenService
from finledger.application.use_cases.ledger.create_transaction import CreateTransactionUseCase
from finledger.application.use_cases.ledger.list_transactions import ListTransactionsUseCase
from finledger.application.use_cases.users.authenticate_user import AuthenticateUserUseCase
from finledger.application.use_cases.users.login_user import LoginUserUseCase
from finledger.application.use_cases.users.register_user import RegisterUserUseCase
from finledger.infrastructure.db import create_db_engine, create_session_factory
from finledger.infrastructure.repositories.ledger.sqlalchemy_transaction_repository import \
    SqlAlchemyTransactionRepository
from finledger.infrastructure.repositories.users.sqlalchemy_user_repository import \
    SqlAlchemyUserRepository
from finledger.interfaces.http.auth_guard import AuthGuard
from finledger.interfaces.http.controllers.auth_controller import AuthController
from finledger.interfaces.http.controllers.misc_controller import MiscController
from finledger.interfaces.http.controllers.transactions_controller import \
    TransactionsController
from finledger.shared.config import AppConfig


class Container:
    def __init__(self, config: AppConfig) -> None:
        self.config = config

    @cached_property
    def engine(self) -> Engine:
        return create_db_engine(self.config.database)

    @cached_property
    def session_factory(self) -> sessionmaker[Session]:
        return create_session_factory(self.engine)

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def token_service(self) -> JwtTokenService:
        return JwtTokenService(
            secret_key=self.config.secret_key,
            ttl=self.config.tokens.ttl,
            algorithm=self.config.tokens.algorithm,
            issuer=self.config.tokens.issuer,
        )

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.session_factory)

    @cached_property
    def transaction_repository(self) -> SqlAlchemyTransactionRepository:
        return SqlAlchemyTransactionRepository(self.session_factory)

    # User use cases

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def authenticate_user_use_case(self) -> AuthenticateUserUseCase:
        return AuthenticateUserUseCase(tokens=self.token_service)

    # Ledger use cases

    @cached_property
    def list_transactions_use_case(self) -> ListTransactionsUseCase:
        return ListTransactionsUseCase(transactions=self.transaction_repository)

    @cached_property
    def create_transaction_use_case(self) -> CreateTransactionUseCase:
        return CreateTransactionUseCase(transactions=self.transaction_repository)

    # HTTP

    @cached_property
    def auth_guard(self) -> AuthGuard:
        return AuthGuard(authenticate=self.authenticate_user_use_case)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
        )

    @cached_property
    def transactions_controller(self) -> TransactionsController:
        return TransactionsController(
            guard=self.auth_guard,
            list_use_case=self.list_transactions_use_case,
            create_use_case=self.create_transaction_use_case,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(engine=self.engine)
