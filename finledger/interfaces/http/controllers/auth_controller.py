# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify

from finledger.application.use_cases.users.login_user import LoginUserUseCase
from finledger.application.use_cases.users.register_user import RegisterUserUseCase
from finledger.interfaces.http.dto.auth import (LoginRequestDTO, RegisterRequestDTO,
                                                RegisterSuccessDTO, TokenDTO)
from finledger.interfaces.http.request_body import parse_json_body


class AuthController:
    """Public endpoints: account creation and token issue."""

    def __init__(
        self, *, register_use_case: RegisterUserUseCase, login_use_case: LoginUserUseCase
    ) -> None:
        self._register = register_use_case
        self._login = login_use_case

    def register(self) -> tuple[Response, int]:
        body = parse_json_body(RegisterRequestDTO)
        user = self._register.execute(body.email, body.secret)
        return jsonify(RegisterSuccessDTO(id=user.id).model_dump(mode="json")), HTTPStatus.CREATED

    def login(self) -> tuple[Response, int]:
        body = parse_json_body(LoginRequestDTO)
        issued = self._login.execute(body.email, body.secret)
        dto = TokenDTO(token=issued.token, expires_at=issued.expires_at)
        return jsonify(dto.model_dump(mode="json")), HTTPStatus.OK

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/auth")
        for rule, view in (("/register", self.register), ("/login", self.login)):
            bp.add_url_rule(rule, view_func=view, methods=["POST"])
        return bp
