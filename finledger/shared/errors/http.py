# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, jsonify, request
from werkzeug.exceptions import HTTPException

from finledger.shared.logging import logger

from .base import GENERIC_SERVER_MESSAGE, AppError

BEARER_CHALLENGE = 'Bearer realm="finledger"'


def error_response(error: AppError) -> tuple[Response, HTTPStatus]:
    response = jsonify(error.to_dict())
    if error.status == HTTPStatus.UNAUTHORIZED:
        response.headers["WWW-Authenticate"] = BEARER_CHALLENGE
    return response, error.status


def register_error_handler(app: Flask, *, debug_mode: bool = False) -> None:
    @app.errorhandler(AppError)
    def _on_app_error(exc: AppError):
        where = f"{request.method} {request.path}"
        if exc.is_server_error:
            logger.error(f"{exc.code} ({type(exc).__name__}) on {where}")
        else:
            logger.warning(f"{exc.code} ({type(exc).__name__}) on {where}")
        return error_response(exc)

    @app.errorhandler(HTTPException)
    def _on_http_exception(exc: HTTPException):
        return exc

    @app.errorhandler(Exception)
    def _on_unexpected(exc: Exception):
        where = f"{request.method} {request.path}"
        if debug_mode:
            logger.opt(exception=exc).error(
                f"unhandled {type(exc).__name__} on {where} "
                f"args={dict(request.args)} bytes={request.content_length or 0}"
            )
        else:
            logger.opt(exception=exc).error(f"unhandled {type(exc).__name__} on {where}")

        body = {"error": "internal_error", "message": GENERIC_SERVER_MESSAGE}
        return jsonify(body), HTTPStatus.INTERNAL_SERVER_ERROR
