# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
import time

from flask import Flask, Response, g, request

from finledger.shared.logging import (clear_correlation_id, get_correlation_id, logger,
                                      redact, set_correlation_id)

REQUEST_ID_HEADER = "X-Request-ID"
_MAX_REQUEST_ID = 64


def _client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For", "")
    first_hop = forwarded.split(",")[0].strip()
    return first_hop or request.remote_addr or "unknown"


def _incoming_request_id() -> str:
    supplied = request.headers.get(REQUEST_ID_HEADER, "").strip()
    if supplied and len(supplied) <= _MAX_REQUEST_ID and supplied.isprintable():
        return supplied
    return secrets.token_hex(8)


def configure_request_logging(app: Flask, *, debug_mode: bool = False) -> None:
    """One line when a request arrives, one when it leaves, both tagged with its id."""

    @app.before_request
    def _open_request() -> None:
        set_correlation_id(_incoming_request_id())
        g.request_started = time.perf_counter()

        if debug_mode:
            logger.debug(
                f"-> {request.method} {request.path} ip={_client_ip()} "
                f"headers={redact(dict(request.headers))} bytes={request.content_length or 0}"
            )
        else:
            logger.info(f"-> {request.method} {request.path} ip={_client_ip()}")

    @app.after_request
    def _close_request(response: Response) -> Response:
        started = getattr(g, "request_started", None)
        elapsed_ms = (time.perf_counter() - started) * 1000 if started is not None else 0.0
        user = getattr(g, "user_id", None)
        logger.info(
            f"<- {request.method} {request.path} status={response.status_code} "
            f"dt_ms={elapsed_ms:.1f} user={user if user is not None else '-'}"
        )
        response.headers.setdefault(REQUEST_ID_HEADER, get_correlation_id())
        return response

    @app.teardown_request
    def _drop_request_context(exc: BaseException | None) -> None:
        if exc is not None:
            logger.error(f"request aborted: {type(exc).__name__} on {request.method} {request.path}")
        clear_correlation_id()


__all__ = ["REQUEST_ID_HEADER", "configure_request_logging"]
