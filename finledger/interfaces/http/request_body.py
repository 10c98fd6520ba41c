# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import TypeVar

from flask import request
from pydantic import BaseModel, ValidationError

from finledger.shared.errors.validation import raise_validation_error

ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_json_body(model: type[ModelT]) -> ModelT:
    """Validate the request's JSON object against ``model``.

    A missing or non-JSON body is validated as ``{}`` so the client gets
    the usual per-field ``validation_error`` instead of a bare 400.
    """
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        payload = {}
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise_validation_error(exc)
