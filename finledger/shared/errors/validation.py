# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any, NoReturn

from pydantic import ValidationError as PydanticValidationError

from .base import ValidationError


def _field_path(loc: tuple[Any, ...]) -> str:
    return ".".join(str(part) for part in loc) or "body"


def format_pydantic_errors(exc: PydanticValidationError) -> dict[str, Any]:
    """Turn pydantic's error list into ``{"fields": [...], "errors": [...]}``.

    Input values are left out so rejected secrets never reach a response.
    """
    details = [
        {"field": _field_path(err["loc"]), "type": err["type"], "message": err["msg"]}
        for err in exc.errors(include_url=False, include_input=False, include_context=False)
    ]
    return {
        "fields": sorted({d["field"] for d in details}),
        "errors": details,
    }


def raise_validation_error(exc: PydanticValidationError) -> NoReturn:
    context = format_pydantic_errors(exc)
    summary = "; ".join(f"{d['field']}: {d['message']}" for d in context["errors"])
    raise ValidationError(summary or "Invalid request", context=context) from exc


__all__ = ["format_pydantic_errors", "raise_validation_error"]
