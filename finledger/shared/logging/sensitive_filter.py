# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import hashlib
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

REDACTED = "***REDACTED***"

SENSITIVE_KEYS = frozenset(
    {"authorization", "cookie", "password", "secret", "secret_key", "token", "x-api-key"}
)


@dataclass(frozen=True, slots=True)
class _Rule:
    pattern: re.Pattern[str]
    replacement: str


def _rule(pattern: str, replacement: str, flags: int = 0) -> _Rule:
    return _Rule(re.compile(pattern, flags), replacement)


# Order matters: JWTs go first so header rules only ever see the placeholder.
_RULES: tuple[_Rule, ...] = (
    _rule(r"\beyJ[\w-]+\.[\w-]+\.[\w-]+", "***JWT***"),
    _rule(r"(bearer\s+)[\w.\-]{8,}", rf"\1{REDACTED}", re.IGNORECASE),
    _rule(
        r"(authorization\s*[:=]\s*['\"]?)(?:(?:bearer|basic)\s+)?[^'\"\s,}]+",
        rf"\1{REDACTED}",
        re.IGNORECASE,
    ),
    _rule(
        r"((?:password|secret(?:[_-]?key)?|token)['\"]?\s*[:=]\s*['\"]?)[^'\"\s,}]+",
        rf"\1{REDACTED}",
        re.IGNORECASE,
    ),
    _rule(r"\b(?:scrypt|pbkdf2)[^\s$]*\$[^\s$]+\$[0-9a-f]+", "***HASH***"),
    _rule(
        r"((?:postgres(?:ql)?|mysql|mariadb)(?:\+\w+)?://[^:/\s]+:)[^@\s]+@",
        rf"\1{REDACTED}@",
    ),
    _rule(r"\b[A-Za-z0-9._%+-]+@([A-Za-z0-9.-]+\.[A-Za-z]{2,})", r"***@\1"),
)


def sanitize_message(message: str) -> str:
    for rule in _RULES:
        message = rule.pattern.sub(rule.replacement, message)
    return message


def sanitize_record(record: dict[str, Any]) -> bool:
    """loguru ``filter``: rewrites the message in place and never drops the record."""
    if "message" in record:
        record["message"] = sanitize_message(record["message"])
    return True


def _fingerprint(value: str) -> str:
    return f"<sha256:{hashlib.sha256(value.encode()).hexdigest()[:8]}>"


def redact(values: Mapping[str, Any], keys: Iterable[str] = SENSITIVE_KEYS) -> dict[str, Any]:
    """Copy of ``values`` with sensitive entries replaced by a short hash.

    The hash lets two log lines be correlated without revealing the value.
    """
    sensitive = {k.lower() for k in keys}
    return {
        key: _fingerprint(str(value)) if key.lower() in sensitive else value
        for key, value in values.items()
    }


__all__ = ["REDACTED", "SENSITIVE_KEYS", "redact", "sanitize_message", "sanitize_record"]
