# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .logger import (clear_correlation_id, get_correlation_id, log_file_path, logger,
                     set_correlation_id, setup_logging)
from .sensitive_filter import redact, sanitize_message, sanitize_record

__all__ = [
    "clear_correlation_id",
    "get_correlation_id",
    "log_file_path",
    "logger",
    "redact",
    "sanitize_message",
    "sanitize_record",
    "set_correlation_id",
    "setup_logging",
]
