# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
from typing import Any

SENSITIVE_PATTERNS = [
    # Tokens
    (r"(bearer\s+)([a-zA-Z0-9_\-\.]{20,})", r"\1***REDACTED***", re.IGNORECASE),
    (r"(token\s*[:=]\s*['\"]?)([a-zA-Z0-9_\-\.]{20,})(['\"]?)", r"\1***REDACTED***\3"),

    # Passwords
    (r"(password\s*[:=]\s*['\"]?)([^'\"\s]{1,})(['\"]?)", r"\1***REDACTED***\3", re.IGNORECASE),
    (r"(confirm_password\s*[:=]\s*['\"]?)([^'\"\s]{1,})(['\"]?)", r"\1***REDACTED***\3", re.IGNORECASE),

    # Session data
    (r"(session[_-]?id\s*[:=]\s*['\"]?)([a-zA-Z0-9_\-\.]{20,})(['\"]?)", r"\1***REDACTED***\3"),
    (r"(cookie\s*:\s*['\"]?)([^'\"]{10,})(['\"]?)", r"\1***REDACTED***\3", re.IGNORECASE),

    # Database URLs with credentials
    (r"(postgresql|postgres|mysql)(\+\w+)?://([^:/]+):([^@]+)@", r"\1\2://\3:***REDACTED***@"),

    # Email addresses (partial masking)
    (r"([a-zA-Z0-9._%+-]+)@([a-zA-Z0-9.-]+\.[a-zA-Z]{2,})", r"***@\2"),

    # Phone numbers
    (r"(phone\s*=\s*['\"]?)(\+?[\d ()\-]{7,20})(['\"]?)", r"\1+***-***-****\3"),
]

_COMPILED = [
    re.compile(pattern_tuple[0], pattern_tuple[2] if len(pattern_tuple) == 3 else 0)
    for pattern_tuple in SENSITIVE_PATTERNS
]
_REPLACEMENTS = [pattern_tuple[1] for pattern_tuple in SENSITIVE_PATTERNS]


def sanitize_message(message: str) -> str:
    sanitized = message
    for pattern, replacement in zip(_COMPILED, _REPLACEMENTS):
        sanitized = pattern.sub(replacement, sanitized)
    return sanitized


def sanitize_record(record: dict[str, Any]) -> None:
    if "message" in record:
        record["message"] = sanitize_message(record["message"])
