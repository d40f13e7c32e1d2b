# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

MIN_PASSWORD_LENGTH = 6


def normalize_email(email: str | None) -> str:
    """Emails compare case-insensitively and ignore surrounding whitespace."""
    return (email or "").strip().lower()
