# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:

    id: int
    email: str
    password_hash: str
    created_at: datetime
    phone: str | None = None


@dataclass(slots=True, frozen=True)
class SessionData:
    """Payload kept server-side for an authenticated browser."""

    user_id: int
    user_email: str


@dataclass(slots=True, frozen=True)
class Session:

    token: str
    data: SessionData
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at
