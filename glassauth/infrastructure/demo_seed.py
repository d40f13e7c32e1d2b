# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from glassauth.domain.users.entities import User
from glassauth.domain.users.exceptions import UserAlreadyExistsError
from glassauth.domain.users.policies import normalize_email
from glassauth.domain.users.repositories import PasswordHasher, UserRepository
from glassauth.shared.config import DemoConfig
from glassauth.shared.logging import logger


def seed_demo_user(
    users: UserRepository,
    password_hasher: PasswordHasher,
    config: DemoConfig,
) -> User | None:
    """Insert the demo account when the user table is empty."""
    if not config.enabled:
        logger.info("demo_seed: disabled, skipping")
        return None

    if users.count() > 0:
        logger.debug("demo_seed: users present, skipping")
        return None

    try:
        user = users.add(
            normalize_email(config.email),
            password_hasher.hash(config.password),
            phone=config.phone,
        )
    except UserAlreadyExistsError:
        logger.info("demo_seed: demo user already created by another worker")
        return None

    logger.info(f"demo_seed: demo user created user_id={user.id}")
    return user


__all__ = ["seed_demo_user"]
