# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Email/password authentication demo: login, registration, dashboard, logout."""

__version__ = "1.0.0"
