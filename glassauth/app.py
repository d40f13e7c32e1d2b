# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import atexit
from pathlib import Path

from flask import Flask

from glassauth.infrastructure.container import Container
from glassauth.infrastructure.db import init_db
from glassauth.infrastructure.demo_seed import seed_demo_user
from glassauth.shared.config import AppConfig, load_config
from glassauth.shared.logging import logger, setup_logging
from glassauth.shared.middleware import (
    configure_error_handling,
    configure_request_logging,
    configure_request_metrics,
    configure_security_headers,
)

_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def create_app(
    config: AppConfig | None = None, container: Container | None = None
) -> Flask:
    config = config or (container.config if container else load_config())
    setup_logging(config.log_level, log_file=config.log_file, debug_mode=config.debug_logging)

    container = container or Container(config)
    # a schema failure here is fatal for the process
    init_db(container.engine)
    seed_demo_user(container.user_repository, container.password_hasher, config.demo)

    app = Flask(__name__, template_folder=str(_TEMPLATES_DIR))
    app.extensions["glassauth"] = container

    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)
    configure_request_metrics(app, container.metrics)
    configure_security_headers(app, enable_hsts=config.security.enable_hsts)

    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.dashboard_controller.as_blueprint())
    app.register_blueprint(container.misc_controller.as_blueprint())

    logger.info(f"{config.app_name} initialized (env={config.app_env})")
    return app


def main() -> None:
    config = load_config()
    container = Container(config)
    app = create_app(config, container)
    atexit.register(container.dispose)

    logger.info(f"{config.app_name} running on http://localhost:{config.port}")
    app.run(host=config.host, port=config.port, threaded=True)


if __name__ == "__main__":
    main()
