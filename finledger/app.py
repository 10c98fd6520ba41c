# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from finledger.infrastructure.container import Container
from finledger.infrastructure.db import init_db
from finledger.shared.config import AppConfig, load_config
from finledger.shared.logging import logger, setup_logging
from finledger.shared.middleware.error_handler import configure_error_handling
from finledger.shared.middleware.request_logger import configure_request_logging
from finledger.shared.middleware.security_headers import configure_security_headers


def create_app(config: AppConfig | None = None, container: Container | None = None) -> Flask:
    config = config or (container.config if container else load_config())
    container = container or Container(config)

    setup_logging(debug_mode=config.debug_logging)
    init_db(container.engine)

    app = Flask(__name__)
    app.config.update(SECRET_KEY=config.secret_key)
    app.extensions["finledger.container"] = container

    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)
    configure_security_headers(app, enable_hsts=config.security.enable_hsts)

    cors_kwargs: dict[str, object] = {
        "resources": {r"/*": {"origins": config.security.allowed_origins}},
        "allow_headers": ["Authorization", "Content-Type", "X-Request-ID"],
    }
    CORS(app, **cors_kwargs)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.transactions_controller.as_blueprint())

    logger.info(f"Flask app initialized (env={config.app_env})")
    return app
