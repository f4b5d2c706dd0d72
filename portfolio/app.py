# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import importlib
from typing import Any, Protocol, cast

from flask import Flask

from portfolio.container import Container
from portfolio.container import container as default_container
from portfolio.infrastructure.db import init_db
from portfolio.infrastructure.seed import seed_initial_user
from portfolio.interfaces.http.security import configure_authentication
from portfolio.shared.logging import logger, setup_logging
from portfolio.shared.middleware.error_handler import configure_error_handling
from portfolio.shared.middleware.request_logger import configure_request_logging


class _CORSCallable(Protocol):
    def __call__(self, app: Flask, **kwargs: Any) -> Any: ...


_flask_cors = importlib.import_module("flask_cors")
CORS = cast(_CORSCallable, _flask_cors.CORS)


def create_app(container: Container | None = None) -> Flask:
    container = container or default_container
    config = container.config

    setup_logging(debug_mode=config.debug_logging)
    init_db()

    # Token settings are validated here so a missing JWT key stops startup.
    container.token_issuer
    container.auth_gate

    seed_initial_user(config, container.register_user_use_case)

    app = Flask(__name__)
    configure_error_handling(app, config)
    configure_request_logging(app, config)
    configure_authentication(app, container.auth_gate, container.token_transport)

    cors_kwargs: dict[str, object] = {"origins": config.security.allowed_origins}
    if any(o != "*" for o in config.security.allowed_origins):
        cors_kwargs["supports_credentials"] = True
    CORS(app, **cors_kwargs)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.projects_controller.as_blueprint())
    app.register_blueprint(container.skills_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")

        resp.headers.setdefault("Referrer-Policy", "no-referrer")

        resp.headers.setdefault("X-Content-Type-Options", "nosniff")

        resp.headers.setdefault(
            "Permissions-Policy",
            "geolocation=(), microphone=(), camera=(), payment=(), usb=()",
        )

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )

        return resp

    logger.info("Flask app initialized")
    return app
