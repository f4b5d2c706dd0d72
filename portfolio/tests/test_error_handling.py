from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from flask import Flask

from portfolio.shared.config import AppConfig, load_config
from portfolio.shared.errors import http as error_http
from portfolio.shared.middleware.error_handler import configure_error_handling


def _config(debug_logging: bool) -> AppConfig:
    return load_config().model_copy(update={"debug_logging": debug_logging})


def _failing_app(config: AppConfig) -> Flask:
    app = Flask(__name__)
    configure_error_handling(app, config)

    @app.get("/boom")
    def boom():
        raise RuntimeError("boom")

    return app


@pytest.mark.parametrize("debug_logging", [True, False])
def test_unexpected_error_uses_given_config(
    monkeypatch: pytest.MonkeyPatch, debug_logging: bool
) -> None:
    fake_logger = MagicMock()
    monkeypatch.setattr(error_http, "logger", fake_logger)

    with _failing_app(_config(debug_logging)).test_client() as client:
        response = client.get("/boom")

    assert response.status_code == 500
    assert response.get_json() == {"error": "internal_error"}
    assert fake_logger.exception.called is debug_logging
    assert fake_logger.error.called is not debug_logging
