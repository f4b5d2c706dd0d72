from __future__ import annotations

import os
import tempfile
from pathlib import Path

# Settings and the engine are resolved at import time, so the environment
# has to be in place before anything under ``portfolio`` is imported.
_TMP = Path(tempfile.mkdtemp(prefix="portfolio-tests-"))

os.environ.setdefault("APP_ENV", "test")
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP / 'test.db'}"
os.environ["UPLOADS_DIR"] = str(_TMP / "uploads")
os.environ["LOG_FILE"] = str(_TMP / "app.log")
os.environ["JWT_KEY"] = "test-signing-key-with-more-than-thirty-two-bytes"
os.environ["JWT_ISSUER"] = "portfolio-tests"
os.environ["JWT_AUDIENCE"] = "portfolio-clients"
for _name in ("INITIAL_USER_USERNAME", "INITIAL_USER_EMAIL", "INITIAL_USER_PASSWORD"):
    os.environ.pop(_name, None)

import pytest  # noqa: E402

from portfolio.application.services.tokens import TokenSettings  # noqa: E402


@pytest.fixture()
def token_settings() -> TokenSettings:
    return TokenSettings(
        key=os.environ["JWT_KEY"],
        issuer=os.environ["JWT_ISSUER"],
        audience=os.environ["JWT_AUDIENCE"],
    )


@pytest.fixture()
def uploads_root() -> Path:
    return Path(os.environ["UPLOADS_DIR"])
