# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pathlib import Path

from flask import Blueprint, Response, jsonify, send_from_directory
from sqlalchemy.exc import SQLAlchemyError

from portfolio.infrastructure.health import check_database


class MiscController:
    def __init__(self, *, uploads_dir: Path) -> None:
        self._uploads_dir = uploads_dir

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/health", view_func=self.health, methods=["GET"])
        bp.add_url_rule("/uploads/<path:filename>", view_func=self.uploads, methods=["GET"])
        return bp

    def health(self) -> Response:
        status: dict[str, object] = {"ok": True}
        try:
            check_database()
            status["database"] = "ok"
        except SQLAlchemyError as exc:  # pragma: no cover
            status["ok"] = False
            status["database"] = f"error: {type(exc).__name__}"
        return jsonify(status)

    def uploads(self, filename: str) -> Response:
        return send_from_directory(self._uploads_dir.resolve(), filename)
