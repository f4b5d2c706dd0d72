# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Local storage for uploaded project images."""

from __future__ import annotations

import uuid
from pathlib import Path, PurePosixPath

from werkzeug.utils import secure_filename

from portfolio.domain.catalog.repositories import ImageStore
from portfolio.shared.logging import logger


class LocalImageStorage(ImageStore):
    """Stores images under ``root/<folder>`` and hands out ``/uploads/<folder>/<name>`` paths."""

    def __init__(self, root: Path, *, folder: str = "projects", url_prefix: str = "/uploads") -> None:
        self._root = root
        self._folder = folder
        self._url_prefix = url_prefix.rstrip("/")
        self.directory.mkdir(parents=True, exist_ok=True)

    @property
    def directory(self) -> Path:
        return self._root / self._folder

    def _resolve(self, name: str) -> Path:
        path = (self.directory / name).resolve()
        if path.parent != self.directory.resolve():
            msg = "Attempted directory traversal outside storage root"
            raise ValueError(msg)
        return path

    def save(self, filename: str, data: bytes) -> str:
        safe_name = secure_filename(filename) or "image"
        stored_name = f"{uuid.uuid4().hex}_{safe_name}"
        file_path = self._resolve(stored_name)
        file_path.write_bytes(data)
        logger.debug(f"storage: write path={file_path} size={len(data)}")
        return f"{self._url_prefix}/{self._folder}/{stored_name}"

    def delete(self, public_path: str) -> None:
        name = PurePosixPath(public_path).name
        if not name:
            return
        try:
            file_path = self._resolve(name)
        except ValueError:
            logger.warning(f"storage: refusing to delete outside root path={public_path}")
            return
        if file_path.exists():
            file_path.unlink()
            logger.debug(f"storage: deleted path={file_path}")


__all__ = ["LocalImageStorage"]
