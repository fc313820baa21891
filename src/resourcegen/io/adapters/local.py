"""Filesystem-backed output tree."""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath

from ..interfaces import OutputTree

LOGGER = logging.getLogger(__name__)


def _ensure_directory(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


class LocalOutputTree(OutputTree):
    """Write rendered files below a directory on disk."""

    def __init__(self, directory: Path | str):
        self._directory = Path(directory).expanduser().resolve()
        _ensure_directory(self._directory)

    @property
    def directory(self) -> Path:
        """Directory backing this tree."""

        return self._directory

    def _destination(self, path: str) -> Path:
        relative = PurePosixPath(path)
        if relative.is_absolute() or ".." in relative.parts:
            raise ValueError(f"refusing to write outside {self._directory}: {path}")
        return self._directory.joinpath(*relative.parts)

    def exists(self, path: str) -> bool:
        return self._destination(path).exists()

    def write(self, path: str, content: str) -> None:
        destination = self._destination(path)
        _ensure_directory(destination.parent)
        destination.write_text(content, encoding="utf-8")
        LOGGER.info("wrote %s", destination)

    def flush(self) -> None:
        _ensure_directory(self._directory)


__all__ = ["LocalOutputTree"]
