"""In-memory output tree used for dry runs and tests."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from ..interfaces import OutputTree


class MemoryOutputTree(OutputTree):
    """Collect rendered files in insertion order without touching the disk."""

    def __init__(self) -> None:
        self._files: dict[str, str] = {}

    @property
    def files(self) -> Mapping[str, str]:
        """Read-only view of ``path -> content`` in write order."""

        return MappingProxyType(self._files)

    def read(self, path: str) -> str:
        return self._files[path]

    def exists(self, path: str) -> bool:
        return path in self._files

    def write(self, path: str, content: str) -> None:
        self._files[path] = content

    def flush(self) -> None:
        return None


__all__ = ["MemoryOutputTree"]
