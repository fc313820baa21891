"""Abstract interfaces for resourcegen output targets."""

from __future__ import annotations

from abc import ABC, abstractmethod


class OutputTree(ABC):
    """Sink receiving rendered files keyed by a POSIX relative path."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return whether ``path`` is already present in the tree."""

    @abstractmethod
    def write(self, path: str, content: str) -> None:
        """Persist ``content`` at ``path``."""

    @abstractmethod
    def flush(self) -> None:
        """Ensure every written file is visible to consumers."""


__all__ = ["OutputTree"]
