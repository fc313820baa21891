"""Concrete :class:`~resourcegen.io.interfaces.OutputTree` implementations."""

from .local import LocalOutputTree
from .memory import MemoryOutputTree

__all__ = ["LocalOutputTree", "MemoryOutputTree"]
