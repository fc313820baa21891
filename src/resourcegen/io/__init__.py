"""Output targets for rendered resource files."""

from .adapters import LocalOutputTree, MemoryOutputTree
from .interfaces import OutputTree

__all__ = [
    "LocalOutputTree",
    "MemoryOutputTree",
    "OutputTree",
]
