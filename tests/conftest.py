from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from resourcegen.config import GenerationOptions  # noqa: E402


@pytest.fixture()
def make_options():
    """Build :class:`GenerationOptions` with ``name="users"`` unless overridden."""

    def factory(**overrides) -> GenerationOptions:
        overrides.setdefault("name", "users")
        return GenerationOptions(**overrides)

    return factory
