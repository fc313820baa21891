"""Generation options shared by the resource planner, scaffolder and CLI."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

__all__ = ["GenerationOptions", "SWAGGER_PACKAGE", "detect_swagger"]


LOGGER = logging.getLogger(__name__)

SWAGGER_PACKAGE = "@nestjs/swagger"
MAPPED_TYPES_PACKAGE = "@nestjs/mapped-types"


class GenerationOptions(BaseModel):
    """Options describing a single resource to generate.

    Field names are snake_case; the camelCase spellings (``specFileSuffix``,
    ``isSwaggerInstalled``) are accepted as aliases so option records written
    for the schematic validate unchanged. ``type`` is kept as a plain string
    here and checked against the transport table when the plan is built.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    name: str = Field(..., description="Resource name exactly as supplied by the caller.")
    type: str = Field(default="rest", description="Transport layer to generate.")
    crud: bool = Field(default=True, description="Generate CRUD entry points and data-shape files.")
    spec: bool = Field(default=True, description="Generate spec companions for the primary and service files.")
    spec_file_suffix: str = Field(default="spec", min_length=1, description="Suffix used for spec companion files.")
    flat: bool = Field(default=False, description="Place files directly in the target directory.")
    is_swagger_installed: bool = Field(default=False, description="Whether the host project depends on @nestjs/swagger.")
    language: Literal["ts"] = Field(default="ts", description="Language of the generated sources.")
    path: str = Field(default="", description="Directory, relative to the target, the resource is created under.")

    @property
    def partial_type_package(self) -> str:
        """Package the update DTO imports ``PartialType`` from."""

        return SWAGGER_PACKAGE if self.is_swagger_installed else MAPPED_TYPES_PACKAGE


def detect_swagger(directory: str | Path) -> bool:
    """Return ``True`` when ``directory/package.json`` depends on @nestjs/swagger."""

    manifest = Path(directory) / "package.json"
    if not manifest.is_file():
        return False

    try:
        package = json.loads(manifest.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        LOGGER.warning("ignoring unreadable %s: %s", manifest, exc)
        return False

    for section in ("dependencies", "devDependencies"):
        dependencies = package.get(section) or {}
        if SWAGGER_PACKAGE in dependencies:
            return True
    return False
