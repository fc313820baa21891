"""Render a planned resource and hand the files to an output tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .config import GenerationOptions
from .io.interfaces import OutputTree
from .plan import FileManifest, plan_resource
from .template import TemplateRenderer

__all__ = ["ResourceScaffolder", "TEMPLATE_ROOT"]


LOGGER = logging.getLogger(__name__)

TEMPLATE_ROOT = Path(__file__).resolve().parent / "files"


@dataclass(slots=True)
class ResourceScaffolder:
    """Plan, render and write the files making up a resource."""

    renderer: TemplateRenderer
    template_root: Path

    def __init__(
        self,
        renderer: TemplateRenderer | None = None,
        template_root: str | Path | None = None,
    ) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.template_root = Path(template_root) if template_root is not None else TEMPLATE_ROOT

    def plan(self, options: GenerationOptions) -> FileManifest:
        """Return the manifest for ``options`` without rendering anything."""

        return plan_resource(options)

    def render(self, manifest: FileManifest) -> list[tuple[str, str]]:
        """Render every enabled entry of ``manifest`` into ``(path, text)`` pairs."""

        rendered: list[tuple[str, str]] = []
        for entry in manifest.enabled():
            text = self.renderer.render_file(
                self.template_root / entry.template_id,
                manifest.context,
                missing="error",
            )
            rendered.append((manifest.full_path(entry), text))
        return rendered

    def create(
        self,
        options: GenerationOptions,
        tree: OutputTree,
        *,
        force: bool = False,
    ) -> FileManifest:
        """Generate the resource described by ``options`` into ``tree``.

        Every file is rendered and checked for conflicts before the first
        write, so a failure leaves ``tree`` untouched.
        """

        manifest = self.plan(options)
        files = self.render(manifest)

        if not force:
            conflicts = [path for path, _ in files if tree.exists(path)]
            if conflicts:
                raise FileExistsError(f"{', '.join(conflicts)} already exist(s)")

        for path, text in files:
            tree.write(path, text)
        tree.flush()

        LOGGER.info("generated %d files for resource %r", len(files), options.name)
        return manifest
