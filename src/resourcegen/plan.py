"""Compute the ordered file manifest for a resource.

The manifest is derived from a declarative rule table. Each rule names a path
pattern, the file role used to pick a template from the transport profile, and
a gate deciding whether the file is enabled. Disabled entries stay in the
manifest so the full decision table can be inspected and tested as data.
"""

from __future__ import annotations

import logging
import posixpath
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Iterator, Mapping

from .config import GenerationOptions
from .naming import ResourceName, transform
from .transports import TransportProfile, profile_for

__all__ = [
    "FileManifest",
    "FileManifestEntry",
    "FileRule",
    "PLAN_RULES",
    "build_plan",
    "plan_resource",
]


LOGGER = logging.getLogger(__name__)

Gate = Callable[[TransportProfile, GenerationOptions], bool]


def _always(profile: TransportProfile, options: GenerationOptions) -> bool:
    return True


def _with_schema(profile: TransportProfile, options: GenerationOptions) -> bool:
    return profile.emits_schema


def _with_spec(profile: TransportProfile, options: GenerationOptions) -> bool:
    return options.spec


def _with_crud(profile: TransportProfile, options: GenerationOptions) -> bool:
    return options.crud


def _with_remove_input(profile: TransportProfile, options: GenerationOptions) -> bool:
    return options.crud and profile.has_remove_input


@dataclass(frozen=True, slots=True)
class FileRule:
    """One row of the planning table."""

    pattern: str
    role: str
    gate: Gate = _always


# Rows are listed in precedence order; the manifest is sorted afterwards.
PLAN_RULES: tuple[FileRule, ...] = (
    FileRule("{stem}.{primary}.{ext}", "primary"),
    FileRule("{stem}.graphql", "schema", _with_schema),
    FileRule("{stem}.module.{ext}", "module"),
    FileRule("{stem}.service.{ext}", "service"),
    FileRule("{stem}.{primary}.{spec_suffix}.{ext}", "primary.spec", _with_spec),
    FileRule("{stem}.service.{spec_suffix}.{ext}", "service.spec", _with_spec),
    FileRule("args/{singular}.args.{ext}", "args"),
    FileRule("output/create-{singular}.output.{ext}", "output.create", _with_crud),
    FileRule("output/update-{singular}.output.{ext}", "output.update", _with_crud),
    FileRule("output/remove-{singular}.output.{ext}", "output.remove", _with_crud),
    FileRule("input/create-{singular}{input_suffix}.{ext}", "input.create", _with_crud),
    FileRule("input/update-{singular}{input_suffix}.{ext}", "input.update", _with_crud),
    FileRule("input/remove-{singular}{input_suffix}.{ext}", "input.remove", _with_remove_input),
    FileRule("type/{singular}.type.{ext}", "type", _with_crud),
)


@dataclass(frozen=True, slots=True)
class FileManifestEntry:
    """A planned output file, relative to the resource root."""

    path: str
    template_id: str
    enabled: bool


@dataclass(frozen=True, slots=True)
class FileManifest:
    """Ordered result of :func:`build_plan`.

    ``root`` is the directory every entry path is relative to. It is empty when
    the resource is generated flat without a ``path`` prefix.
    """

    root: str
    entries: tuple[FileManifestEntry, ...]
    context: Mapping[str, Any]

    def __iter__(self) -> Iterator[FileManifestEntry]:
        return iter(self.entries)

    def enabled(self) -> tuple[FileManifestEntry, ...]:
        """Return the entries that will be rendered, in manifest order."""

        return tuple(entry for entry in self.entries if entry.enabled)

    def paths(self) -> list[str]:
        """Return enabled paths relative to :attr:`root`."""

        return [entry.path for entry in self.enabled()]

    def full_path(self, entry: FileManifestEntry) -> str:
        return posixpath.join(self.root, entry.path) if self.root else entry.path

    def full_paths(self) -> list[str]:
        """Return enabled paths including :attr:`root`."""

        return [self.full_path(entry) for entry in self.enabled()]


def _sort_key(entry: FileManifestEntry) -> tuple[bool, str]:
    # files directly in the root come before files in sub-directories
    return ("/" in entry.path, entry.path)


def _template_id(profile: TransportProfile, role: str, options: GenerationOptions) -> str:
    if role not in profile.templates:
        return ""
    return f"{options.language}/{profile.template_for(role, crud=options.crud)}"


def _resource_root(name: ResourceName, options: GenerationOptions) -> str:
    parts = [options.path.strip("/")]
    if not options.flat:
        parts.append(name.file_stem)
    return "/".join(part for part in parts if part)


def _context(name: ResourceName, profile: TransportProfile, options: GenerationOptions) -> Mapping[str, Any]:
    return MappingProxyType(
        {
            "name": name,
            "transport": profile.kind.value,
            "primary": profile.primary,
            "input_suffix": profile.input_suffix,
            "crud": options.crud,
            "spec_file_suffix": options.spec_file_suffix,
            "is_swagger_installed": options.is_swagger_installed,
            "partial_type_package": options.partial_type_package,
            "language": options.language,
        }
    )


def build_plan(name: ResourceName, options: GenerationOptions) -> FileManifest:
    """Build the ordered :class:`FileManifest` for ``name``.

    Raises :class:`~resourcegen.core.errors.UnknownTransportError` when
    ``options.type`` is not a known transport kind.
    """

    profile = profile_for(options.type)
    substitutions = {
        "stem": name.file_stem,
        "singular": name.singular_file_stem,
        "primary": profile.primary,
        "input_suffix": profile.input_suffix,
        "spec_suffix": options.spec_file_suffix,
        "ext": options.language,
    }

    entries = []
    for rule in PLAN_RULES:
        enabled = rule.gate(profile, options)
        entries.append(
            FileManifestEntry(
                path=rule.pattern.format(**substitutions),
                template_id=_template_id(profile, rule.role, options) if enabled else "",
                enabled=enabled,
            )
        )

    manifest = FileManifest(
        root=_resource_root(name, options),
        entries=tuple(sorted(entries, key=_sort_key)),
        context=_context(name, profile, options),
    )
    LOGGER.debug(
        "planned %s resource %r under %r: %s",
        profile.kind.value,
        name.raw,
        manifest.root,
        manifest.paths(),
    )
    return manifest


def plan_resource(options: GenerationOptions) -> FileManifest:
    """Transform ``options.name`` and build its manifest."""

    return build_plan(transform(options.name), options)
