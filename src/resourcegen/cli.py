"""Command line interface for the resource generator."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from pydantic import ValidationError

from .config import GenerationOptions, detect_swagger
from .core.errors import ResourceGenError
from .io import LocalOutputTree, MemoryOutputTree
from .scaffold import ResourceScaffolder
from .template import TemplateRenderingError
from .transports import TransportKind


def _non_empty(value: str) -> str:
    if not value.strip():
        raise argparse.ArgumentTypeError("value must not be empty")
    return value


def _add_resource_arguments(parser: argparse.ArgumentParser) -> None:
    kinds = ", ".join(kind.value for kind in TransportKind)
    parser.add_argument("name", help="Name of the resource, e.g. 'users'")
    parser.add_argument(
        "-t",
        "--type",
        default=TransportKind.REST.value,
        help=f"Transport layer to generate ({kinds})",
    )
    parser.add_argument(
        "--crud",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Generate CRUD entry points, inputs, outputs and the type file",
    )
    parser.add_argument(
        "--spec",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Generate spec files for the transport and service files",
    )
    parser.add_argument(
        "--spec-file-suffix",
        type=_non_empty,
        default="spec",
        help="Suffix used for spec files, e.g. 'test' for *.test.ts",
    )
    parser.add_argument(
        "--flat",
        action="store_true",
        help="Do not create a directory for the resource",
    )
    parser.add_argument("--path", default="", help="Sub-directory the resource is created under")
    parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=Path.cwd(),
        help="Project directory; package.json here is inspected for @nestjs/swagger",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate NestJS resources")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    resource_parser = subparsers.add_parser(
        "resource", aliases=["res"], help="generate the files for a new resource"
    )
    _add_resource_arguments(resource_parser)
    resource_parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Overwrite existing files instead of failing",
    )
    resource_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Report the files that would be created without writing them",
    )

    plan_parser = subparsers.add_parser(
        "plan", help="print the file manifest, including disabled entries"
    )
    _add_resource_arguments(plan_parser)

    return parser


def _options_from_args(args: argparse.Namespace) -> GenerationOptions:
    return GenerationOptions(
        name=args.name,
        type=args.type,
        crud=args.crud,
        spec=args.spec,
        spec_file_suffix=args.spec_file_suffix,
        flat=args.flat,
        path=args.path,
        is_swagger_installed=detect_swagger(args.directory),
    )


def _handle_resource(args: argparse.Namespace) -> int:
    options = _options_from_args(args)
    scaffolder = ResourceScaffolder()
    tree = MemoryOutputTree() if args.dry_run else LocalOutputTree(args.directory)
    manifest = scaffolder.create(options, tree, force=args.force)

    for path in manifest.full_paths():
        print(f"CREATE {path}")
    if args.dry_run:
        print("Dry run: no files were written.")
    return 0


def _handle_plan(args: argparse.Namespace) -> int:
    manifest = ResourceScaffolder().plan(_options_from_args(args))
    print(f"root: {manifest.root or '.'}")
    for entry in manifest:
        marker = "+" if entry.enabled else "-"
        template = entry.template_id or "(disabled)"
        print(f"{marker} {entry.path}  <- {template}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.command in {"resource", "res"}:
            return _handle_resource(args)
        if args.command == "plan":
            return _handle_plan(args)
    except (
        ResourceGenError,
        FileExistsError,
        TemplateRenderingError,
        ValidationError,
        ValueError,
    ) as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 1
    parser.error("no command provided")
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
