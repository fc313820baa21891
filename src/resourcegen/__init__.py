"""Plan and generate NestJS resources.

The package derives identifier forms from a resource name, computes the
ordered manifest of files a resource consists of for each transport layer,
renders those files from small placeholder templates and writes them through a
pluggable output tree. Everything is usable programmatically and via the
``resourcegen`` command line interface.
"""

from __future__ import annotations

from .config import GenerationOptions, detect_swagger
from .core.errors import InvalidNameError, ResourceGenError, UnknownTransportError
from .naming import ResourceName, camelize, classify, dasherize, singularize, transform
from .plan import FileManifest, FileManifestEntry, build_plan, plan_resource
from .scaffold import ResourceScaffolder
from .template import TemplateRenderer, TemplateRenderingError
from .transports import TransportKind, TransportProfile, profile_for

__all__ = [
    "FileManifest",
    "FileManifestEntry",
    "GenerationOptions",
    "InvalidNameError",
    "ResourceGenError",
    "ResourceName",
    "ResourceScaffolder",
    "TemplateRenderer",
    "TemplateRenderingError",
    "TransportKind",
    "TransportProfile",
    "UnknownTransportError",
    "build_plan",
    "camelize",
    "classify",
    "dasherize",
    "detect_swagger",
    "plan_resource",
    "profile_for",
    "singularize",
    "transform",
]

__version__ = "0.1.0"
