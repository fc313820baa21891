"""Static table describing what each transport kind generates."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from .core.errors import UnknownTransportError

__all__ = [
    "PROFILES",
    "TransportKind",
    "TransportProfile",
    "profile_for",
]


class TransportKind(str, Enum):
    """Transport layers a resource can be generated for."""

    REST = "rest"
    MICROSERVICE = "microservice"
    WS = "ws"
    GRAPHQL_CODE_FIRST = "graphql-code-first"
    GRAPHQL_SCHEMA_FIRST = "graphql-schema-first"


@dataclass(frozen=True, slots=True)
class TransportProfile:
    """Planning facts for one transport kind.

    ``templates`` maps a file role (``"primary"``, ``"service"``,
    ``"input.create"`` and so on) to the template id rendered for it. A role
    may have a ``"<role>.bare"`` variant used when CRUD scaffolding is off.
    """

    kind: TransportKind
    primary: str
    input_suffix: str
    emits_schema: bool
    has_remove_input: bool
    templates: Mapping[str, str]

    def template_for(self, role: str, *, crud: bool = True) -> str:
        if not crud:
            bare = self.templates.get(f"{role}.bare")
            if bare is not None:
                return bare
        return self.templates[role]


_COMMON_TEMPLATES: dict[str, str] = {
    "module": "common/controller.module.ts",
    "primary.spec": "common/controller.spec.ts",
    "service": "common/service.ts",
    "service.bare": "common/service.bare.ts",
    "service.spec": "common/service.spec.ts",
    "args": "common/args.ts",
    "input.create": "common/create.dto.ts",
    "input.update": "common/update.dto.ts",
    "output.create": "common/create.output.ts",
    "output.update": "common/update.output.ts",
    "output.remove": "common/remove.output.ts",
    "type": "common/type.ts",
}

_GRAPHQL_TEMPLATES: dict[str, str] = {
    **_COMMON_TEMPLATES,
    "module": "graphql/module.ts",
    "primary.bare": "graphql/resolver.bare.ts",
    "primary.spec": "graphql/resolver.spec.ts",
}


def _templates(base: Mapping[str, str], overrides: Mapping[str, str]) -> Mapping[str, str]:
    merged = dict(base)
    merged.update(overrides)
    return MappingProxyType(merged)


PROFILES: Mapping[TransportKind, TransportProfile] = MappingProxyType(
    {
        TransportKind.REST: TransportProfile(
            kind=TransportKind.REST,
            primary="controller",
            input_suffix=".dto",
            emits_schema=False,
            has_remove_input=False,
            templates=_templates(
                _COMMON_TEMPLATES,
                {
                    "primary": "rest/controller.ts",
                    "primary.bare": "rest/controller.bare.ts",
                    "input.update": "rest/update.dto.ts",
                },
            ),
        ),
        TransportKind.MICROSERVICE: TransportProfile(
            kind=TransportKind.MICROSERVICE,
            primary="controller",
            input_suffix=".dto",
            emits_schema=False,
            has_remove_input=False,
            templates=_templates(
                _COMMON_TEMPLATES,
                {
                    "primary": "microservice/controller.ts",
                    "primary.bare": "microservice/controller.bare.ts",
                },
            ),
        ),
        TransportKind.WS: TransportProfile(
            kind=TransportKind.WS,
            primary="gateway",
            input_suffix=".dto",
            emits_schema=False,
            has_remove_input=False,
            templates=_templates(
                _COMMON_TEMPLATES,
                {
                    "module": "ws/module.ts",
                    "primary": "ws/gateway.ts",
                    "primary.bare": "ws/gateway.bare.ts",
                    "primary.spec": "ws/gateway.spec.ts",
                },
            ),
        ),
        TransportKind.GRAPHQL_CODE_FIRST: TransportProfile(
            kind=TransportKind.GRAPHQL_CODE_FIRST,
            primary="resolver",
            input_suffix=".input",
            emits_schema=False,
            has_remove_input=True,
            templates=_templates(
                _GRAPHQL_TEMPLATES,
                {
                    "primary": "graphql-code-first/resolver.ts",
                    "service": "graphql-code-first/service.ts",
                    "args": "graphql-code-first/args.ts",
                    "input.create": "graphql-code-first/create.input.ts",
                    "input.update": "graphql-code-first/update.input.ts",
                    "input.remove": "graphql-code-first/remove.input.ts",
                    "output.create": "graphql-code-first/create.output.ts",
                    "output.update": "graphql-code-first/update.output.ts",
                    "output.remove": "graphql-code-first/remove.output.ts",
                    "type": "graphql-code-first/type.ts",
                },
            ),
        ),
        TransportKind.GRAPHQL_SCHEMA_FIRST: TransportProfile(
            kind=TransportKind.GRAPHQL_SCHEMA_FIRST,
            primary="resolver",
            input_suffix=".input",
            emits_schema=True,
            has_remove_input=True,
            templates=_templates(
                _GRAPHQL_TEMPLATES,
                {
                    "primary": "graphql-schema-first/resolver.ts",
                    "schema": "graphql-schema-first/schema.graphql",
                    "service": "graphql-schema-first/service.ts",
                    "input.create": "graphql-schema-first/create.input.ts",
                    "input.update": "graphql-schema-first/update.input.ts",
                    "input.remove": "graphql-schema-first/remove.input.ts",
                },
            ),
        ),
    }
)


def profile_for(kind: str | TransportKind) -> TransportProfile:
    """Return the :class:`TransportProfile` registered for ``kind``."""

    try:
        key = TransportKind(kind)
    except ValueError:
        raise UnknownTransportError(kind, tuple(member.value for member in TransportKind)) from None
    return PROFILES[key]
