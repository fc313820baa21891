from __future__ import annotations

import pytest

from resourcegen.core.errors import UnknownTransportError
from resourcegen.transports import PROFILES, TransportKind, profile_for


@pytest.mark.parametrize(
    "kind, primary, input_suffix, emits_schema, has_remove_input",
    [
        ("rest", "controller", ".dto", False, False),
        ("microservice", "controller", ".dto", False, False),
        ("ws", "gateway", ".dto", False, False),
        ("graphql-code-first", "resolver", ".input", False, True),
        ("graphql-schema-first", "resolver", ".input", True, True),
    ],
)
def test_profile_table(kind, primary, input_suffix, emits_schema, has_remove_input):
    profile = profile_for(kind)
    assert profile.kind == TransportKind(kind)
    assert profile.primary == primary
    assert profile.input_suffix == input_suffix
    assert profile.emits_schema is emits_schema
    assert profile.has_remove_input is has_remove_input


def test_profile_for_accepts_enum_members():
    assert profile_for(TransportKind.WS) is PROFILES[TransportKind.WS]


@pytest.mark.parametrize("kind", ["graphql", "REST", "", "http", None])
def test_profile_for_rejects_unknown_kinds(kind):
    with pytest.raises(UnknownTransportError) as excinfo:
        profile_for(kind)
    assert "graphql-schema-first" in str(excinfo.value)


def test_template_for_prefers_bare_variant_without_crud():
    profile = profile_for("rest")
    assert profile.template_for("primary") == "rest/controller.ts"
    assert profile.template_for("primary", crud=False) == "rest/controller.bare.ts"
    assert profile.template_for("module", crud=False) == "common/controller.module.ts"


def test_every_profile_covers_the_planned_roles():
    required = {"primary", "primary.spec", "module", "service", "service.spec", "args"}
    crud_roles = {"input.create", "input.update", "output.create", "output.update", "output.remove", "type"}
    for profile in PROFILES.values():
        assert required | crud_roles <= set(profile.templates)
        assert ("schema" in profile.templates) is profile.emits_schema
        assert ("input.remove" in profile.templates) is profile.has_remove_input
