from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from resourcegen.config import GenerationOptions, detect_swagger


def test_defaults():
    options = GenerationOptions(name="users")
    assert options.type == "rest"
    assert options.crud is True
    assert options.spec is True
    assert options.spec_file_suffix == "spec"
    assert options.flat is False
    assert options.is_swagger_installed is False
    assert options.language == "ts"
    assert options.path == ""


def test_accepts_schematic_option_names():
    options = GenerationOptions.model_validate(
        {"name": "users", "specFileSuffix": "test", "isSwaggerInstalled": True}
    )
    assert options.spec_file_suffix == "test"
    assert options.partial_type_package == "@nestjs/swagger"


def test_rejects_unknown_fields():
    with pytest.raises(ValidationError):
        GenerationOptions(name="users", crudd=False)


def test_rejects_empty_spec_file_suffix():
    with pytest.raises(ValidationError):
        GenerationOptions(name="users", spec_file_suffix="")


def test_options_are_frozen():
    options = GenerationOptions(name="users")
    with pytest.raises(ValidationError):
        options.crud = False


def test_name_is_required():
    with pytest.raises(ValidationError):
        GenerationOptions()


@pytest.mark.parametrize("section", ["dependencies", "devDependencies"])
def test_detect_swagger(tmp_path: Path, section: str):
    (tmp_path / "package.json").write_text(
        json.dumps({section: {"@nestjs/swagger": "^7.0.0"}}), encoding="utf-8"
    )
    assert detect_swagger(tmp_path) is True


def test_detect_swagger_without_dependency(tmp_path: Path):
    (tmp_path / "package.json").write_text(
        json.dumps({"dependencies": {"@nestjs/common": "^10.0.0"}}), encoding="utf-8"
    )
    assert detect_swagger(tmp_path) is False


def test_detect_swagger_without_package_json(tmp_path: Path):
    assert detect_swagger(tmp_path) is False


def test_detect_swagger_with_unreadable_package_json(tmp_path: Path):
    (tmp_path / "package.json").write_text("{not json", encoding="utf-8")
    assert detect_swagger(tmp_path) is False
