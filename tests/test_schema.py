"""Tests for schema loading and result conversion."""

import sys

import pytest

from typechat_cli.schema import load_schema_module, load_schema_type, to_jsonable

DATACLASS_SCHEMA = '''
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Tag:
    name: str


@dataclass
class ResponseShape:
    title: str
    tags: list[Tag] = field(default_factory=list)

NOT_A_TYPE = 42
'''


class TestLoadSchemaType:
    """Tests for load_schema_type."""

    def test_loads_default_type(self, schema_file):
        target = load_schema_type(str(schema_file), "ResponseShape")
        assert target.__name__ == "ResponseShape"
        assert set(target.__annotations__) == {"sentiment", "hasTheWordGoose"}

    def test_missing_file_is_read_failure(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_schema_type(str(tmp_path / "missing.py"), "ResponseShape")

    def test_unknown_type(self, schema_file):
        with pytest.raises(ValueError, match="Type 'Nope' not found"):
            load_schema_type(str(schema_file), "Nope")

    def test_name_that_is_not_a_type(self, tmp_path):
        path = tmp_path / "schema.py"
        path.write_text(DATACLASS_SCHEMA)
        with pytest.raises(ValueError, match="is not a type"):
            load_schema_type(str(path), "NOT_A_TYPE")

    def test_any_extension(self, tmp_path):
        path = tmp_path / "shapes.schema"
        path.write_text(DATACLASS_SCHEMA)
        target = load_schema_type(str(path), "ResponseShape")
        assert target.__name__ == "ResponseShape"

    def test_loaded_module_is_registered(self, schema_file):
        module = load_schema_module(str(schema_file))
        assert sys.modules[module.__name__] is module
        assert module.__file__ == str(schema_file.resolve())

    def test_schema_errors_propagate(self, tmp_path):
        path = tmp_path / "broken.py"
        path.write_text("class ResponseShape(:\n")
        with pytest.raises(SyntaxError):
            load_schema_type(str(path), "ResponseShape")


class TestToJsonable:
    """Tests for to_jsonable."""

    def test_dataclass_value(self, tmp_path):
        path = tmp_path / "schema.py"
        path.write_text(DATACLASS_SCHEMA)
        module = load_schema_module(str(path))

        value = module.ResponseShape(title="Birds", tags=[module.Tag(name="goose")])

        assert to_jsonable(module.ResponseShape, value) == {
            "title": "Birds",
            "tags": [{"name": "goose"}],
        }

    def test_typed_dict_value(self, schema_file):
        target = load_schema_type(str(schema_file), "ResponseShape")
        value = {"sentiment": "neutral", "hasTheWordGoose": False}
        assert to_jsonable(target, value) == value
