"""Schema loading: resolve the target type from a Python schema file."""

import hashlib
import importlib.util
import sys
from importlib.machinery import SourceFileLoader
from pathlib import Path
from types import ModuleType
from typing import Any

from pydantic import TypeAdapter


def _module_name(path: Path) -> str:
    digest = hashlib.sha1(str(path).encode("utf-8")).hexdigest()[:10]
    return f"_typechat_schema_{path.stem}_{digest}"


def load_schema_module(path: str) -> ModuleType:
    """
    Execute a schema file as a module.

    Any file extension is accepted. The module is registered in sys.modules
    before execution so string annotations and dataclasses resolve against it.

    Raises:
        FileNotFoundError: If the schema file does not exist
    """
    schema_path = Path(path).resolve()
    name = _module_name(schema_path)
    loader = SourceFileLoader(name, str(schema_path))
    spec = importlib.util.spec_from_file_location(name, schema_path, loader=loader)
    module = importlib.util.module_from_spec(spec)
    sys.modules[name] = module
    try:
        spec.loader.exec_module(module)
    except BaseException:
        del sys.modules[name]
        raise
    return module


def load_schema_type(path: str, type_name: str) -> type:
    """
    Load the named type (TypedDict or dataclass) from a schema file.

    Raises:
        FileNotFoundError: If the schema file does not exist
        ValueError: If the schema does not define type_name as a class
    """
    module = load_schema_module(path)
    target = getattr(module, type_name, None)
    if target is None:
        raise ValueError(f"Type '{type_name}' not found in schema {path}")
    if not isinstance(target, type):
        raise ValueError(f"'{type_name}' in schema {path} is not a type")
    return target


def to_jsonable(target_type: type, value: Any) -> Any:
    """Convert a validated value (dict, dataclass, ...) into plain JSON data."""
    return TypeAdapter(target_type).dump_python(value, mode="json")
