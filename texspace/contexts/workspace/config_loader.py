"""
Config Loader

Reads TOML config files and turns them into typed schema objects.

Loading happens in four steps:
1. Read the whole file (absent file -> PathNotFoundError)
2. Parse TOML (syntax error -> InvalidConfigError)
3. Rename aliased keys and drop keys the schema does not declare
4. Check value types, then merge onto the schema defaults with OmegaConf
   (wrong shape -> InvalidConfigError)

Examples:
    >>> meta = load_config(doc_dir / "metadata.toml", DocumentMeta)
    >>> meta.sections
    ['main.tex']
"""

import dataclasses
import tomllib
import typing
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar

from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from texspace.contexts.workspace.exceptions import (
    InvalidConfigError,
    PathNotFoundError,
    WorkspaceIOError,
)
from texspace.contexts.workspace.logger import _log_debug, _log_warning
from texspace.contexts.workspace.schemas import FIELD_ALIASES

T = TypeVar("T")


def read_config_bytes(path: Path) -> bytes:
    """
    Read a config file fully into memory.

    Raises:
        PathNotFoundError: If the file does not exist
        WorkspaceIOError: For any other filesystem failure
    """
    try:
        return path.read_bytes()
    except FileNotFoundError as e:
        raise PathNotFoundError(path) from e
    except OSError as e:
        raise WorkspaceIOError(path, e) from e


def apply_aliases(data: Dict[str, Any], aliases: Dict[str, str], path: Path) -> Dict[str, Any]:
    """
    Rename alternate key spellings to their canonical field names.

    Args:
        data: Parsed top-level table
        aliases: Mapping of alternate name -> canonical name
        path: Config path, for diagnostics

    Returns:
        New dict with canonical keys, preserving key order

    Raises:
        InvalidConfigError: If a key appears under both spellings
    """
    renamed: Dict[str, Any] = {}
    for key, value in data.items():
        canonical = aliases.get(key, key)
        if canonical in renamed:
            raise InvalidConfigError(f"duplicate field `{canonical}` (also given as `{key}`)", path)
        renamed[canonical] = value
    return renamed


def _enum_type(annotation) -> Optional[Type[Enum]]:
    """Return the Enum class behind a (possibly Optional) annotation, or None."""
    candidates = typing.get_args(annotation) or (annotation,)
    for candidate in candidates:
        if isinstance(candidate, type) and issubclass(candidate, Enum):
            return candidate
    return None


def _normalize_enum_names(schema: Type[T], data: Dict[str, Any]) -> Dict[str, Any]:
    """Match string values for Enum fields against member names case-insensitively."""
    hints = typing.get_type_hints(schema)
    for name, value in data.items():
        enum_type = _enum_type(hints.get(name))
        if enum_type is None or not isinstance(value, str):
            continue
        by_lower = {member.lower(): member for member in enum_type.__members__}
        data[name] = by_lower.get(value.lower(), value)
    return data


def _check_field_shapes(schema: Type[T], data: Dict[str, Any], path: Path) -> None:
    """
    Reject values whose TOML type does not match the schema annotation.

    OmegaConf converts numbers and booleans to strings for str fields, so
    str and List[str] fields are checked here before merging.
    """
    hints = typing.get_type_hints(schema)
    for name, value in data.items():
        annotation = hints.get(name)
        if annotation is str and not isinstance(value, str):
            raise InvalidConfigError(
                f"field `{name}` must be a string, got {type(value).__name__}", path
            )
        if typing.get_origin(annotation) is list:
            (item_type,) = typing.get_args(annotation)
            if not isinstance(value, list):
                raise InvalidConfigError(
                    f"field `{name}` must be a list, got {type(value).__name__}", path
                )
            for item in value:
                if not isinstance(item, item_type):
                    raise InvalidConfigError(
                        f"field `{name}` must only hold {item_type.__name__} values, "
                        f"got {type(item).__name__} {item!r}",
                        path,
                    )


def parse_config(content: bytes, schema: Type[T], path: Path) -> T:
    """
    Parse TOML bytes into an instance of a dataclass schema.

    Keys not declared by the schema are ignored with a warning.

    Args:
        content: Raw file content
        schema: Dataclass describing the expected fields and defaults
        path: Source path, for diagnostics

    Returns:
        Instance of schema with defaults applied for absent fields

    Raises:
        InvalidConfigError: If the content is not valid TOML or has the wrong shape
    """
    try:
        data = tomllib.loads(content.decode("utf-8"))
    except UnicodeDecodeError as e:
        raise InvalidConfigError(f"file is not valid UTF-8: {e}", path) from e
    except tomllib.TOMLDecodeError as e:
        raise InvalidConfigError(str(e), path) from e

    data = apply_aliases(data, FIELD_ALIASES.get(schema, {}), path)

    known = {f.name for f in dataclasses.fields(schema)}
    for key in [k for k in data if k not in known]:
        _log_warning(f"Ignoring unknown field `{key}` in {path}")
        del data[key]

    data = _normalize_enum_names(schema, data)
    _check_field_shapes(schema, data, path)

    try:
        merged = OmegaConf.merge(OmegaConf.structured(schema), data)
        return OmegaConf.to_object(merged)
    except OmegaConfBaseException as e:
        raise InvalidConfigError(str(e), path) from e


def load_config(path: Path, schema: Type[T]) -> T:
    """
    Load a TOML config file into an instance of a dataclass schema.

    Args:
        path: Path to the config file
        schema: Dataclass describing the expected fields and defaults

    Returns:
        Instance of schema

    Raises:
        PathNotFoundError: If the file is absent
        InvalidConfigError: If the file is present but malformed
        WorkspaceIOError: For other filesystem failures
    """
    path = Path(path)
    _log_debug(f"Loading {schema.__name__} from {path}")
    return parse_config(read_config_bytes(path), schema, path)
