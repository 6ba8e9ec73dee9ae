"""
Structured config documents: dotted-path nesting and file I/O.

A variable named `server.http.port` lives at document["server"]["http"]["port"].
Files ending in .yaml or .yml are YAML, everything else is JSON.
"""

import json
from pathlib import Path
from typing import Any, Dict, Tuple, Union

import yaml

PATH_SEPARATOR = "."
YAML_SUFFIXES = {".yaml", ".yml"}

_MISSING = object()


class DocumentError(Exception):
    """Raised when a document cannot be read, parsed or written."""


def split_path(name: str) -> list[str]:
    return name.split(PATH_SEPARATOR)


def set_nested_value(root: Dict[str, Any], name: str, value: Any):
    """Place `value` at the dotted `name`, replacing non-mapping intermediates."""
    *parents, key = split_path(name)
    current = root
    for part in parents:
        if not isinstance(current.get(part), dict):
            current[part] = {}
        current = current[part]
    current[key] = value


def get_nested_value(root: Dict[str, Any], name: str) -> Tuple[bool, Any]:
    """
    Look up the dotted `name`.

    Returns:
        (found, value); found is False when any segment is missing or an
        intermediate segment is not a mapping
    """
    current: Any = root
    for part in split_path(name):
        if not isinstance(current, dict):
            return False, None
        current = current.get(part, _MISSING)
        if current is _MISSING:
            return False, None
    return True, current


def is_yaml_path(path: Union[str, Path]) -> bool:
    return Path(path).suffix.lower() in YAML_SUFFIXES


def read_document(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Read and parse a config document.

    Raises:
        DocumentError: If the file cannot be read or parsed, or its root is not a mapping
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentError(f"Failed to read config file {path}: {e}") from e

    try:
        if is_yaml_path(path):
            root = yaml.safe_load(text)
            if root is None:
                root = {}
        else:
            root = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise DocumentError(f"Failed to parse config document: {e}") from e

    if not isinstance(root, dict):
        raise DocumentError("Config document root must be an object")
    return root


def write_document(path: Union[str, Path], root: Dict[str, Any], indent: int = 4):
    """
    Serialize `root` and write it to `path`.

    Raises:
        DocumentError: If the document cannot be encoded or written
    """
    path = Path(path)
    try:
        if is_yaml_path(path):
            text = yaml.safe_dump(root, default_flow_style=False, indent=indent, sort_keys=False)
        else:
            text = json.dumps(root, indent=indent) + "\n"
    except (TypeError, ValueError, yaml.YAMLError) as e:
        raise DocumentError(f"Failed to encode config document: {e}") from e

    try:
        with open(path, 'w', encoding='utf-8') as f:
            f.write(text)
    except OSError as e:
        raise DocumentError(f"Failed to write config file {path}: {e}") from e
