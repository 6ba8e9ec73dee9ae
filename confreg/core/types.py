"""
Supported value types, their tags and their canonical text rendering.
"""

from typing import Any, Dict

TYPE_TAGS: Dict[type, str] = {
    str: "string",
    int: "int",
    float: "float",
    bool: "bool",
}


def type_tag(value_type: type) -> str:
    """Return the tag of a supported value type, e.g. 'int'."""
    try:
        return TYPE_TAGS[value_type]
    except KeyError:
        raise TypeError(f"Unsupported config value type: {getattr(value_type, '__name__', value_type)!r}") from None


def is_instance_of(value: Any, value_type: type) -> bool:
    """Exact type check: bool is not an int here, and an int is not a float."""
    return type(value) is value_type


def format_value(value: Any) -> str:
    """Canonical text rendering: strings as-is, booleans as true/false, numbers via str()."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
