"""Coercion of nested entities inside query results."""

from typing import Any, Callable, Dict


def format_nested(value: Any, formatter: Callable[[Dict[str, Any]], Dict[str, Any]]) -> Any:
    """Apply an entity formatter to a nested selection.

    None passes through and lists are formatted element by element, to
    any depth.
    """
    if value is None:
        return None
    if isinstance(value, list):
        return [format_nested(item, formatter) for item in value]
    return formatter(value)
