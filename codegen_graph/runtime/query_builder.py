"""Query builder used by generated query functions.

Constructs GraphQL query strings from a query name, the query options
(``id``, ``first``, ``where``, ``orderBy``, ...) and a field selection.
"""

import json
from decimal import Decimal
from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel

# Options whose values are GraphQL enum literals rather than strings
ENUM_OPTIONS = {"orderBy", "orderDirection"}

INDENT = "  "


def generate_gql(query_name: str, options: Mapping[str, Any], args: Mapping[str, Any]) -> str:
    """Build a query string.

    Args:
        query_name: Root query field, e.g. ``token`` or ``tokens``
        options: Arguments of the root field; None values are omitted
        args: Field selection; ``True`` selects a field, a mapping selects
            nested fields, ``False`` skips the field

    Returns:
        Complete GraphQL query string

    Raises:
        ValueError: If the selection selects no field
    """
    arguments = _build_arguments(options)
    body = _build_selection(args, depth=2)
    return f"{{\n{INDENT}{query_name}{arguments} {{\n{body}\n{INDENT}}}\n}}"


def _build_arguments(options: Mapping[str, Any]) -> str:
    """Build the argument list: (first: 10, where: {name: "x"}, orderBy: id)"""
    arg_strs = []
    for name, value in options.items():
        if value is None:
            continue
        if name in ENUM_OPTIONS:
            arg_strs.append(f"{name}: {value.value if isinstance(value, Enum) else value}")
        else:
            arg_strs.append(f"{name}: {render_value(value)}")
    if not arg_strs:
        return ""
    return f"({', '.join(arg_strs)})"


def render_value(value: Any) -> str:
    """Render a Python value as a GraphQL input literal."""
    if value is None:
        return "null"
    if isinstance(value, BaseModel):
        value = value.model_dump(by_alias=True, exclude_none=True)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Decimal):
        # Indexer BigInt/BigDecimal inputs are strings in plain notation
        return json.dumps(format(value, "f"))
    if isinstance(value, Enum):
        return render_value(value.value)
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, str):
        return json.dumps(value)
    if isinstance(value, Mapping):
        items = [f"{key}: {render_value(v)}" for key, v in value.items() if v is not None]
        return f"{{{', '.join(items)}}}"
    if isinstance(value, (list, tuple, set, frozenset)):
        return f"[{', '.join(render_value(v) for v in value)}]"
    raise TypeError(f"Cannot render {type(value).__name__} as a GraphQL value")


def _build_selection(args: Mapping[str, Any], depth: int) -> str:
    """Build the field selection for a selector mapping."""
    indent = INDENT * depth
    lines = []

    for name, selected in args.items():
        if isinstance(selected, Mapping):
            lines.append(f"{indent}{name} {{")
            lines.append(_build_selection(selected, depth + 1))
            lines.append(f"{indent}}}")
        elif selected:
            lines.append(f"{indent}{name}")

    if not lines:
        raise ValueError("Field selection must select at least one field")
    return "\n".join(lines)
