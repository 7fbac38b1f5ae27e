"""Scalar classification for GraphQL code generation.

Every scalar name resolves to a ScalarKind, and every ScalarKind has a
fixed Python type per usage context. The two precision-sensitive
indexer scalars (BigInt, BigDecimal) map to the Decimal based ``Wei``
wrapper and are never represented as native numbers.

Example:
    kind = classify_scalar("BigInt")          # ScalarKind.BIG_INT
    kind.python_type                          # "Wei"
    kind.filter_type                          # "WeiSource"
"""

from enum import Enum


class ScalarKind(Enum):
    """Classification of GraphQL scalars by their Python representation."""

    STRING = "string"
    INT = "int"
    FLOAT = "float"
    BOOLEAN = "boolean"
    BIG_INT = "big_int"
    BIG_DECIMAL = "big_decimal"
    OPAQUE = "opaque"

    @property
    def python_type(self) -> str:
        """Python type of values of this scalar in results."""
        return _PYTHON_TYPES[self]

    @property
    def is_high_precision(self) -> bool:
        """True for scalars routed through the Wei wrapper."""
        return self in (ScalarKind.BIG_INT, ScalarKind.BIG_DECIMAL)

    @property
    def filter_type(self) -> str:
        """Python type accepted for this scalar in filter inputs."""
        if self.is_high_precision:
            return "WeiSource"
        return self.python_type


_PYTHON_TYPES = {
    ScalarKind.STRING: "str",
    ScalarKind.INT: "int",
    ScalarKind.FLOAT: "float",
    ScalarKind.BOOLEAN: "bool",
    ScalarKind.BIG_INT: "Wei",
    ScalarKind.BIG_DECIMAL: "Wei",
    ScalarKind.OPAQUE: "Any",
}

# Built-in and indexer scalars with a known representation
KNOWN_SCALARS: dict[str, ScalarKind] = {
    "String": ScalarKind.STRING,
    "ID": ScalarKind.STRING,
    "Bytes": ScalarKind.STRING,
    "Int": ScalarKind.INT,
    "Int8": ScalarKind.INT,
    "Timestamp": ScalarKind.INT,
    "Float": ScalarKind.FLOAT,
    "Boolean": ScalarKind.BOOLEAN,
    "BigInt": ScalarKind.BIG_INT,
    "BigDecimal": ScalarKind.BIG_DECIMAL,
}


def classify_scalar(name: str, declared: bool = True) -> ScalarKind | None:
    """Classify a scalar by name.

    Args:
        name: The scalar type name
        declared: Whether the schema declares ``name`` as a SCALAR type

    Returns:
        The ScalarKind, or None if ``name`` is neither a known scalar
        nor declared by the schema
    """
    if name in KNOWN_SCALARS:
        return KNOWN_SCALARS[name]
    if declared:
        return ScalarKind.OPAQUE
    return None
