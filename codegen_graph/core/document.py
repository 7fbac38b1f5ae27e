"""Intermediate document produced by the emitters.

The emitters decide *what* is generated and describe it with these nodes;
CodeGenerator decides *how* it is printed.
"""

from dataclasses import dataclass
from enum import Enum


class DeclarationKind(Enum):
    """The four declarations generated per entity, in emission order."""
    FILTER = "Filter"
    RESULT = "Result"
    FIELDS = "Fields"
    ARGS = "Args"


class CoercionKind(Enum):
    """How a raw field value is converted before reaching the caller."""
    PASSTHROUGH = "passthrough"
    BIG_INT = "big_int"
    BIG_DECIMAL = "big_decimal"
    NESTED = "nested"


@dataclass(frozen=True)
class FieldEntry:
    """One key of a generated TypedDict."""
    name: str
    type_expr: str


@dataclass(frozen=True)
class TypeDeclaration:
    """A generated TypedDict declaration."""
    name: str
    kind: DeclarationKind
    entries: tuple[FieldEntry, ...]
    total: bool = False
    description: str | None = None

    @property
    def entry_names(self) -> list[str]:
        return [entry.name for entry in self.entries]


@dataclass(frozen=True)
class FieldCoercion:
    """Coercion applied to one result field when it is present."""
    name: str
    kind: CoercionKind = CoercionKind.PASSTHROUGH
    # Parser of the nested entity, for NESTED coercions
    parser: str | None = None

    @property
    def decimals(self) -> int | None:
        """Decimals passed to ``wei``; BigInt values are whole numbers."""
        return 0 if self.kind is CoercionKind.BIG_INT else None


@dataclass(frozen=True)
class EntityParser:
    """The ``_format_<entity>`` function shared by both query functions."""
    function_name: str
    coercions: tuple[FieldCoercion, ...]


@dataclass(frozen=True)
class SingleQueryFunction:
    """Fetches one entity by id."""
    function_name: str
    query_name: str
    args_type: str
    result_type: str
    parser: str


@dataclass(frozen=True)
class MultiQueryFunction:
    """Fetches a filtered list of entities, paginating past MAX_PAGE."""
    function_name: str
    query_name: str
    filter_type: str
    args_type: str
    result_type: str
    parser: str
    default_order_by: str = "id"


@dataclass(frozen=True)
class EntityDocument:
    """Everything generated for one entity."""
    name: str
    declarations: tuple[TypeDeclaration, ...]
    parser: EntityParser
    single_query: SingleQueryFunction
    multi_query: MultiQueryFunction
    description: str | None = None


@dataclass(frozen=True)
class Heading:
    """Shared boilerplate emitted once per output file."""
    max_page: int = 1000
    runtime_module: str = "codegen_graph.runtime"
    runtime_imports: tuple[str, ...] = ("Wei", "WeiSource", "fetch", "format_nested", "generate_gql", "wei")
    typing_imports: tuple[str, ...] = (
        "Any",
        "Dict",
        "Generic",
        "List",
        "Literal",
        "NotRequired",
        "Optional",
        "TypedDict",
        "TypeVar",
        "Union",
    )


@dataclass(frozen=True)
class Document:
    """A complete generated module."""
    heading: Heading
    entities: tuple[EntityDocument, ...] = ()
    client_name: str | None = None
