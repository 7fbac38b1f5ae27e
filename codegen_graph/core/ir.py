"""Intermediate Representation (IR) for introspected GraphQL schemas.

This module defines immutable dataclasses mirroring the shape of a
standard introspection result, reduced to what code generation needs.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

from .errors import SchemaShapeError

# Input types holding the filter keys of an entity are named <Entity>_filter
FILTER_SUFFIX = "_filter"


class TypeRefKind(Enum):
    """Wrapping kinds of a type reference."""
    NON_NULL = "NON_NULL"
    LIST = "LIST"
    NAMED = "NAMED"


class TypeKind(Enum):
    """Kinds of named types in a schema."""
    SCALAR = "SCALAR"
    OBJECT = "OBJECT"
    INTERFACE = "INTERFACE"
    UNION = "UNION"
    ENUM = "ENUM"
    INPUT_OBJECT = "INPUT_OBJECT"


@dataclass(frozen=True)
class IRTypeRef:
    """A possibly wrapped reference to a named type.

    ``[Token!]!`` is NON_NULL(LIST(NON_NULL(NAMED Token))).
    """
    kind: TypeRefKind
    name: str | None = None
    of_type: "IRTypeRef | None" = None

    def __post_init__(self):
        if self.kind is TypeRefKind.NAMED:
            if not self.name:
                raise SchemaShapeError("named type reference without a name")
            return
        if self.of_type is None:
            raise SchemaShapeError(f"{self.kind.value} type reference without ofType")
        if self.kind is TypeRefKind.NON_NULL and self.of_type.kind is TypeRefKind.NON_NULL:
            raise SchemaShapeError("NON_NULL type reference wraps another NON_NULL")

    @classmethod
    def named(cls, name: str) -> "IRTypeRef":
        return cls(TypeRefKind.NAMED, name=name)

    @classmethod
    def list_of(cls, inner: "IRTypeRef") -> "IRTypeRef":
        return cls(TypeRefKind.LIST, of_type=inner)

    @classmethod
    def non_null(cls, inner: "IRTypeRef") -> "IRTypeRef":
        return cls(TypeRefKind.NON_NULL, of_type=inner)

    @property
    def named_type(self) -> str:
        """Return the name of the innermost named type."""
        ref = self
        while ref.of_type is not None:
            ref = ref.of_type
        return ref.name

    @property
    def is_non_null(self) -> bool:
        return self.kind is TypeRefKind.NON_NULL

    @property
    def is_list(self) -> bool:
        """True if a LIST wrapper appears anywhere in the reference."""
        ref = self
        while ref is not None:
            if ref.kind is TypeRefKind.LIST:
                return True
            ref = ref.of_type
        return False

    def __str__(self) -> str:
        if self.kind is TypeRefKind.NON_NULL:
            return f"{self.of_type}!"
        if self.kind is TypeRefKind.LIST:
            return f"[{self.of_type}]"
        return self.name


@dataclass(frozen=True)
class IRField:
    """A field of an object type or an input field of an input type."""
    name: str
    type: IRTypeRef
    description: str | None = None


@dataclass(frozen=True)
class IRType:
    """A named type of the schema."""
    name: str
    kind: TypeKind
    fields: tuple[IRField, ...] = ()
    input_fields: tuple[IRField, ...] = ()
    enum_values: tuple[str, ...] = ()
    description: str | None = None


@dataclass(frozen=True)
class IRSchema:
    """Complete intermediate representation of an introspected schema.

    Types keep the order in which the introspection result lists them so
    that generated output is reproducible.
    """
    types: tuple[IRType, ...] = ()
    query_type: str | None = "Query"
    mutation_type: str | None = None
    subscription_type: str | None = None
    _by_name: dict[str, IRType] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "_by_name", {t.name: t for t in self.types})

    def get_type(self, name: str) -> IRType | None:
        """Look up a type by name."""
        return self._by_name.get(name)

    @property
    def root_types(self) -> set[str]:
        return {
            name
            for name in (self.query_type, self.mutation_type, self.subscription_type)
            if name
        }

    def is_entity(self, ir_type: IRType) -> bool:
        """Check if a type is a queryable entity.

        Root operation types and underscore-prefixed types (introspection
        and indexer metadata such as ``_Meta_``) are not entities.
        """
        return (
            ir_type.kind is TypeKind.OBJECT
            and ir_type.name not in self.root_types
            and not ir_type.name.startswith("_")
        )

    def entities(self) -> Iterator[IRType]:
        """Yield queryable entities in declaration order."""
        for ir_type in self.types:
            if self.is_entity(ir_type):
                yield ir_type

    def filter_for(self, entity: IRType) -> IRType:
        """Return the filter input type of an entity.

        Raises:
            SchemaShapeError: If the schema has no matching input type
        """
        name = entity.name + FILTER_SUFFIX
        filter_type = self._by_name.get(name)
        if filter_type is None or filter_type.kind is not TypeKind.INPUT_OBJECT:
            raise SchemaShapeError(
                f'entity "{entity.name}" has no filter input type "{name}"'
            )
        return filter_type

    def is_filter_input(self, name: str) -> bool:
        """Check if an input type name is the filter input of an entity."""
        if not name.endswith(FILTER_SUFFIX):
            return False
        entity = self._by_name.get(name[: -len(FILTER_SUFFIX)])
        return entity is not None and self.is_entity(entity)
