"""Maps GraphQL type references to Python type expressions."""

from dataclasses import dataclass, replace
from enum import Enum

from .errors import UnmappedTypeError
from .ir import FILTER_SUFFIX, IRSchema, IRTypeRef, TypeKind, TypeRefKind
from .scalars import ScalarKind, classify_scalar

# Fallback for object and input shapes that get no generated declaration
UNTYPED_OBJECT = "Dict[str, Any]"


class MappingContext(Enum):
    """Where a mapped type is used in the generated code."""
    FILTER = "Filter"
    RESULT = "Result"
    FIELDS = "Fields"


@dataclass(frozen=True)
class MappedType:
    """Result of mapping a type reference.

    Attributes:
        type_name: Python type expression, e.g. ``Optional[List[Wei]]``
        base_type: Expression for the unwrapped leaf, e.g. ``Wei``
        nested_structure: True when the leaf is a generated object type
            (a nested field selector in the FIELDS context)
        scalar_kind: Classification of a scalar leaf, None otherwise
    """
    type_name: str
    base_type: str
    nested_structure: bool = False
    scalar_kind: ScalarKind | None = None
    is_list: bool = False
    is_non_null: bool = False


def declaration_names(entity_name: str) -> dict[MappingContext, str]:
    """Names of the declarations generated for an entity, per context."""
    return {
        MappingContext.FILTER: f"{entity_name}Filter",
        MappingContext.RESULT: f"{entity_name}Result",
        MappingContext.FIELDS: f"{entity_name}Args",
    }


class TypeMapper:
    """Maps IR type references to Python type expressions for one schema."""

    def __init__(self, schema: IRSchema):
        self.schema = schema

    def map(self, type_ref: IRTypeRef, context: MappingContext) -> MappedType:
        """Map a type reference in the given context.

        Raises:
            UnmappedTypeError: If the leaf names a type the schema does not
                declare and that is not a known scalar
        """
        if type_ref.kind is TypeRefKind.NON_NULL:
            return replace(self._map_nullable(type_ref.of_type, context), is_non_null=True)

        mapped = self._map_nullable(type_ref, context)
        if context is MappingContext.RESULT:
            mapped = replace(mapped, type_name=f"Optional[{mapped.type_name}]")
        return mapped

    def _map_nullable(self, type_ref: IRTypeRef, context: MappingContext) -> MappedType:
        """Map a reference without applying its own nullability."""
        if type_ref.kind is TypeRefKind.LIST:
            inner = self.map(type_ref.of_type, context)
            if context is MappingContext.FIELDS:
                # A list of objects is selected like a single object
                return replace(inner, is_list=True, is_non_null=False)
            return replace(
                inner,
                type_name=f"List[{inner.type_name}]",
                is_list=True,
                is_non_null=False,
            )
        return self._map_named(type_ref.name, context)

    def _map_named(self, name: str, context: MappingContext) -> MappedType:
        ir_type = self.schema.get_type(name)

        if ir_type is None or ir_type.kind is TypeKind.SCALAR:
            kind = classify_scalar(name, declared=ir_type is not None)
            if kind is None:
                raise UnmappedTypeError(name, context.value)
            python_type = kind.filter_type if context is MappingContext.FILTER else kind.python_type
            return MappedType(type_name=python_type, base_type=python_type, scalar_kind=kind)

        if ir_type.kind is TypeKind.ENUM:
            return MappedType(type_name="str", base_type="str")

        if ir_type.kind is TypeKind.INPUT_OBJECT:
            if context is not MappingContext.FILTER:
                raise UnmappedTypeError(name, f"input type in {context.value} context")
            if self.schema.is_filter_input(name):
                filter_name = declaration_names(name[: -len(FILTER_SUFFIX)])[context]
                return MappedType(type_name=filter_name, base_type=filter_name, nested_structure=True)
            return MappedType(type_name=UNTYPED_OBJECT, base_type=UNTYPED_OBJECT, nested_structure=True)

        # Object, interface or union
        if context is MappingContext.FILTER:
            raise UnmappedTypeError(name, "output type in Filter context")
        if self.schema.is_entity(ir_type):
            declared = declaration_names(name)[context]
        else:
            declared = UNTYPED_OBJECT
        return MappedType(type_name=declared, base_type=declared, nested_structure=True)
