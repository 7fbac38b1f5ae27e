"""Query functions and field coercion generated for each entity.

The generated code itself lives in the templates; this module decides
names, types and the coercion applied to every field.
"""

from .document import (
    CoercionKind,
    EntityParser,
    FieldCoercion,
    Heading,
    MultiQueryFunction,
    SingleQueryFunction,
)
from .generator import lower_first, snake_case
from .ir import IRType
from .scalars import ScalarKind
from .type_mapper import MappingContext, TypeMapper

# Largest page the hosted indexer serves for a single list query
MAX_PAGE = 1000

# Ordering field used when the caller paginates without choosing one
DEFAULT_ORDER_BY = "id"

_COERCIONS = {
    ScalarKind.BIG_INT: CoercionKind.BIG_INT,
    ScalarKind.BIG_DECIMAL: CoercionKind.BIG_DECIMAL,
}


def emit_heading(max_page: int = MAX_PAGE) -> Heading:
    """Return the shared boilerplate of a generated module."""
    return Heading(max_page=max_page)


def parser_name(entity: IRType) -> str:
    return f"_format_{snake_case(entity.name)}"


def emit_parser(entity: IRType, mapper: TypeMapper) -> EntityParser:
    """Describe the coercion of every result field of an entity.

    High-precision scalars are coerced through ``wei`` however deeply they
    are wrapped in lists or non-null markers. Nested entities go through
    their own parser; everything else passes through unchanged.
    """
    coercions = []
    for f in entity.fields:
        mapped = mapper.map(f.type, MappingContext.RESULT)
        nested = mapper.schema.get_type(f.type.named_type)
        if nested is not None and mapper.schema.is_entity(nested):
            coercions.append(FieldCoercion(f.name, CoercionKind.NESTED, parser=parser_name(nested)))
            continue
        kind = _COERCIONS.get(mapped.scalar_kind, CoercionKind.PASSTHROUGH)
        coercions.append(FieldCoercion(f.name, kind))
    return EntityParser(function_name=parser_name(entity), coercions=tuple(coercions))


def emit_single_query(entity: IRType) -> SingleQueryFunction:
    """Describe the by-id fetch of an entity."""
    return SingleQueryFunction(
        function_name=f"get_{snake_case(entity.name)}",
        query_name=lower_first(entity.name),
        args_type=f"{entity.name}Args",
        result_type=f"{entity.name}Result",
        parser=parser_name(entity),
    )


def emit_multi_query(entity: IRType) -> MultiQueryFunction:
    """Describe the filtered, paginated fetch of an entity."""
    return MultiQueryFunction(
        function_name=f"get_{snake_case(entity.name)}s",
        query_name=f"{lower_first(entity.name)}s",
        filter_type=f"{entity.name}Filter",
        args_type=f"{entity.name}Args",
        result_type=f"{entity.name}Result",
        parser=parser_name(entity),
        default_order_by=DEFAULT_ORDER_BY,
    )
