"""Type declarations generated for each entity."""

from .document import DeclarationKind, FieldEntry, TypeDeclaration
from .ir import IRType
from .type_mapper import MappingContext, TypeMapper

SELECTED = "Literal[True]"


def emit_declarations(
    entity: IRType, filter_entity: IRType, mapper: TypeMapper
) -> tuple[TypeDeclaration, ...]:
    """Build the Filter, Result, Fields and Args declarations of an entity.

    Entries follow the declared order of ``filter_entity.input_fields`` and
    ``entity.fields`` so that generated output is stable and diffable.
    """
    name = entity.name

    filter_entries = tuple(
        FieldEntry(f.name, mapper.map(f.type, MappingContext.FILTER).type_name)
        for f in filter_entity.input_fields
    )
    result_entries = tuple(
        FieldEntry(f.name, mapper.map(f.type, MappingContext.RESULT).type_name)
        for f in entity.fields
    )
    field_entries = []
    for f in entity.fields:
        mapped = mapper.map(f.type, MappingContext.FIELDS)
        field_entries.append(
            FieldEntry(f.name, mapped.base_type if mapped.nested_structure else SELECTED)
        )
    field_entries = tuple(field_entries)

    return (
        TypeDeclaration(f"{name}Filter", DeclarationKind.FILTER, filter_entries),
        TypeDeclaration(
            f"{name}Result", DeclarationKind.RESULT, result_entries, description=entity.description
        ),
        TypeDeclaration(f"{name}Fields", DeclarationKind.FIELDS, field_entries, total=True),
        # Any subset of the selectors in <name>Fields
        TypeDeclaration(f"{name}Args", DeclarationKind.ARGS, field_entries),
    )
