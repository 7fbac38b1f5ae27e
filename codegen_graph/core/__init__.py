"""Core modules for subgraph query code generation."""

from .declarations import emit_declarations
from .document import (
    CoercionKind,
    DeclarationKind,
    Document,
    EntityDocument,
    EntityParser,
    FieldCoercion,
    FieldEntry,
    Heading,
    MultiQueryFunction,
    SingleQueryFunction,
    TypeDeclaration,
)
from .errors import CodegenError, SchemaShapeError, UnmappedTypeError, UnsupportedMethodError
from .generator import CodeGenerator
from .ir import IRField, IRSchema, IRType, IRTypeRef, TypeKind, TypeRefKind
from .methods import GenerationMethod, build_document, generate
from .parser import SchemaParser, load_schema
from .queries import MAX_PAGE, emit_heading, emit_multi_query, emit_parser, emit_single_query
from .scalars import ScalarKind, classify_scalar
from .type_mapper import MappedType, MappingContext, TypeMapper

__all__ = [
    # IR types
    "IRField",
    "IRSchema",
    "IRType",
    "IRTypeRef",
    "TypeKind",
    "TypeRefKind",
    # Parser
    "SchemaParser",
    "load_schema",
    # Type mapping
    "MappedType",
    "MappingContext",
    "ScalarKind",
    "TypeMapper",
    "classify_scalar",
    # Document
    "CoercionKind",
    "DeclarationKind",
    "Document",
    "EntityDocument",
    "EntityParser",
    "FieldCoercion",
    "FieldEntry",
    "Heading",
    "MultiQueryFunction",
    "SingleQueryFunction",
    "TypeDeclaration",
    # Emitters
    "MAX_PAGE",
    "emit_declarations",
    "emit_heading",
    "emit_multi_query",
    "emit_parser",
    "emit_single_query",
    # Generation
    "CodeGenerator",
    "GenerationMethod",
    "build_document",
    "generate",
    # Errors
    "CodegenError",
    "SchemaShapeError",
    "UnmappedTypeError",
    "UnsupportedMethodError",
]
