"""Top-level generation methods.

A method decides how the per-entity declarations and query functions are
assembled into one module. The set of methods is closed: the only name
lookup happens in GenerationMethod.from_name, for names coming from the
command line.

Example:
    source = generate(schema, "plain")
    source = generate(schema, "client", client_name="UniswapClient")
"""

from enum import Enum
from typing import Any, Callable, Mapping, Optional

from .declarations import emit_declarations
from .document import Document, EntityDocument
from .errors import UnsupportedMethodError
from .generator import CodeGenerator
from .ir import IRSchema
from .parser import load_schema
from .queries import emit_heading, emit_multi_query, emit_parser, emit_single_query
from .type_mapper import TypeMapper

DEFAULT_CLIENT_NAME = "SubgraphClient"


class GenerationMethod(Enum):
    """Registered generation methods."""
    PLAIN = "plain"      # Module-level query functions per entity
    CLIENT = "client"    # The same functions plus a client class bound to a URL

    @classmethod
    def names(cls) -> list[str]:
        return [method.value for method in cls]

    @classmethod
    def from_name(cls, name: str) -> "GenerationMethod":
        """Resolve a method name.

        Raises:
            UnsupportedMethodError: If no method has that name
        """
        try:
            return cls(name)
        except ValueError:
            raise UnsupportedMethodError(name, cls.names()) from None


def build_document(schema: IRSchema, client_name: Optional[str] = None) -> Document:
    """Run the emitters over every entity of the schema.

    Raises:
        SchemaShapeError: If an entity has no filter input type
        UnmappedTypeError: If a field references an unknown type
    """
    mapper = TypeMapper(schema)
    # Every entity needs its filter before any filter can reference another
    filtered = [(entity, schema.filter_for(entity)) for entity in schema.entities()]
    entities = []
    for entity, filter_entity in filtered:
        entities.append(
            EntityDocument(
                name=entity.name,
                declarations=emit_declarations(entity, filter_entity, mapper),
                parser=emit_parser(entity, mapper),
                single_query=emit_single_query(entity),
                multi_query=emit_multi_query(entity),
                description=entity.description,
            )
        )
    return Document(heading=emit_heading(), entities=tuple(entities), client_name=client_name)


def generate_plain(schema: IRSchema, generator: CodeGenerator, **_options: Any) -> str:
    return generator.render(build_document(schema), "module.py.j2")


def generate_client(
    schema: IRSchema,
    generator: CodeGenerator,
    client_name: str = DEFAULT_CLIENT_NAME,
    **_options: Any,
) -> str:
    return generator.render(build_document(schema, client_name=client_name), "client.py.j2")


HANDLERS: dict[GenerationMethod, Callable[..., str]] = {
    GenerationMethod.PLAIN: generate_plain,
    GenerationMethod.CLIENT: generate_client,
}


def generate(
    schema: IRSchema | Mapping[str, Any],
    method_name: str = GenerationMethod.PLAIN.value,
    *,
    client_name: str = DEFAULT_CLIENT_NAME,
    template_dir: Optional[str] = None,
) -> str:
    """Generate the complete query module for a schema.

    Args:
        schema: An IRSchema or a raw introspection payload
        method_name: Name of a registered GenerationMethod
        client_name: Class name used by the ``client`` method
        template_dir: Optional directory overriding built-in templates

    Returns:
        The generated Python source

    Raises:
        UnsupportedMethodError: If ``method_name`` is not registered
        CodegenError: If the schema cannot be translated
    """
    method = GenerationMethod.from_name(method_name)
    ir = load_schema(schema)
    generator = CodeGenerator(template_dir=template_dir)
    return HANDLERS[method](ir, generator, client_name=client_name)
