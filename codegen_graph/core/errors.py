"""Exceptions raised while generating code from a schema."""


class CodegenError(Exception):
    """Base class for all code generation failures."""


class UnsupportedMethodError(CodegenError):
    """Raised when a generation method name is not registered."""

    def __init__(self, method: str, available: list[str]):
        self.method = method
        self.available = available
        super().__init__(
            f'method "{method}" not supported. please try one of: {", ".join(available)}'
        )


class UnmappedTypeError(CodegenError):
    """Raised when a type reference names a type the mapper cannot classify."""

    def __init__(self, type_name: str, context: str | None = None):
        self.type_name = type_name
        message = f'cannot map unknown type "{type_name}"'
        if context:
            message += f" ({context})"
        super().__init__(message)


class SchemaShapeError(CodegenError):
    """Raised when the schema is missing a structure generation depends on."""
