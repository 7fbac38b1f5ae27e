"""Introspection schema parser.

Parses a standard introspection result (JSON) into an IRSchema. SDL
files are first converted to an introspection result with graphql-core.
"""

import json
import os
from typing import Any, Mapping

from graphql import build_schema, introspection_from_schema

from .errors import SchemaShapeError
from .ir import IRField, IRSchema, IRType, IRTypeRef, TypeKind, TypeRefKind

SDL_EXTENSIONS = (".graphql", ".graphqls", ".gql")


class SchemaParser:
    """Parses introspection payloads into IR."""

    def __init__(self, payload: Mapping[str, Any]):
        """Initialize a parser with an introspection payload.

        Accepts a full HTTP response (``{"data": {"__schema": ...}}``),
        the ``data`` object (``{"__schema": ...}``) or the bare schema.
        """
        self.raw_schema = self._unwrap(payload)

    @classmethod
    def from_sdl(cls, sdl: str) -> "SchemaParser":
        """Create a parser from GraphQL SDL text."""
        return cls(introspection_from_schema(build_schema(sdl)))

    @classmethod
    def from_file(cls, path: str) -> "SchemaParser":
        """Create a parser from an introspection JSON or SDL file."""
        with open(path) as f:
            content = f.read()
        if os.path.splitext(path)[1].lower() in SDL_EXTENSIONS:
            return cls.from_sdl(content)
        return cls(json.loads(content))

    @staticmethod
    def _unwrap(payload: Mapping[str, Any]) -> Mapping[str, Any]:
        if not isinstance(payload, Mapping):
            raise SchemaShapeError("introspection payload must be an object")
        if "data" in payload and isinstance(payload["data"], Mapping):
            payload = payload["data"]
        if "__schema" in payload:
            payload = payload["__schema"]
        if not isinstance(payload, Mapping) or not isinstance(payload.get("types"), list):
            raise SchemaShapeError("introspection payload has no types list")
        return payload

    def parse(self) -> IRSchema:
        """Parse the payload and return the complete IR."""
        types = tuple(self._process_type(t) for t in self.raw_schema["types"])
        return IRSchema(
            types=types,
            query_type=self._root_name("queryType"),
            mutation_type=self._root_name("mutationType"),
            subscription_type=self._root_name("subscriptionType"),
        )

    def _root_name(self, key: str) -> str | None:
        root = self.raw_schema.get(key)
        if not root:
            return None
        return root.get("name")

    def _process_type(self, raw: Mapping[str, Any]) -> IRType:
        name = raw.get("name")
        if not name:
            raise SchemaShapeError("schema type without a name")
        try:
            kind = TypeKind(raw.get("kind"))
        except ValueError:
            raise SchemaShapeError(f'type "{name}" has unknown kind {raw.get("kind")!r}') from None

        fields: tuple[IRField, ...] = ()
        input_fields: tuple[IRField, ...] = ()
        enum_values: tuple[str, ...] = ()

        if kind in (TypeKind.OBJECT, TypeKind.INTERFACE):
            if raw.get("fields") is None:
                raise SchemaShapeError(f'type "{name}" has no fields list')
            fields = self._process_fields(name, raw["fields"])
        elif kind is TypeKind.INPUT_OBJECT:
            if raw.get("inputFields") is None:
                raise SchemaShapeError(f'input type "{name}" has no inputFields list')
            input_fields = self._process_fields(name, raw["inputFields"])
        elif kind is TypeKind.ENUM:
            enum_values = tuple(v["name"] for v in raw.get("enumValues") or [])

        return IRType(
            name=name,
            kind=kind,
            fields=fields,
            input_fields=input_fields,
            enum_values=enum_values,
            description=raw.get("description"),
        )

    def _process_fields(self, type_name: str, raw_fields: list) -> tuple[IRField, ...]:
        fields = []
        for raw in raw_fields:
            if not raw.get("name") or not raw.get("type"):
                raise SchemaShapeError(f'type "{type_name}" has a field without name or type')
            fields.append(
                IRField(
                    name=raw["name"],
                    type=self._process_type_ref(raw["type"]),
                    description=raw.get("description"),
                )
            )
        return tuple(fields)

    def _process_type_ref(self, raw: Mapping[str, Any]) -> IRTypeRef:
        """Convert an introspection type reference into an IRTypeRef."""
        kind = raw.get("kind")
        if kind in (TypeRefKind.NON_NULL.value, TypeRefKind.LIST.value):
            if not raw.get("ofType"):
                raise SchemaShapeError(f"{kind} type reference without ofType")
            return IRTypeRef(TypeRefKind(kind), of_type=self._process_type_ref(raw["ofType"]))
        if not raw.get("name"):
            raise SchemaShapeError(f"type reference of kind {kind!r} without a name")
        return IRTypeRef.named(raw["name"])


def load_schema(source: str | Mapping[str, Any] | IRSchema) -> IRSchema:
    """Return an IRSchema from a file path, an introspection payload or an IRSchema."""
    if isinstance(source, IRSchema):
        return source
    if isinstance(source, str):
        return SchemaParser.from_file(source).parse()
    return SchemaParser(source).parse()
