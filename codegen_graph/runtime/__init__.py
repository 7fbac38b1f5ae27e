"""Runtime support imported by generated query modules."""

from .executor import GraphQLError, GraphQLExecutor, fetch
from .formatting import format_nested
from .numbers import Wei, WeiSource, wei
from .query_builder import generate_gql, render_value

__all__ = [
    "GraphQLError",
    "GraphQLExecutor",
    "Wei",
    "WeiSource",
    "fetch",
    "format_nested",
    "generate_gql",
    "render_value",
    "wei",
]
