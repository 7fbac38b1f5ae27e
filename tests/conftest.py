"""Shared fixtures: a small subgraph introspection payload."""

import copy

import pytest

from codegen_graph.core.parser import SchemaParser


def named(name, kind="SCALAR"):
    return {"kind": kind, "name": name, "ofType": None}


def non_null(inner):
    return {"kind": "NON_NULL", "name": None, "ofType": inner}


def list_of(inner):
    return {"kind": "LIST", "name": None, "ofType": inner}


def field(name, type_ref, description=None):
    return {"name": name, "type": type_ref, "description": description, "args": []}


def input_field(name, type_ref):
    return {"name": name, "type": type_ref, "defaultValue": None}


def scalar(name):
    return {"kind": "SCALAR", "name": name, "fields": None, "inputFields": None, "enumValues": None}


def object_type(name, fields, description=None):
    return {"kind": "OBJECT", "name": name, "description": description, "fields": fields}


def input_type(name, input_fields):
    return {"kind": "INPUT_OBJECT", "name": name, "inputFields": input_fields, "fields": None}


def enum_type(name, values):
    return {"kind": "ENUM", "name": name, "enumValues": [{"name": v} for v in values], "fields": None}


TOKEN_FIELDS = [
    "id",
    "symbol",
    "decimals",
    "totalSupply",
    "derivedETH",
    "holders",
    "isActive",
    "pool",
    "from",
]


def build_introspection():
    """Introspection payload of a subgraph with Token and Pool entities."""
    return {
        "data": {
            "__schema": {
                "queryType": {"name": "Query"},
                "mutationType": None,
                "subscriptionType": {"name": "Subscription"},
                "types": [
                    object_type(
                        "Query",
                        [
                            field("token", named("Token", "OBJECT")),
                            field("tokens", non_null(list_of(non_null(named("Token", "OBJECT"))))),
                            field("pool", named("Pool", "OBJECT")),
                            field("pools", non_null(list_of(non_null(named("Pool", "OBJECT"))))),
                            field("_meta", named("_Meta_", "OBJECT")),
                        ],
                    ),
                    object_type(
                        "Subscription",
                        [field("token", named("Token", "OBJECT"))],
                    ),
                    object_type(
                        "Token",
                        [
                            field("id", non_null(named("ID"))),
                            field("symbol", non_null(named("String"))),
                            field("decimals", non_null(named("Int"))),
                            field("totalSupply", non_null(named("BigInt"))),
                            field("derivedETH", named("BigDecimal")),
                            field("holders", non_null(list_of(non_null(named("BigInt"))))),
                            field("isActive", non_null(named("Boolean"))),
                            field("pool", named("Pool", "OBJECT")),
                            field("from", named("Bytes")),
                        ],
                        description="An ERC20 token",
                    ),
                    input_type(
                        "Token_filter",
                        [
                            input_field("id", named("ID")),
                            input_field("id_gt", named("ID")),
                            input_field("id_lt", named("ID")),
                            input_field("id_in", list_of(non_null(named("ID")))),
                            input_field("symbol_contains", named("String")),
                            input_field("totalSupply_gt", named("BigInt")),
                            input_field("derivedETH_lt", named("BigDecimal")),
                            input_field("isActive", named("Boolean")),
                            input_field("pool_", named("Pool_filter", "INPUT_OBJECT")),
                            input_field("_change_block", named("BlockChangedFilter", "INPUT_OBJECT")),
                            input_field("and", list_of(named("Token_filter", "INPUT_OBJECT"))),
                        ],
                    ),
                    object_type(
                        "Pool",
                        [
                            field("id", non_null(named("ID"))),
                            field("liquidity", non_null(named("BigInt"))),
                            field("tokens", non_null(list_of(non_null(named("Token", "OBJECT"))))),
                        ],
                    ),
                    input_type(
                        "Pool_filter",
                        [
                            input_field("id", named("ID")),
                            input_field("liquidity_gte", named("BigInt")),
                        ],
                    ),
                    input_type("BlockChangedFilter", [input_field("number_gte", non_null(named("Int")))]),
                    object_type("_Meta_", [field("deployment", non_null(named("String")))]),
                    enum_type("Token_orderBy", ["id", "symbol", "totalSupply"]),
                    enum_type("OrderDirection", ["asc", "desc"]),
                    scalar("ID"),
                    scalar("String"),
                    scalar("Int"),
                    scalar("Boolean"),
                    scalar("BigInt"),
                    scalar("BigDecimal"),
                    scalar("Bytes"),
                ],
            }
        }
    }


@pytest.fixture
def introspection():
    """A fresh copy of the sample introspection payload."""
    return copy.deepcopy(build_introspection())


@pytest.fixture
def schema(introspection):
    """The sample payload parsed to IR."""
    return SchemaParser(introspection).parse()
