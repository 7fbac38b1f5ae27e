#!/usr/bin/env python3
"""Demonstration of generating typed subgraph queries.

This script shows how to:
1. Parse a subgraph schema
2. Inspect the entities and their declarations
3. Generate the query module and a client class
4. Build the query a paginated request sends

Note: This demo doesn't make real API calls - it just demonstrates
the generation capabilities.
"""

from codegen_graph.core import SchemaParser, build_document, generate
from codegen_graph.runtime import generate_gql

SCHEMA = """
type Query {
  pair(id: ID!): Pair
  pairs(first: Int, where: Pair_filter): [Pair!]!
}

type Token {
  id: ID!
  symbol: String!
  decimals: Int!
  totalSupply: BigInt!
}

type Pair {
  id: ID!
  token0: Token!
  token1: Token!
  reserve0: BigDecimal!
  reserve1: BigDecimal!
  createdAtTimestamp: BigInt!
}

input Token_filter {
  id: ID
  id_gt: ID
  symbol: String
}

input Pair_filter {
  id: ID
  id_gt: ID
  reserve0_gt: BigDecimal
  token0_: Token_filter
}

scalar BigInt
scalar BigDecimal
"""


def main():
    print("=== Subgraph Codegen Demo ===\n")

    print("1. Parsing schema...")
    ir = SchemaParser.from_sdl(SCHEMA).parse()
    entities = list(ir.entities())
    print(f"   {len(ir.types)} types, {len(entities)} entities")

    print("\n2. Declarations per entity")
    document = build_document(ir)
    for entity in document.entities:
        names = ", ".join(d.name for d in entity.declarations)
        print(f"   {entity.name}: {names}")
        print(f"     {entity.single_query.function_name}(), {entity.multi_query.function_name}()")

    print("\n3. Generating code...")
    code = generate(ir)
    print(f"   Generated {len(code.splitlines())} lines")
    print(f"   {code.count('async def ')} query functions")

    client_code = generate(ir, "client", client_name="PairsClient")
    print(f"   Client method adds {client_code.count('async def ') - code.count('async def ')} methods")

    print("\n4. Second page of a 2500 record request")
    print(
        generate_gql(
            "pairs",
            {
                "first": 1000,
                "where": {"reserve0_gt": "100", "id_gt": "0x00ff"},
                "orderBy": "id",
                "orderDirection": "asc",
            },
            {"id": True, "reserve0": True, "token0": {"symbol": True}},
        )
    )

    print("\n=== Demo Complete ===")
    print("\nUsage example (once the module is generated):")
    print("""
    pairs = await get_pairs(
        URL,
        {"first": 2500, "where": {"reserve0_gt": "100"}},
        {"id": True, "reserve0": True, "token0": {"symbol": True}},
    )
    print(pairs[0]["reserve0"])  # Decimal
    """)


if __name__ == "__main__":
    main()
