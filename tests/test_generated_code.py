"""Behavioral tests for generated query modules.

The generated module is executed in memory and its ``fetch`` and
``generate_gql`` globals are replaced by an in-memory subgraph that
answers list queries the way the hosted indexer does.
"""

import asyncio
import copy
import types
from decimal import Decimal

import pytest

from codegen_graph.core.methods import generate
from codegen_graph.runtime import generate_gql

URL = "https://example.com/subgraphs/name/org/tokens"


def load_module(source: str, name: str = "generated_queries") -> types.ModuleType:
    module = types.ModuleType(name)
    exec(compile(source, f"{name}.py", "exec"), module.__dict__)
    return module


def make_tokens(count):
    return [
        {
            "id": f"0x{i:06d}",
            "symbol": f"T{i}",
            "decimals": 18,
            "totalSupply": str(10**30 + i),
            "derivedETH": "0.5",
            "holders": [str(i)],
            "isActive": i % 2 == 0,
            "pool": None,
            "from": None,
        }
        for i in range(count)
    ]


class FakeSubgraph:
    """In-memory subgraph recording every request it receives."""

    def __init__(self, records):
        self.records = records
        self.requests: list[dict] = []
        self.queries: list[str] = []

    def generate_gql(self, query_name, options, args):
        self.requests.append(
            {"query_name": query_name, "options": copy.deepcopy(dict(options)), "args": dict(args)}
        )
        # The real builder must accept everything generated code passes
        return generate_gql(query_name, options, args)

    async def fetch(self, url, query):
        assert url == URL
        self.queries.append(query)
        request = self.requests[-1]
        options = request["options"]
        selected = request["args"]

        if "id" in options:
            matches = [r for r in self.records if r["id"] == options["id"]]
            record = self._project(matches[0], selected) if matches else None
            return {request["query_name"]: record}

        order_by = options.get("orderBy", "id")
        descending = options.get("orderDirection") == "desc"
        rows = [r for r in self.records if self._matches(r, options.get("where") or {})]
        # Nulls sort last
        rows.sort(key=lambda r: (r[order_by] is None, r[order_by] if r[order_by] is not None else ""), reverse=descending)
        rows = rows[: options.get("first", 100)]
        return {request["query_name"]: [self._project(r, selected) for r in rows]}

    @staticmethod
    def _matches(record, where):
        for key, bound in where.items():
            if key.endswith("_gt"):
                if not record[key[:-3]] > bound:
                    return False
            elif key.endswith("_lt"):
                if not record[key[:-3]] < bound:
                    return False
            elif record[key] != bound:
                return False
        return True

    @staticmethod
    def _project(record, selected):
        return {name: record[name] for name in selected if name in record}


@pytest.fixture(params=["plain", "client"])
def module(request, introspection):
    return load_module(generate(introspection, request.param))


def install(module, server):
    module.fetch = server.fetch
    module.generate_gql = server.generate_gql
    return server


def run(coro):
    return asyncio.run(coro)


ALL_FIELDS = {"id": True, "symbol": True, "totalSupply": True, "derivedETH": True, "isActive": True}


# =============================================================================
# Tests: Module contents
# =============================================================================


class TestModule:
    """The generated module imports and exposes the expected names."""

    def test_constants_and_types(self, module):
        assert module.MAX_PAGE == 1000
        assert module.TokenResult.__total__ is False
        assert module.TokenFields.__total__ is True
        assert list(module.TokenResult.__annotations__) == [
            "id", "symbol", "decimals", "totalSupply", "derivedETH",
            "holders", "isActive", "pool", "from",
        ]

    def test_filter_has_one_key_per_input_field(self, module, schema):
        expected = [f.name for f in schema.get_type("Token_filter").input_fields]
        assert list(module.TokenFilter.__annotations__) == expected


# =============================================================================
# Tests: Single fetch
# =============================================================================


class TestSingleFetch:
    """Tests for get_<entity>."""

    def test_coerces_fields(self, module):
        server = install(module, FakeSubgraph(make_tokens(3)))
        token = run(module.get_token(URL, {"id": "0x000002"}, ALL_FIELDS))

        assert token["id"] == "0x000002"
        assert token["totalSupply"] == Decimal(10**30 + 2)
        assert isinstance(token["totalSupply"], Decimal)
        assert token["derivedETH"] == Decimal("0.5")
        assert server.requests[0]["query_name"] == "token"
        assert 'token(id: "0x000002")' in server.queries[0]

    def test_only_selected_fields(self, module):
        install(module, FakeSubgraph(make_tokens(1)))
        token = run(module.get_token(URL, {"id": "0x000000"}, {"id": True, "symbol": True}))
        assert token == {"id": "0x000000", "symbol": "T0"}

    def test_missing_entity(self, module):
        install(module, FakeSubgraph([]))
        assert run(module.get_token(URL, {"id": "0xdead"}, {"id": True})) is None

    def test_falsy_values_are_kept(self, module):
        record = {
            "id": "0x0",
            "symbol": "",
            "decimals": 0,
            "totalSupply": "0",
            "derivedETH": None,
            "holders": [],
            "isActive": False,
        }
        install(module, FakeSubgraph([record]))
        selection = {name: True for name in record}
        token = run(module.get_token(URL, {"id": "0x0"}, selection))

        assert token == {
            "id": "0x0",
            "symbol": "",
            "decimals": 0,
            "totalSupply": Decimal(0),
            "derivedETH": None,
            "holders": [],
            "isActive": False,
        }

    def test_big_int_list_and_precision(self, module):
        huge = str(2**256 - 1)
        record = {"id": "0x1", "totalSupply": huge, "holders": [huge, "7"]}
        install(module, FakeSubgraph([record]))
        token = run(module.get_token(URL, {"id": "0x1"}, {"id": True, "totalSupply": True, "holders": True}))

        assert token["totalSupply"] == Decimal(2**256 - 1)
        assert str(token["totalSupply"]) == huge
        assert token["holders"] == [Decimal(2**256 - 1), Decimal(7)]

    def test_nested_entity_coerced(self, module):
        record = {"id": "0x1", "pool": {"id": "p1", "liquidity": "123"}}
        install(module, FakeSubgraph([record]))
        token = run(module.get_token(URL, {"id": "0x1"}, {"id": True, "pool": {"liquidity": True}}))

        assert token["pool"] == {"id": "p1", "liquidity": Decimal(123)}
        assert isinstance(token["pool"]["liquidity"], Decimal)

    def test_nested_entity_list_coerced(self, module):
        record = {
            "id": "p1",
            "liquidity": "7",
            "tokens": [{"id": "0x1", "totalSupply": "5", "holders": ["1"]}],
        }
        install(module, FakeSubgraph([record]))
        selection = {"liquidity": True, "tokens": {"id": True, "totalSupply": True, "holders": True}}
        pool = run(module.get_pool(URL, {"id": "p1"}, selection))

        assert pool["liquidity"] == Decimal(7)
        assert pool["tokens"] == [{"id": "0x1", "totalSupply": Decimal(5), "holders": [Decimal(1)]}]

    def test_null_nested_entity(self, module):
        install(module, FakeSubgraph([{"id": "0x1", "pool": None}]))
        token = run(module.get_token(URL, {"id": "0x1"}, {"id": True, "pool": {"id": True}}))
        assert token == {"id": "0x1", "pool": None}


# =============================================================================
# Tests: Multi fetch
# =============================================================================


class TestMultiFetch:
    """Tests for get_<entity>s and its pagination."""

    def test_single_page_shortcut(self, module):
        server = install(module, FakeSubgraph(make_tokens(200)))
        options = {"first": 50, "where": {"isActive": True}}
        tokens = run(module.get_tokens(URL, options, {"id": True}))

        assert len(server.requests) == 1
        assert server.requests[0]["options"] == options
        assert len(tokens) == 50

    def test_no_first_is_one_request(self, module):
        server = install(module, FakeSubgraph(make_tokens(10)))
        run(module.get_tokens(URL, {}, {"id": True}))
        assert len(server.requests) == 1
        assert "where" not in server.requests[0]["options"]

    def test_exactly_max_page_is_one_request(self, module):
        server = install(module, FakeSubgraph(make_tokens(1500)))
        tokens = run(module.get_tokens(URL, {"first": 1000}, {"id": True}))
        assert len(server.requests) == 1
        assert len(tokens) == 1000

    def test_pagination_bounds(self, module):
        records = make_tokens(3000)
        server = install(module, FakeSubgraph(records))
        tokens = run(module.get_tokens(URL, {"first": 2500}, {"id": True, "totalSupply": True}))

        assert len(server.requests) == 3
        sent = [r["options"] for r in server.requests]
        assert "id_gt" not in sent[0]["where"]
        assert sent[1]["where"]["id_gt"] == records[999]["id"]
        assert sent[2]["where"]["id_gt"] == records[1999]["id"]
        assert [s["first"] for s in sent] == [1000, 1000, 500]
        assert all(s["orderBy"] == "id" and s["orderDirection"] == "asc" for s in sent)

        assert len(tokens) == 2500
        assert [t["id"] for t in tokens] == [r["id"] for r in records[:2500]]
        assert all(isinstance(t["totalSupply"], Decimal) for t in tokens)

    def test_bound_sent_in_query(self, module):
        records = make_tokens(1200)
        server = install(module, FakeSubgraph(records))
        run(module.get_tokens(URL, {"first": 1100}, {"id": True}))
        assert f'id_gt: "{records[999]["id"]}"' in server.queries[1]

    def test_descending_uses_less_than(self, module):
        records = make_tokens(2000)
        server = install(module, FakeSubgraph(records))
        tokens = run(
            module.get_tokens(URL, {"first": 1500, "orderDirection": "desc"}, {"id": True})
        )

        sent = [r["options"] for r in server.requests]
        assert len(sent) == 2
        assert sent[1]["where"]["id_lt"] == records[1000]["id"]
        assert [t["id"] for t in tokens] == [r["id"] for r in reversed(records)][:1500]

    def test_custom_order_by(self, module):
        records = make_tokens(2200)
        server = install(module, FakeSubgraph(records))
        run(module.get_tokens(URL, {"first": 2100, "orderBy": "symbol"}, {"id": True, "symbol": True}))

        ordered = sorted(records, key=lambda r: r["symbol"])
        sent = [r["options"] for r in server.requests]
        assert sent[1]["where"]["symbol_gt"] == ordered[999]["symbol"]
        assert "id_gt" not in sent[1]["where"]

    def test_short_page_terminates(self, module):
        server = install(module, FakeSubgraph(make_tokens(1500)))
        tokens = run(module.get_tokens(URL, {"first": 5000}, {"id": True}))

        assert len(server.requests) == 2
        assert len(tokens) == 1500

    def test_exhausted_on_page_boundary(self, module):
        server = install(module, FakeSubgraph(make_tokens(2000)))
        tokens = run(module.get_tokens(URL, {"first": 5000}, {"id": True}))

        assert len(server.requests) == 3
        assert len(tokens) == 2000

    def test_caller_options_untouched(self, module):
        install(module, FakeSubgraph(make_tokens(2500)))
        options = {"first": 2000, "where": {"isActive": True}}
        run(module.get_tokens(URL, options, {"id": True}))
        assert options == {"first": 2000, "where": {"isActive": True}}

    def test_caller_filter_kept_on_every_page(self, module):
        server = install(module, FakeSubgraph(make_tokens(5000)))
        tokens = run(module.get_tokens(URL, {"first": 2000, "where": {"isActive": True}}, {"id": True, "isActive": True}))

        assert all(r["options"]["where"]["isActive"] is True for r in server.requests)
        assert len(tokens) == 2000
        assert all(t["isActive"] for t in tokens)

    def test_ordering_field_fetched_when_not_selected(self, module):
        records = make_tokens(3000)
        server = install(module, FakeSubgraph(records))
        args = {"symbol": True}
        tokens = run(module.get_tokens(URL, {"first": 2500}, args))

        assert len(server.requests) == 3
        assert all(r["args"]["id"] is True for r in server.requests)
        assert server.requests[2]["options"]["where"]["id_gt"] == records[1999]["id"]
        assert len(tokens) == 2500
        assert tokens[0] == {"symbol": "T0"}
        assert args == {"symbol": True}

    def test_falsy_ordering_value_still_bounds(self, module):
        records = make_tokens(1500)
        for i, record in enumerate(records):
            record["decimals"] = i - 999
        server = install(module, FakeSubgraph(records))
        tokens = run(
            module.get_tokens(URL, {"first": 1200, "orderBy": "decimals"}, {"id": True, "decimals": True})
        )

        assert server.requests[1]["options"]["where"]["decimals_gt"] == 0
        assert [t["id"] for t in tokens] == [r["id"] for r in records[:1200]]

    def test_null_ordering_value_stops_paging(self, module):
        records = make_tokens(1500)
        for record in records[500:]:
            record["symbol"] = None
        server = install(module, FakeSubgraph(records))
        tokens = run(
            module.get_tokens(URL, {"first": 1200, "orderBy": "symbol"}, {"id": True, "symbol": True})
        )

        assert len(server.requests) == 1
        assert len(tokens) == 1000
        assert len({t["id"] for t in tokens}) == 1000
