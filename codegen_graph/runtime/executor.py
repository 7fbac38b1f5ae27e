"""GraphQL executor for running generated queries against a subgraph.

Handles HTTP communication, error handling, and response parsing.
"""

from typing import Any

import httpx


class GraphQLError(Exception):
    """Exception raised for GraphQL errors."""

    def __init__(self, message: str, errors: list[dict[str, Any]]):
        self.message = message
        self.errors = errors
        super().__init__(message)


class GraphQLExecutor:
    """Executes GraphQL queries against an endpoint.

    Examples:
        async with GraphQLExecutor(url) as executor:
            data = await executor.execute("{ tokens { id } }")

        # Extra headers, e.g. a gateway API key
        executor = GraphQLExecutor(url, headers={"Authorization": "Bearer ..."})
    """

    def __init__(
        self,
        url: str,
        headers: dict[str, str] | None = None,
        *,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the executor.

        Args:
            url: GraphQL endpoint URL
            headers: Extra headers sent with every request
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used for testing)
        """
        self.url = url
        self.timeout = timeout
        self.headers = dict(headers or {})
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            headers = {"Content-Type": "application/json"}
            headers.update(self.headers)

            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers=headers,
                transport=self._transport,
            )
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def execute(
        self,
        query: str,
        variables: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Execute a raw GraphQL query.

        Args:
            query: GraphQL query string
            variables: Query variables

        Returns:
            The 'data' portion of the response

        Raises:
            GraphQLError: If the response contains errors
            httpx.HTTPStatusError: If the endpoint answers with an error status
        """
        client = await self._get_client()

        payload: dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables

        response = await client.post(self.url, json=payload)
        response.raise_for_status()

        result = response.json()

        if result.get("errors"):
            error_messages = "; ".join(e.get("message", str(e)) for e in result["errors"])
            raise GraphQLError(f"GraphQL errors: {error_messages}", result["errors"])

        return result.get("data") or {}


async def fetch(url: str, query: str) -> dict[str, Any]:
    """Run one query with a short-lived executor and return its data."""
    async with GraphQLExecutor(url) as executor:
        return await executor.execute(query)
