"""Command-line interface for codegen-graph."""

import json
from pathlib import Path
from typing import Any

import click
import httpx
from graphql import GraphQLError as GraphQLSchemaError
from graphql import get_introspection_query

from .core.errors import CodegenError
from .core.methods import DEFAULT_CLIENT_NAME, GenerationMethod, generate
from .core.parser import SchemaParser, load_schema
from .runtime.executor import GraphQLError


def pull(url: str, *, timeout: float = 30.0, transport: httpx.BaseTransport | None = None) -> dict[str, Any]:
    """Retrieve the introspected schema of a subgraph.

    Returns:
        The ``__schema`` object of the introspection result

    Raises:
        GraphQLError: If the response contains errors
        httpx.HTTPError: On transport failures or error statuses
    """
    with httpx.Client(timeout=timeout, transport=transport) as client:
        response = client.post(url, json={"query": get_introspection_query()})
        response.raise_for_status()
        result = response.json()

    if result.get("errors"):
        error_messages = "; ".join(e.get("message", str(e)) for e in result["errors"])
        raise GraphQLError(f"GraphQL errors: {error_messages}", result["errors"])
    return SchemaParser(result).raw_schema


@click.group()
@click.version_option(package_name="codegen-graph")
def main():
    """Typed Python query generator for GraphQL subgraphs.

    Generate typed query functions, with automatic pagination, from an
    introspected subgraph schema.
    """
    pass


@main.command("pull")
@click.argument("url")
def pull_command(url: str):
    """Retrieve the GraphQL schema associated with the given subgraph URL.

    Example:

        codegen-graph pull https://example.com/subgraphs/name/org/subgraph > schema.json
    """
    try:
        schema = pull(url)
    except (GraphQLError, httpx.HTTPError, CodegenError, ValueError) as e:
        raise click.ClickException(f"failed to pull: {e}") from e
    click.echo(json.dumps(schema))


@main.command("gen")
@click.option(
    "--url",
    "-u",
    envvar="CODEGEN_GRAPH_URL",
    help="Subgraph to extract the schema from.",
)
@click.option(
    "--schema",
    "-s",
    type=click.Path(exists=True, dir_okay=False),
    help="Schema previously downloaded with pull (.json), or an SDL file (.graphql).",
)
@click.option(
    "--method",
    "-m",
    default=GenerationMethod.PLAIN.value,
    show_default=True,
    help=f"Top level generator to use. Options: {', '.join(GenerationMethod.names())}.",
)
@click.option(
    "--out",
    "-o",
    type=click.Path(dir_okay=False),
    help="File to write the generated module to (default: stdout).",
)
@click.option(
    "--client-name",
    "-n",
    default=DEFAULT_CLIENT_NAME,
    show_default=True,
    help="Name of the generated client class (client method only).",
)
@click.option(
    "--template-dir",
    type=click.Path(exists=True, file_okay=False),
    help="Directory with Jinja2 templates overriding the built-in ones.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def gen(
    url: str | None,
    schema: str | None,
    method: str,
    out: str | None,
    client_name: str,
    template_dir: str | None,
    verbose: bool,
):
    """Generate the Python code to fetch from a subgraph.

    Examples:

        codegen-graph gen --schema ./schema.json --out ./queries.py

        codegen-graph gen -u https://example.com/subgraphs/name/org/subgraph -m client -o client.py
    """
    if schema and url:
        raise click.UsageError("only one of --schema or --url should be specified")
    if not schema and not url:
        raise click.UsageError("supply either --schema or --url")

    # Progress goes to stderr when the code itself goes to stdout
    echo_err = out is None

    try:
        if url:
            if verbose:
                click.echo(f"Pulling schema from {url}...", err=echo_err)
            ir = load_schema(pull(url))
        else:
            if verbose:
                click.echo(f"Schema: {Path(schema).resolve()}", err=echo_err)
            ir = load_schema(schema)

        if verbose:
            click.echo(f"  Types: {len(ir.types)}", err=echo_err)
            click.echo(f"  Entities: {len(list(ir.entities()))}", err=echo_err)
            click.echo(f"Generating code (method: {method})...", err=echo_err)

        code = generate(ir, method, client_name=client_name, template_dir=template_dir)
    except json.JSONDecodeError as e:
        raise click.ClickException(f"failed to gen: invalid schema JSON: {e}") from e
    except (CodegenError, GraphQLError, GraphQLSchemaError, httpx.HTTPError, ValueError) as e:
        # ValueError: a custom template rendered invalid Python
        raise click.ClickException(f"failed to gen: {e}") from e

    if verbose:
        click.echo(f"  Lines: {len(code.splitlines())}", err=echo_err)
        click.echo(f"  Query functions: {code.count('async def get_')}", err=echo_err)

    if out:
        output_path = Path(out).resolve()
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(code)
        click.echo(f"wrote file: {output_path}")
    else:
        click.echo(code, nl=False)


if __name__ == "__main__":
    main()
