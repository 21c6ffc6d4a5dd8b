"""Command-line utilities for the gql_resolver_types package."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
import ujson as json
from graphql import GraphQLSyntaxError
from rich.console import Console
from rich.markup import escape

from . import get_version
from .api import generate as generate_declarations
from .api import load_config
from .config import GeneratorConfig
from .emitter import UnsupportedDefinitionKind
from .log import configure_logging

app = typer.Typer(help="GraphQL schema to TypeScript resolver types")
console = Console(stderr=True)


@app.command()
def version() -> None:
    """Print the installed package version."""
    typer.echo(get_version())


@app.command()
def generate(
    schema: Annotated[
        Path,
        typer.Argument(
            exists=True, dir_okay=False, readable=True, help="GraphQL schema file (SDL)."
        ),
    ],
    out: Annotated[
        Path | None,
        typer.Argument(help="Destination .ts file; stdout when omitted."),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option(
            exists=True, dir_okay=False, readable=True, help="YAML/JSON generator config."
        ),
    ] = None,
    context: Annotated[
        str | None,
        typer.Option(help="Type passed as the resolver context argument."),
    ] = None,
    header: Annotated[
        str | None,
        typer.Option(help="Text written verbatim before the declarations."),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log progress.")] = False,
) -> None:
    """Generate resolver type declarations for a schema."""
    configure_logging(verbose, console=console)
    try:
        base = load_config(config) if config is not None else GeneratorConfig()
        settings = base.with_overrides(context=context, header=header)
        output = generate_declarations(schema, out_path=out, config=settings)
    except (GraphQLSyntaxError, UnsupportedDefinitionKind, ValueError) as exc:
        console.print(f"[bold red]Error:[/] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    if out is None:
        typer.echo(output, nl=False)
    else:
        console.print(f"[bold green]Declarations written:[/] {escape(str(out))}")


@app.command("config-schema")
def config_schema(
    out: Annotated[Path, typer.Argument(help="Output path (usually .json).")],
    pretty: Annotated[bool, typer.Option(help="Write pretty-printed JSON.")] = True,
) -> None:
    """Export the JSON Schema for generator config files."""
    schema = GeneratorConfig.model_json_schema()
    out.write_text(json.dumps(schema, indent=2 if pretty else 0))
    console.print(f"[bold green]Config schema written:[/] {escape(str(out))}")


def main() -> None:
    """Entry point for `python -m gql_resolver_types.cli`."""
    app()


if __name__ == "__main__":
    main()
