import asyncio
import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from contentql.core.document import QueryDocumentError, load_query_document
from contentql.core.planner import plan, to_query_params
from contentql.core.ports.content_source import ContentSource
from contentql.core.resolve import QueryEngine
from contentql.models import Join, RootResult
from contentql.source.config import ConfigError
from contentql.source.contentful import ContentSourceError

query_app = typer.Typer(help="Resolve query documents.")
console = Console()

DocumentArg = Annotated[str, typer.Argument(help="Path to a JSON query document, or '-' to read stdin.")]


def _get_source() -> "ContentSource":
    from contentql.source.config import load_config
    from contentql.source.contentful import ContentfulSource, get_client

    config = load_config()
    return ContentfulSource(get_client(config), config)


def _load_document(document: str) -> list[Join]:
    text = sys.stdin.read() if document == "-" else Path(document).read_text(encoding="utf-8")
    try:
        return load_query_document(text)
    except QueryDocumentError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from exc


@query_app.command("run")
def run(document: DocumentArg) -> None:
    """Resolve a query document and print the result as JSON."""
    roots = _load_document(document)
    try:
        source = _get_source()
    except ConfigError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from exc

    async def _run() -> dict[str, RootResult]:
        try:
            return await QueryEngine(source).resolve(roots)
        finally:
            await source.dispose()

    try:
        results = asyncio.run(_run())
    except ContentSourceError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from exc
    console.print_json(data={key: result.to_dict() for key, result in results.items()})


@query_app.command("plan")
def plan_(document: DocumentArg) -> None:
    """Show the request parameters each root of a query document would send."""
    roots = _load_document(document)
    table = Table(show_lines=False)
    for header in ("root", "parameter", "value"):
        table.add_column(header)
    for root in roots:
        for name, value in to_query_params(plan(root)).items():
            table.add_row(root.key, name, value)
    console.print(table)
