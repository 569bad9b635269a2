import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from contentql.cli.query import query_app
from contentql.cli.serve import serve_app

app = typer.Typer(
    name="contentql",
    help="contentql CLI: resolve nested queries against Contentful.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.add_typer(query_app, name="query")
app.add_typer(serve_app, name="serve")


@app.callback()
def _configure(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log fetches and dropped links.")] = False,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


def main() -> None:
    app()
