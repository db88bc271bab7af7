"""CLI for richtext-find (find, replace, leaves, MCP server)."""

import json
from pathlib import Path
from typing import Annotated, Any

import typer
from loguru import logger

from richtext_find.config import MAX_RESULT_LIMIT
from richtext_find.logging_config import configure_logging
from richtext_find.mcp.server import document_find, document_leaves, document_replace

app = typer.Typer(help="Find and replace text in rich-text JSON documents.")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log warnings and errors"),
) -> None:
    configure_logging(verbose=verbose, quiet=quiet)


def _fail_on_error(result: dict[str, Any], *, output_json: bool) -> None:
    if "error" not in result:
        return
    if output_json:
        typer.echo(json.dumps(result, indent=2, ensure_ascii=False))
    else:
        logger.error(result["error"])
    raise typer.Exit(1)


@app.command()
def find(
    file: Path = typer.Argument(..., help="JSON document"),
    term: str = typer.Argument(..., help="Text to search for"),
    regex: bool = typer.Option(False, "--regex", "-r", help="Treat term as a regular expression"),
    limit: int = typer.Option(MAX_RESULT_LIMIT, "--limit", "-n", help="Max results"),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """List occurrences of a term, leaf by leaf."""
    result = document_find(file, term=term, regex=regex, limit=limit)
    _fail_on_error(result, output_json=output_json)

    if output_json:
        typer.echo(json.dumps(result, indent=2, ensure_ascii=False))
        return

    typer.echo(f"Found {result['total']} matches (showing {result['count']}):\n")
    for r in result["results"]:
        path = "/".join(str(i) for i in r["path"])
        typer.echo(f"  {r['index'] + 1:>3}. [{path}] {r['anchor_offset']}-{r['focus_offset']}")
        typer.echo(f"       {r['snippet']}")


@app.command()
def replace(
    file: Path = typer.Argument(..., help="JSON document"),
    term: str = typer.Argument(..., help="Text to search for"),
    replacement: str = typer.Argument(..., help="Replacement text"),
    index: Annotated[
        int | None,
        typer.Option("--index", "-i", help="Replace only this occurrence (1-based)"),
    ] = None,
    regex: bool = typer.Option(False, "--regex", "-r", help="Treat term as a regular expression"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Do not write anything"),
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the result here instead of FILE"),
    ] = None,
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Replace one occurrence (--index) or all occurrences of a term."""
    result = document_replace(
        file,
        term=term,
        replacement=replacement,
        index=None if index is None else index - 1,
        regex=regex,
        dry_run=dry_run,
        output=output,
    )
    _fail_on_error(result, output_json=output_json)

    if output_json:
        typer.echo(json.dumps(result, indent=2, ensure_ascii=False))
        return

    prefix = "Would replace" if dry_run else "Replaced"
    typer.echo(
        f"{prefix} {result['replaced']} of {result['matches_before']} matches, "
        f"{result['remaining']} remaining"
    )


@app.command()
def leaves(
    file: Path = typer.Argument(..., help="JSON document"),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Show the text leaves searched, in reading order."""
    result = document_leaves(file)
    _fail_on_error(result, output_json=output_json)

    if output_json:
        typer.echo(json.dumps(result, indent=2, ensure_ascii=False))
        return

    typer.echo(f"{result['count']} leaves:\n")
    for leaf in result["leaves"]:
        path = "/".join(str(i) for i in leaf["path"])
        typer.echo(f"  [{path}] {leaf['text']!r}")


@app.command()
def serve() -> None:
    """Start the MCP server (stdio transport)."""
    from richtext_find.mcp.server import run_mcp_server

    run_mcp_server()
