"""Command line interface for the Memberstack documentation server."""

import asyncio
import json
import logging
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from mcp_memberstack_documentation.config import load_config
from mcp_memberstack_documentation.dispatcher import RequestDispatcher
from mcp_memberstack_documentation.server import run_stdio
from mcp_memberstack_documentation.validation import DocumentationValidator

console = Console()
app = typer.Typer(help="Memberstack documentation MCP server")

DocsOption = typer.Option(None, "--docs", help="Documentation root directory")
VerboseOption = typer.Option(False, "--verbose", "-v", help="Verbose logging")


def _setup_logging(verbose: bool) -> None:
    # stdout carries the MCP protocol, so logs go to stderr.
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(name)s: %(message)s", stream=sys.stderr)


@app.command()
def serve(docs: Path | None = DocsOption, verbose: bool = VerboseOption) -> None:
    """Run the MCP server over stdio."""
    _setup_logging(verbose)
    asyncio.run(run_stdio(load_config(docs)))


@app.command()
def search(
    query: str = typer.Argument(..., help="Query text"),
    category: str | None = typer.Option(None, "--category", "-c", help="Category filter"),
    docs: Path | None = DocsOption,
    verbose: bool = VerboseOption,
) -> None:
    """Search the documentation and print matching snippets."""
    _setup_logging(verbose)
    dispatcher = RequestDispatcher(load_config(docs))
    console.print(dispatcher.handle("search", {"query": query, "category": category}), markup=False)


@app.command()
def methods(
    package: str = typer.Argument(..., help="Package id: dom, admin or rest"),
    docs: Path | None = DocsOption,
    verbose: bool = VerboseOption,
) -> None:
    """List documented method signatures for a package."""
    _setup_logging(verbose)
    dispatcher = RequestDispatcher(load_config(docs))
    console.print(dispatcher.handle("listMethods", {"package": package}), markup=False)


@app.command()
def info(docs: Path | None = DocsOption, verbose: bool = VerboseOption) -> None:
    """Show corpus size and reference coverage."""
    _setup_logging(verbose)
    dispatcher = RequestDispatcher(load_config(docs))
    summary = dispatcher.info()

    console.print(f"[bold]{summary.server_name}[/bold] {summary.version}")
    console.print(f"Documentation root: {summary.docs_path}")
    console.print(f"Documents: {summary.document_count}")

    table = Table(title="Package references")
    table.add_column("Package")
    table.add_column("Path")
    table.add_column("Methods", justify="right")
    for package in summary.packages:
        methods_cell = str(package.method_count) if package.available else "[red]missing[/red]"
        table.add_row(package.package, package.path, methods_cell)
    console.print(table)


@app.command()
def validate(
    docs: Path | None = DocsOption,
    report: Path | None = typer.Option(None, "--report", help="Write the JSON report to this path"),
    verbose: bool = VerboseOption,
) -> None:
    """Cross-check documented method calls against the expected checklists."""
    _setup_logging(verbose)
    dispatcher = RequestDispatcher(load_config(docs))
    result = DocumentationValidator().validate(dispatcher.build_catalog())

    for package in result.packages:
        status = "[green]found[/green]" if package.present else "[red]missing[/red]"
        console.print(f"\n[bold]{package.package.upper()} package[/bold] ({status})")
        console.print(f"Found {len(package.documented)} documented methods, expected {len(package.expected)}")
        for name in package.missing:
            console.print(f"  [yellow]- {name}[/yellow]")
        for name in package.extra:
            console.print(f"  [cyan]+ {name}[/cyan]")
        if not package.missing and not package.extra:
            console.print("[green]All methods match the expected checklist[/green]")
        console.print(f"Coverage: {package.coverage}")

    console.print(f"\nREST API endpoints: {result.rest_endpoints}")

    if report is not None:
        report.write_text(json.dumps(result.to_dict(), indent=2), encoding="utf-8")
        console.print(f"Validation report saved to [bold]{report}[/bold]")


if __name__ == "__main__":  # pragma: no cover
    app()
