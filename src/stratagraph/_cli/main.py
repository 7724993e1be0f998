import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from stratagraph._errors import StratagraphError
from stratagraph._graph import DirectedGraph, dependency_list, scc, self_recursive_sets, stratification_list
from stratagraph._io import GraphDocument, load_graph_document

from .config import ConfigError, get_config
from .render import render_component_table, render_strata_table

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()

GraphPathArgument = Annotated[
    Path | None,
    typer.Argument(help="Path to a graph TOML file (defaults to [tool.stratagraph].graph)"),
]
StrictOption = Annotated[
    bool | None,
    typer.Option(
        "--strict/--permissive",
        help="Reject edges to nodes outside the declared node set (defaults to [tool.stratagraph].strict)",
    ),
]


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Stratagraph CLI."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


def _load_graph(path: Path | None, strict: bool | None) -> tuple[GraphDocument, DirectedGraph[str], bool]:
    """Resolve the graph file and neighbor policy, then load the document.

    Returns:
        The document, its dependency graph, and the effective strict flag.

    """
    try:
        config = get_config()
    except ConfigError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    if path is None:
        if config.graph is None:
            err_console.print("[red]Error: No graph file given and none configured in pyproject.toml[/red]")
            raise typer.Exit(code=1)
        path = config.graph
    if strict is None:
        strict = config.strict

    err_console.print(f"[cyan]Loading graph from:[/cyan] {path}")
    try:
        document = load_graph_document(path)
    except StratagraphError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    graph = document.to_graph(strict=strict)
    logger.debug(f"Neighbor policy: {'strict' if strict else 'permissive'}")
    for node, outside in graph.undeclared_neighbors().items():
        logger.warning(f"Node '{node}' points outside the node set: {', '.join(outside)}")
    return document, graph, strict


@app.command(name="scc")
def scc_command(path: GraphPathArgument = None, *, strict: StrictOption = None) -> None:
    """List the strongly connected components of a graph."""
    _, graph, _ = _load_graph(path, strict)
    try:
        components = scc(graph)
    except StratagraphError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e
    render_component_table(components, out_console, title="Strongly connected components")


@app.command()
def cycles(path: GraphPathArgument = None, *, strict: StrictOption = None) -> None:
    """List self-recursive components; exit non-zero if any exist."""
    _, graph, _ = _load_graph(path, strict)
    try:
        recursive = self_recursive_sets(graph)
    except StratagraphError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    if not recursive:
        err_console.print("[green]✓ No cycles found[/green]")
        return

    render_component_table(recursive, out_console, title="Self-recursive components")
    err_console.print(f"[red]✗ {len(recursive)} cycle(s) found[/red]")
    raise typer.Exit(code=1)


@app.command()
def order(path: GraphPathArgument = None, *, strict: StrictOption = None) -> None:
    """Group nodes into dependency strata, honoring [hints] when present."""
    document, graph, effective_strict = _load_graph(path, strict)
    try:
        if document.has_hints:
            err_console.print("[cyan]Stratifying with ordering hints...[/cyan]")
            strata = stratification_list(graph, document.to_hint_graph(strict=effective_strict))
        else:
            strata = dependency_list(graph)
    except StratagraphError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        if isinstance(e, OverflowError):
            err_console.print("[yellow]The dependency graph probably contains a cycle; run 'cycles' to find it.[/yellow]")
        raise typer.Exit(code=1) from e

    render_strata_table(strata, out_console)


def main() -> None:
    app()
