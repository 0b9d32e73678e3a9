from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from .config import Settings
from .graph import Graph, InvalidArgumentError
from .ingest.edgelist import GraphFileError, read_edge_list
from .ingest.words import read_word_graph, read_word_index
from .ladder import find_ladder, render_result, run_ladder
from .logs import configure_logging


app = typer.Typer(add_completion=False, help="Word ladders: DFS/BFS paths through an undirected word graph.")
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging to stderr"),
    log_json: bool = typer.Option(False, "--log-json", help="Structured JSON log lines"),
):
    # Flags can only turn logging options on; env/.env supplies the rest.
    settings = Settings()
    configure_logging(verbose=verbose or settings.verbose, log_json=log_json or settings.log_json)


def _load(file: Path, *, words: bool) -> Graph:
    try:
        return read_word_graph(file) if words else read_edge_list(file)
    except GraphFileError as e:
        console.print(str(e), style="red", markup=False)
        raise typer.Exit(code=2)


def _load_index(file: Path) -> dict[str, int]:
    try:
        return read_word_index(file)
    except GraphFileError as e:
        console.print(str(e), style="red", markup=False)
        raise typer.Exit(code=2)


@app.command()
def play(
    file: Path = typer.Argument(..., help="Word-graph file (id word neighbor_ids...)"),
    method: str | None = typer.Option(None, "--method", "-m", help="Default search method (BFS, DFS, SHORTEST)"),
):
    """Play word ladders interactively."""
    settings = Settings()
    graph = _load(file, words=True)
    index = _load_index(file)

    run_ladder(
        graph=graph,
        index=index,
        console=console,
        end_token=settings.end_token,
        default_method=method or settings.search_method,
    )


@app.command()
def path(
    file: Path = typer.Argument(..., help="Word-graph file (id word neighbor_ids...)"),
    first: str = typer.Argument(...),
    second: str = typer.Argument(...),
    method: str | None = typer.Option(None, "--method", "-m", help="BFS, DFS or SHORTEST"),
):
    """Print the ladder between two words."""
    settings = Settings()
    graph = _load(file, words=True)
    index = _load_index(file)

    try:
        result = find_ladder(graph=graph, index=index, first=first, second=second, method=method or settings.search_method)
    except InvalidArgumentError as e:
        raise typer.BadParameter(str(e), param_hint="--method")

    render_result(console, result, first=first, second=second)
    if result.status == "unknown_word":
        raise typer.Exit(code=2)
    if result.status == "no_path":
        raise typer.Exit(code=1)


@app.command()
def show(
    file: Path = typer.Argument(..., help="Graph file"),
    words: bool = typer.Option(False, "--words", help="Read FILE as a word-graph file"),
):
    """Print each node followed by its neighbors."""
    graph = _load(file, words=words)
    if graph.node_count == 0:
        console.print("Graph is empty.", style="yellow")
        return
    console.print(graph.format_graph(), markup=False)


@app.command()
def stats(
    file: Path = typer.Argument(..., help="Graph file"),
    words: bool = typer.Option(False, "--words", help="Read FILE as a word-graph file"),
):
    """Show node and edge counts."""
    graph = _load(file, words=words)
    isolated = sum(1 for k in graph if not graph.neighbors(k))

    table = Table(title="Graph Stats")
    table.add_column("Metric")
    table.add_column("Value")
    table.add_row("Nodes", str(graph.node_count))
    table.add_row("Edges", str(graph.edge_count))
    table.add_row("Isolated nodes", str(isolated))
    console.print(table)


if __name__ == "__main__":
    app()
