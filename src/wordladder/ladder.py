from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from rich.console import Console

from .graph import Graph, InvalidArgumentError
from .logs import get_logger


log = get_logger(__name__)


@dataclass(frozen=True)
class LadderResult:
    # "ok" | "unknown_word" | "no_path"
    status: str
    words: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status == "ok"


def find_ladder(
    *,
    graph: Graph,
    index: dict[str, int],
    first: str,
    second: str,
    method: str,
) -> LadderResult:
    """Look both words up, search between their ids and map the path back to words.

    Raises InvalidArgumentError for an unknown search method.
    """
    missing = [w for w in (first, second) if w not in index or index[w] not in graph]
    if missing:
        log.debug("search.missing_node", method=method, missing=missing)
        return LadderResult(status="unknown_word", missing=missing)

    path = graph.search(method, index[first], index[second])
    if not path:
        log.debug("search.no_path", method=method, first=first, second=second)
        return LadderResult(status="no_path")
    return LadderResult(status="ok", words=[node_label(graph, key) for key in path])


def node_label(graph: Graph, key) -> str:
    """The node's word, or ``<key>`` for nodes created only as edge endpoints."""
    word = graph.payload(key)
    return f"<{key}>" if word is None else str(word)


def render_result(console: Console, result: LadderResult, *, first: str, second: str) -> None:
    if result.status == "unknown_word":
        console.print(f"Word not found in the graph: {', '.join(result.missing)}", style="yellow", markup=False)
    elif result.status == "no_path":
        console.print(f"There is no path between {first} and {second}", style="yellow", markup=False)
    else:
        console.print(" -> ".join(result.words), markup=False)


def run_ladder(
    *,
    graph: Graph,
    index: dict[str, int],
    console: Console,
    read_line: Callable[[], str] = input,
    end_token: str = "END",
    default_method: str = "BFS",
) -> int:
    """Interactive loop: ask for two words and a method, print the ladder.

    Stops on ``end_token`` at the continue prompt or at end of input.
    Returns the number of rounds played.
    """
    rounds = 0

    def ask(prompt: str) -> str:
        console.print(prompt, markup=False)
        return read_line().strip()

    console.print("WELCOME TO WORD LADDERS!", style="bold", markup=False)
    try:
        while ask(f"Type '{end_token}' to exit the program (Enter to play):") != end_token:
            first = ask("Enter the first word:")
            second = ask("Enter the second word:")
            method = ask(f"Enter the search method (BFS, DFS or SHORTEST) [{default_method}]:") or default_method

            try:
                result = find_ladder(graph=graph, index=index, first=first, second=second, method=method)
            except InvalidArgumentError as e:
                console.print(str(e), style="red", markup=False)
                continue

            rounds += 1
            log.debug("ladder.round", first=first, second=second, method=method, status=result.status)
            render_result(console, result, first=first, second=second)
    except EOFError:
        pass

    console.print("Goodbye!", markup=False)
    return rounds
