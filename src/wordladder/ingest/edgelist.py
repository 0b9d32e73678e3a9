from __future__ import annotations

import os
import re
from pathlib import Path

from ..graph import Graph
from ..logs import get_logger


log = get_logger(__name__)

# Runs of letters/digits; anything else (punctuation, "_", spaces) separates words.
_WORD_RE = re.compile(r"[^\W_]+")


class GraphFileError(RuntimeError):
    pass


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise GraphFileError(f"Cannot read graph file {p}: {e}") from e
    return text.splitlines()


def alphanumeric_tokens(line: str) -> list[str]:
    """Split a line into alphanumeric words: "a-b, c" -> ["a", "b", "c"]."""
    return _WORD_RE.findall(line)


def read_edge_list(path: str | os.PathLike[str]) -> Graph:
    """Build a string-keyed graph from an adjacency-list text file.

    Each line is ``node neighbor neighbor ...``; the first word is connected to
    every other word on the line. Payloads stay ``None``.
    """
    graph = Graph()
    lines = read_lines(path)

    for line in lines:
        words = alphanumeric_tokens(line)
        if not words:
            continue
        graph.add_node(words[0])
        graph.add_edges(words[0], words[1:])

    log.debug("edgelist.loaded", path=str(path), lines=len(lines), nodes=graph.node_count, edges=graph.edge_count)
    return graph
