"""Word-graph files: ``id word neighbor_id neighbor_id ...`` per line.

Ids are integers and become graph keys; the word becomes the node payload.
The same file also yields the word -> id index the ladder uses to turn user
input into keys.
"""

from __future__ import annotations

import os

from ..graph import Graph
from ..logs import get_logger
from .edgelist import GraphFileError, read_lines


log = get_logger(__name__)


def _parse_id(raw: str, *, path: str | os.PathLike[str], lineno: int) -> int:
    try:
        return int(raw)
    except ValueError as e:
        raise GraphFileError(f"{path}:{lineno}: expected an integer node id, got {raw!r}") from e


def read_word_graph(path: str | os.PathLike[str]) -> Graph:
    graph = Graph()

    for lineno, line in enumerate(read_lines(path), start=1):
        parts = line.split()
        if not parts:
            continue

        node_id = _parse_id(parts[0], path=path, lineno=lineno)
        neighbor_ids = [_parse_id(p, path=path, lineno=lineno) for p in parts[2:]]

        graph.add_node(node_id)
        graph.add_edges(node_id, neighbor_ids)
        if len(parts) >= 2:
            graph.set_payload(node_id, parts[1])

    log.debug("words.graph_loaded", path=str(path), nodes=graph.node_count, edges=graph.edge_count)
    return graph


def read_word_index(path: str | os.PathLike[str]) -> dict[str, int]:
    """Return {word: node_id}; a repeated word keeps the last id seen."""
    index: dict[str, int] = {}
    for lineno, line in enumerate(read_lines(path), start=1):
        parts = line.split()
        if len(parts) < 2:
            continue
        index[parts[1]] = _parse_id(parts[0], path=path, lineno=lineno)
    return index
