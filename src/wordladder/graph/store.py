from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Hashable, Iterable, Iterator, Sequence

from . import search as _search


class InvalidArgumentError(ValueError):
    pass


@dataclass(eq=False)
class Node:
    key: Hashable
    payload: Any = None
    # Insertion-ordered set of neighbor keys (dict keys keep order).
    neighbors: dict[Hashable, None] = field(default_factory=dict)


class Graph:
    """Undirected, unweighted graph keyed by hashable node keys.

    Nodes live in one insertion-ordered mapping; each node owns its payload and
    the keys of its neighbors. Misses (unknown key, duplicate insert, no path)
    are reported through return values, never exceptions.
    """

    def __init__(self) -> None:
        self._nodes: dict[Hashable, Node] = {}

    # -- nodes ---------------------------------------------------------------

    def add_node(self, key: Hashable, payload: Any = None) -> bool:
        if key in self._nodes:
            return False
        self._nodes[key] = Node(key=key, payload=payload)
        return True

    def add_nodes(self, keys: Sequence[Hashable], payloads: Sequence[Any]) -> bool:
        if len(keys) != len(payloads):
            raise InvalidArgumentError(
                f"keys and payloads must have the same length ({len(keys)} != {len(payloads)})"
            )

        added = 0
        for key, payload in zip(keys, payloads):
            if self.add_node(key, payload):
                added += 1
        return added == len(keys)

    def remove_node(self, key: Hashable) -> bool:
        node = self._nodes.pop(key, None)
        if node is None:
            return False

        remaining = len(node.neighbors)
        for other in self._nodes.values():
            if key in other.neighbors:
                del other.neighbors[key]
                remaining -= 1
        return remaining == 0

    def remove_nodes(self, keys: Iterable[Hashable]) -> bool:
        ok = True
        for key in keys:
            if not self.remove_node(key):
                ok = False
        return ok

    def find_node(self, key: Hashable) -> Node | None:
        return self._nodes.get(key)

    def payload(self, key: Hashable) -> Any:
        node = self._nodes.get(key)
        if node is None:
            raise KeyError(key)
        return node.payload

    def set_payload(self, key: Hashable, value: Any) -> bool:
        node = self._nodes.get(key)
        if node is None:
            return False
        node.payload = value
        return True

    def payloads(self, keys: Iterable[Hashable]) -> list[Any]:
        """Map a key sequence (e.g. a search result) to payloads, same order."""
        return [self.payload(k) for k in keys]

    def neighbors(self, key: Hashable) -> list[Hashable]:
        node = self._nodes.get(key)
        if node is None:
            return []
        return list(node.neighbors)

    def keys(self) -> list[Hashable]:
        return list(self._nodes)

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return sum(len(n.neighbors) for n in self._nodes.values()) // 2

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, key: object) -> bool:
        try:
            return key in self._nodes
        except TypeError:
            # Unhashable keys can never be stored.
            return False

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count}, edges={self.edge_count})"

    # -- edges ---------------------------------------------------------------

    def add_edge(self, source: Hashable, target: Hashable) -> bool:
        self.add_node(source)
        self.add_node(target)

        if source == target:
            return False

        a = self._nodes[source]
        b = self._nodes[target]
        if target in a.neighbors:
            return False

        a.neighbors[target] = None
        b.neighbors[source] = None
        return True

    def add_edges(self, source: Hashable, targets: Iterable[Hashable]) -> bool:
        ok = True
        for target in targets:
            if not self.add_edge(source, target):
                ok = False
        return ok

    def has_edge(self, a: Hashable, b: Hashable) -> bool:
        if a not in self or b not in self:
            return False
        return b in self._nodes[a].neighbors

    # -- search --------------------------------------------------------------

    def dfs(self, source: Hashable, target: Hashable) -> list[Hashable]:
        return self._run(_search.depth_first, source, target)

    def bfs(self, source: Hashable, target: Hashable) -> list[Hashable]:
        return self._run(_search.breadth_first, source, target)

    def shortest_path(self, source: Hashable, target: Hashable) -> list[Hashable]:
        return self._run(_search.shortest_path, source, target)

    def search(self, method: str, source: Hashable, target: Hashable) -> list[Hashable]:
        name = method.strip().upper()
        if name == "DFS":
            return self.dfs(source, target)
        if name == "BFS":
            return self.bfs(source, target)
        if name == "SHORTEST":
            return self.shortest_path(source, target)
        raise InvalidArgumentError(f"Unknown search method: {method!r} (expected BFS, DFS or SHORTEST)")

    def _run(self, algo, source: Hashable, target: Hashable) -> list[Hashable]:
        if source not in self or target not in self:
            return []
        return algo(self._adjacent, source, target)

    def _adjacent(self, key: Hashable) -> Iterable[Hashable]:
        return self._nodes[key].neighbors

    # -- diagnostics ---------------------------------------------------------

    def adjacency(self) -> list[list[Hashable]]:
        return [[key, *node.neighbors] for key, node in self._nodes.items()]

    def format_graph(self) -> str:
        return "\n".join(" ".join(str(k) for k in row) for row in self.adjacency())
