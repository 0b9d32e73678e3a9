"""Path searches over an adjacency callback.

Each function takes ``adjacent(key) -> iterable of neighbor keys`` (in the
order edges were added) plus a source and a target that are known to exist.
All per-search state (visited marks, stack, queue) lives in the call.
"""

from __future__ import annotations

from collections import deque
from typing import Callable, Hashable, Iterable, Iterator

Adjacent = Callable[[Hashable], Iterable[Hashable]]

_ROOT = object()


def depth_first(adjacent: Adjacent, source: Hashable, target: Hashable) -> list[Hashable]:
    """Return the first path depth-first order discovers, or ``[]``.

    Descends into the first unvisited neighbor in insertion order and
    backtracks on dead ends. Not necessarily the shortest path.
    """
    if source == target:
        return [source]

    visited = {source}
    path: list[Hashable] = [source]
    stack: list[Iterator[Hashable]] = [iter(adjacent(source))]

    while stack:
        for nxt in stack[-1]:
            if nxt in visited:
                continue
            visited.add(nxt)
            path.append(nxt)
            if nxt == target:
                return path
            stack.append(iter(adjacent(nxt)))
            break
        else:
            # Exhausted: backtrack.
            stack.pop()
            path.pop()

    return []


def breadth_first(adjacent: Adjacent, source: Hashable, target: Hashable) -> list[Hashable]:
    """Return every dequeued node up to and including ``target``, or ``[]``.

    This is the level-order visitation prefix, not a reconstructed path; use
    :func:`shortest_path` for the fewest-edges route.
    """
    visited = {source}
    queue: deque[Hashable] = deque([source])
    order: list[Hashable] = []

    while queue:
        current = queue.popleft()
        order.append(current)
        if current == target:
            return order

        for nxt in adjacent(current):
            if nxt not in visited:
                visited.add(nxt)
                queue.append(nxt)

    return []


def shortest_path(adjacent: Adjacent, source: Hashable, target: Hashable) -> list[Hashable]:
    if source == target:
        return [source]

    parent: dict[Hashable, object] = {source: _ROOT}
    queue: deque[Hashable] = deque([source])

    while queue:
        current = queue.popleft()
        for nxt in adjacent(current):
            if nxt in parent:
                continue
            parent[nxt] = current
            if nxt == target:
                return _unwind(parent, nxt)
            queue.append(nxt)

    return []


def _unwind(parent: dict[Hashable, object], end: Hashable) -> list[Hashable]:
    out = [end]
    step = parent[end]
    while step is not _ROOT:
        out.append(step)
        step = parent[step]
    out.reverse()
    return out
