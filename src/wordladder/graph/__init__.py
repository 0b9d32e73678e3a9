"""Undirected, unweighted graph container with DFS/BFS path search.

Nodes are addressed by key and carry an optional payload. Edges may introduce
previously unseen nodes. Searches return key sequences; an empty list means
one of the endpoints is missing or no path exists.
"""

from .store import Graph, InvalidArgumentError, Node

__all__ = ["Graph", "InvalidArgumentError", "Node"]
