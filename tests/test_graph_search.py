import unittest

from wordladder.graph import Graph, InvalidArgumentError
from wordladder.graph.search import breadth_first, depth_first, shortest_path


def _chain_with_isolated() -> Graph:
    g = Graph()
    g.add_nodes([1, 2, 3, 4, 5], [None] * 5)
    g.add_edge(1, 2)
    g.add_edge(2, 3)
    g.add_edge(3, 4)
    return g


def _diamond() -> Graph:
    g = Graph()
    g.add_edge("A", "B")
    g.add_edge("A", "C")
    g.add_edge("B", "D")
    g.add_edge("C", "D")
    return g


class TestChain(unittest.TestCase):
    def test_bfs_and_dfs_follow_chain(self):
        g = _chain_with_isolated()
        self.assertEqual(g.bfs(1, 4), [1, 2, 3, 4])
        self.assertEqual(g.dfs(1, 4), [1, 2, 3, 4])

    def test_isolated_target_has_no_path(self):
        g = _chain_with_isolated()
        self.assertEqual(g.bfs(1, 5), [])
        self.assertEqual(g.dfs(1, 5), [])
        self.assertEqual(g.shortest_path(1, 5), [])

    def test_same_node(self):
        g = _chain_with_isolated()
        for key in (1, 5):
            self.assertEqual(g.bfs(key, key), [key])
            self.assertEqual(g.dfs(key, key), [key])
            self.assertEqual(g.shortest_path(key, key), [key])


class TestBranching(unittest.TestCase):
    def test_dfs_descends_first_added_neighbor(self):
        self.assertEqual(_diamond().dfs("A", "D"), ["A", "B", "D"])

    def test_bfs_returns_visitation_prefix(self):
        self.assertEqual(_diamond().bfs("A", "D"), ["A", "B", "C", "D"])

    def test_shortest_path_reconstructs_route(self):
        self.assertEqual(_diamond().shortest_path("A", "D"), ["A", "B", "D"])

    def test_dfs_backtracks_from_dead_end(self):
        g = Graph()
        g.add_edge("A", "B")
        g.add_edge("B", "E")
        g.add_edge("A", "C")
        g.add_edge("C", "D")
        self.assertEqual(g.dfs("A", "D"), ["A", "C", "D"])
        self.assertEqual(g.bfs("A", "D"), ["A", "B", "C", "E", "D"])
        self.assertEqual(g.shortest_path("A", "D"), ["A", "C", "D"])

    def test_dfs_is_not_shortest(self):
        g = Graph()
        g.add_edges(1, [2, 4])
        g.add_edge(2, 3)
        g.add_edge(3, 4)
        self.assertEqual(g.dfs(1, 4), [1, 2, 3, 4])
        self.assertEqual(g.shortest_path(1, 4), [1, 4])


class TestMissingNodes(unittest.TestCase):
    def test_missing_keys_return_empty_without_mutation(self):
        g = _diamond()
        before = g.adjacency()
        for method in (g.bfs, g.dfs, g.shortest_path):
            self.assertEqual(method("A", "nope"), [])
            self.assertEqual(method("nope", "A"), [])
            self.assertEqual(method("nope", "nope"), [])
        self.assertEqual(g.adjacency(), before)
        self.assertNotIn("nope", g)


class TestSearchDispatch(unittest.TestCase):
    def test_method_names_case_insensitive(self):
        g = _diamond()
        self.assertEqual(g.search("bfs", "A", "D"), ["A", "B", "C", "D"])
        self.assertEqual(g.search(" DFS ", "A", "D"), ["A", "B", "D"])
        self.assertEqual(g.search("Shortest", "A", "D"), ["A", "B", "D"])

    def test_unknown_method(self):
        with self.assertRaises(InvalidArgumentError):
            _diamond().search("astar", "A", "D")


class TestDeepGraph(unittest.TestCase):
    def test_dfs_on_long_chain_does_not_recurse(self):
        g = Graph()
        n = 20_000
        for i in range(n - 1):
            g.add_edge(i, i + 1)
        path = g.dfs(0, n - 1)
        self.assertEqual(len(path), n)
        self.assertEqual(path[0], 0)
        self.assertEqual(path[-1], n - 1)


class TestSearchFunctions(unittest.TestCase):
    def test_functions_accept_plain_adjacency(self):
        adj = {"a": ["b", "c"], "b": ["a"], "c": ["a", "d"], "d": ["c"]}
        self.assertEqual(depth_first(adj.__getitem__, "a", "d"), ["a", "c", "d"])
        self.assertEqual(breadth_first(adj.__getitem__, "a", "d"), ["a", "b", "c", "d"])
        self.assertEqual(shortest_path(adj.__getitem__, "a", "d"), ["a", "c", "d"])


if __name__ == "__main__":
    unittest.main()
