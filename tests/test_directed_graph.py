"""Tests for DirectedGraph construction and reverse_graph."""

from dataclasses import FrozenInstanceError

import pytest

from stratagraph import UnknownNodeError
from stratagraph._graph import DirectedGraph, make_graph, neighbors, reverse_graph


class TestMakeGraph:
    """Tests for make_graph and neighbor lookup."""

    def test_neighbors_returns_function_result_unchanged(self) -> None:
        targets = ["b", "b", "a"]
        graph = make_graph(["a", "b"], lambda _: targets)
        assert graph.neighbors("a") is targets
        assert neighbors(graph, "a") is targets

    def test_duplicate_nodes_are_dropped_in_order(self) -> None:
        graph = make_graph(["c", "a", "c", "b", "a"], lambda _: [])
        assert graph.nodes == ("c", "a", "b")

    def test_len_and_contains(self) -> None:
        graph = make_graph(range(3), lambda _: [])
        assert len(graph) == 3
        assert 2 in graph
        assert 3 not in graph

    def test_graph_is_frozen(self) -> None:
        graph = make_graph(["a"], lambda _: [])
        with pytest.raises(FrozenInstanceError):
            graph.nodes = ("b",)  # type: ignore[misc]

    def test_equality_is_identity(self) -> None:
        forward = DirectedGraph.from_edges([("a", "b")])
        backward = DirectedGraph.from_edges([("b", "a")], nodes=["a", "b"])
        assert forward.nodes == backward.nodes
        assert forward != backward
        assert len({forward, backward}) == 2

    def test_works_with_tuples(self) -> None:
        graph = make_graph([("a", 1), ("b", 2)], lambda n: [("b", 2)] if n == ("a", 1) else [])
        assert graph.neighbors(("a", 1)) == [("b", 2)]


class TestNeighborPolicy:
    """Tests for neighbors outside the declared node set."""

    def test_permissive_graph_returns_undeclared_neighbors(self) -> None:
        graph = make_graph(["a"], lambda _: ["x"])
        assert graph.neighbors("a") == ["x"]

    def test_strict_graph_rejects_undeclared_neighbors(self) -> None:
        graph = make_graph(["a"], lambda _: ["x"], strict=True)
        with pytest.raises(UnknownNodeError, match="'x'") as exc_info:
            graph.neighbors("a")
        assert exc_info.value.node == "x"
        assert exc_info.value.source == "a"

    def test_strict_graph_accepts_declared_neighbors(self) -> None:
        graph = DirectedGraph.from_edges([("a", "b")], strict=True)
        assert graph.neighbors("a") == ("b",)

    def test_undeclared_neighbors(self) -> None:
        graph = DirectedGraph.from_mapping({"a": ["b", "x"], "b": ["y"], "c": ["a"]}, nodes=["a", "b", "c"])
        assert graph.undeclared_neighbors() == {"a": ("x",), "b": ("y",)}

    def test_undeclared_neighbors_on_clean_graph(self) -> None:
        graph = DirectedGraph.from_edges([("a", "b")])
        assert graph.undeclared_neighbors() == {}


class TestConstructors:
    """Tests for from_mapping and from_edges."""

    def test_from_mapping_collects_mentioned_nodes(self) -> None:
        graph = DirectedGraph.from_mapping({"a": ["c"], "b": ["d", "a"]})
        assert graph.nodes == ("a", "b", "c", "d")

    def test_from_mapping_missing_keys_have_no_neighbors(self) -> None:
        graph = DirectedGraph.from_mapping({"a": ["b"]})
        assert graph.neighbors("b") == ()

    def test_from_mapping_explicit_nodes(self) -> None:
        graph = DirectedGraph.from_mapping({"a": ["b"]}, nodes=["b", "a", "z"])
        assert graph.nodes == ("b", "a", "z")
        assert graph.neighbors("z") == ()

    def test_from_mapping_copies_adjacency(self) -> None:
        adjacency = {"a": ["b"]}
        graph = DirectedGraph.from_mapping(adjacency)
        adjacency["a"].append("c")
        assert graph.neighbors("a") == ("b",)

    def test_from_edges_keeps_edge_order(self) -> None:
        graph = DirectedGraph.from_edges([("a", "c"), ("a", "b"), ("b", "c")])
        assert graph.nodes == ("a", "c", "b")
        assert graph.neighbors("a") == ("c", "b")

    def test_empty_graph(self) -> None:
        graph = DirectedGraph.from_edges([])
        assert graph.nodes == ()
        assert len(graph) == 0


class TestReverseGraph:
    """Tests for reverse_graph."""

    def test_edges_are_inverted(self) -> None:
        graph = DirectedGraph.from_edges([("a", "b"), ("c", "b"), ("b", "d")])
        rev = reverse_graph(graph)
        assert rev.neighbors("b") == ("a", "c")
        assert rev.neighbors("d") == ("b",)
        assert rev.neighbors("a") == ()

    def test_same_node_set(self) -> None:
        graph = DirectedGraph.from_mapping({"a": ["b"]}, nodes=["a", "b", "lonely"])
        rev = reverse_graph(graph)
        assert rev.nodes == graph.nodes
        assert rev.neighbors("lonely") == ()

    def test_duplicate_edges_collapse(self) -> None:
        graph = make_graph(["a", "b"], lambda n: ["b", "b"] if n == "a" else [])
        assert reverse_graph(graph).neighbors("b") == ("a",)

    def test_self_loop(self) -> None:
        graph = DirectedGraph.from_edges([("a", "a")])
        assert reverse_graph(graph).neighbors("a") == ("a",)

    def test_double_reversal_preserves_neighbor_sets(self) -> None:
        graph = DirectedGraph.from_mapping(
            {"a": ["b", "c", "b"], "b": ["c", "a"], "c": [], "d": ["d", "a"]},
        )
        twice = reverse_graph(reverse_graph(graph))
        for node in graph.nodes:
            assert set(twice.neighbors(node)) == set(graph.neighbors(node))

    def test_reversal_is_eager(self) -> None:
        calls: list[str] = []

        def neighbor_fn(node: str) -> list[str]:
            calls.append(node)
            return ["b"] if node == "a" else []

        graph = make_graph(["a", "b"], neighbor_fn)
        rev = reverse_graph(graph)
        assert calls == ["a", "b"]
        rev.neighbors("b")
        rev.neighbors("a")
        assert calls == ["a", "b"]

    def test_strictness_is_preserved(self) -> None:
        graph = DirectedGraph.from_edges([("a", "b")], strict=True)
        assert reverse_graph(graph).strict
