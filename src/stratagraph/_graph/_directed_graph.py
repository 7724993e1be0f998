"""Immutable directed graph over opaque node identifiers."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field

from stratagraph._errors import UnknownNodeError


@dataclass(frozen=True, slots=True, eq=False)
class DirectedGraph[T: Hashable]:
    """A directed graph given by a node set and a neighbor function.

    The graph does not own edge storage: ``neighbor_fn`` maps a node to the
    ordered sequence of its out-neighbors, so edges may be materialized or
    computed on demand. An edge ``a -> b`` conventionally means "a depends on b".

    Neighbors outside the declared node set are accepted by default and are
    simply traversed. With ``strict=True`` every neighbor lookup checks that
    the returned nodes are declared and raises ``UnknownNodeError`` otherwise.

    Graphs compare and hash by identity, since two neighbor functions cannot
    be compared for equal edges.

    Attributes:
        nodes: The declared node set, in iteration order, without duplicates.
        neighbor_fn: Function from a node to its out-neighbors.
        strict: Whether neighbor lookups reject undeclared nodes.

    """

    nodes: tuple[T, ...]
    neighbor_fn: Callable[[T], Sequence[T]]
    strict: bool = False
    _node_set: frozenset[T] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        nodes = tuple(dict.fromkeys(self.nodes))
        object.__setattr__(self, "nodes", nodes)
        object.__setattr__(self, "_node_set", frozenset(nodes))

    @classmethod
    def from_mapping(
        cls,
        adjacency: Mapping[T, Iterable[T]],
        nodes: Iterable[T] | None = None,
        *,
        strict: bool = False,
    ) -> DirectedGraph[T]:
        """Build a graph from an adjacency mapping.

        Args:
            adjacency: Mapping from node to its out-neighbors. Nodes missing
                from the mapping have no out-edges.
            nodes: The node set. Defaults to every node mentioned in
                ``adjacency``, keys first, in order of appearance.
            strict: Whether neighbor lookups reject undeclared nodes.

        Returns:
            A new DirectedGraph instance.

        Example:
            >>> graph = DirectedGraph.from_mapping({"a": ["b"], "b": ["c"]})
            >>> graph.nodes
            ('a', 'b', 'c')

        """
        table: dict[T, tuple[T, ...]] = {node: tuple(targets) for node, targets in adjacency.items()}
        if nodes is None:
            mentioned = dict.fromkeys(table)
            for targets in table.values():
                mentioned.update(dict.fromkeys(targets))
            nodes = mentioned

        def lookup(node: T) -> tuple[T, ...]:
            return table.get(node, ())

        return cls(nodes=tuple(nodes), neighbor_fn=lookup, strict=strict)

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[tuple[T, T]],
        nodes: Iterable[T] | None = None,
        *,
        strict: bool = False,
    ) -> DirectedGraph[T]:
        """Build a graph from a list of (source, target) edges.

        Args:
            edges: Edges ``(a, b)`` meaning "a depends on b".
            nodes: The node set. Defaults to every edge endpoint.
            strict: Whether neighbor lookups reject undeclared nodes.

        Returns:
            A new DirectedGraph instance.

        """
        adjacency: dict[T, list[T]] = {}
        for src, dst in edges:
            adjacency.setdefault(src, []).append(dst)
            adjacency.setdefault(dst, [])
        return cls.from_mapping(adjacency, nodes, strict=strict)

    def neighbors(self, node: T) -> Sequence[T]:
        """Get the out-neighbors of a node, exactly as the neighbor function returns them.

        Raises:
            UnknownNodeError: If the graph is strict and a neighbor is undeclared.

        """
        result = self.neighbor_fn(node)
        if self.strict:
            for target in result:
                if target not in self._node_set:
                    raise UnknownNodeError(target, node)
        return result

    def undeclared_neighbors(self) -> dict[T, tuple[T, ...]]:
        """Find edges that leave the declared node set.

        Returns:
            Mapping from each declared node to its undeclared neighbors. Nodes
            whose neighbors are all declared are omitted.

        """
        found: dict[T, tuple[T, ...]] = {}
        for node in self.nodes:
            outside = tuple(target for target in self.neighbor_fn(node) if target not in self._node_set)
            if outside:
                found[node] = outside
        return found

    def __len__(self) -> int:
        """Return the number of declared nodes."""
        return len(self.nodes)

    def __contains__(self, node: object) -> bool:
        """Check if a node is declared in the graph."""
        return node in self._node_set


def make_graph[T: Hashable](
    nodes: Iterable[T],
    neighbor_fn: Callable[[T], Sequence[T]],
    *,
    strict: bool = False,
) -> DirectedGraph[T]:
    """Create a directed graph from a node collection and a neighbor function."""
    return DirectedGraph(nodes=tuple(nodes), neighbor_fn=neighbor_fn, strict=strict)


def neighbors[T: Hashable](graph: DirectedGraph[T], node: T) -> Sequence[T]:
    """Get the neighbors of a node."""
    return graph.neighbors(node)


def reverse_graph[T: Hashable](graph: DirectedGraph[T]) -> DirectedGraph[T]:
    """Return a graph with the same nodes and every edge inverted.

    The reversed adjacency is computed eagerly in one pass over the edges.
    Predecessors are kept in order of discovery with duplicates collapsed.

    Example:
        >>> graph = DirectedGraph.from_edges([("a", "b"), ("c", "b")])
        >>> reverse_graph(graph).neighbors("b")
        ('a', 'c')

    """
    incoming: dict[T, dict[T, None]] = {}
    for node in graph.nodes:
        for target in graph.neighbors(node):
            incoming.setdefault(target, {})[node] = None

    table = {node: tuple(sources) for node, sources in incoming.items()}

    def lookup(node: T) -> tuple[T, ...]:
        return table.get(node, ())

    return DirectedGraph(nodes=graph.nodes, neighbor_fn=lookup, strict=graph.strict)
