"""Strongly connected components."""

import logging
from collections.abc import Hashable

from ._directed_graph import DirectedGraph, reverse_graph
from ._traversal import VisitState, post_ordered_nodes, post_ordered_visit

logger = logging.getLogger(__name__)


def scc[T: Hashable](graph: DirectedGraph[T]) -> list[frozenset[T]]:
    """Compute the strongly connected components of a graph (Kosaraju).

    The graph is walked once in post-order, then the reversed graph is walked
    from each node in reverse post-order that has not been claimed yet. Each
    such walk yields exactly one component.

    Returns:
        Components in discovery order. Every declared node appears in exactly
        one component. The order depends only on the node order and the
        neighbor order, so it is reproducible.

    Example:
        >>> [sorted(c) for c in scc(DirectedGraph.from_edges([("a", "b"), ("b", "a"), ("b", "c")]))]
        [['a', 'b'], ['c']]

    """
    order = reversed(post_ordered_nodes(graph))
    rev = reverse_graph(graph)

    visited: set[T] = set()
    components: list[frozenset[T]] = []
    for node in order:
        if node in visited:
            continue
        state: VisitState[T] = (visited, [])
        visited, members = post_ordered_visit(rev, node, state)
        components.append(frozenset(members))

    logger.debug(f"Found {len(components)} strongly connected components in {len(graph)} nodes")
    return components


def self_recursive_sets[T: Hashable](graph: DirectedGraph[T]) -> list[frozenset[T]]:
    """Return the components of a graph that are self-recursive.

    A component is self-recursive when it has more than one node, or when its
    single node is its own neighbor.
    """

    def is_recursive(component: frozenset[T]) -> bool:
        if len(component) > 1:
            return True
        (node,) = component
        return node in graph.neighbors(node)

    return [component for component in scc(graph) if is_recursive(component)]


def has_cycle[T: Hashable](graph: DirectedGraph[T]) -> bool:
    """Check if the graph contains a cycle, self-loops included."""
    return bool(self_recursive_sets(graph))
