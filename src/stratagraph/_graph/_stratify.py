"""Leveled dependency orderings."""

from collections.abc import Hashable, Mapping

from stratagraph._errors import NodeSetMismatchError, UnknownNodeError

from ._directed_graph import DirectedGraph
from ._fixed_point import fixed_point


def _max_level[T: Hashable](levels: Mapping[T, int], graph: DirectedGraph[T], node: T) -> int:
    """Highest level among the neighbors of ``node``, or -1 if it has none."""
    highest = -1
    for target in graph.neighbors(node):
        try:
            level = levels[target]
        except KeyError:
            raise UnknownNodeError(target, node) from None
        highest = max(highest, level)
    return highest


def _fold_into_sets[T: Hashable](levels: Mapping[T, int]) -> list[frozenset[T]]:
    buckets: list[list[T]] = [[] for _ in range(max(levels.values(), default=0) + 1)]
    for node, level in levels.items():
        buckets[level].append(node)
    return [frozenset(bucket) for bucket in buckets]


def dependency_list[T: Hashable](graph: DirectedGraph[T]) -> list[frozenset[T]]:
    """Group the nodes of an acyclic graph into dependency strata.

    Similar to a topological sort, but returns sets: stratum 0 holds nodes
    without dependencies and every node sits one stratum above its latest
    dependency. An edge ``a -> b`` means "a depends on b".

    Raises:
        FixedPointOverflowError: If the graph has a cycle.
        UnknownNodeError: If an edge leaves the node set.

    Example:
        >>> dependency_list(DirectedGraph.from_edges([("a", "b"), ("b", "c")]))
        [frozenset({'c'}), frozenset({'b'}), frozenset({'a'})]

    """

    def step(levels: dict[T, int]) -> dict[T, int]:
        return {node: 1 + _max_level(levels, graph, node) for node in levels}

    levels = fixed_point(dict.fromkeys(graph.nodes, 0), step, len(graph.nodes) + 1)
    return _fold_into_sets(levels)


def stratification_list[T: Hashable](dependencies: DirectedGraph[T], hints: DirectedGraph[T]) -> list[frozenset[T]]:
    """Group nodes into strata using a strict and a weak dependency graph.

    ``dependencies`` must be acyclic and behaves as in ``dependency_list``: an edge
    ``a -> b`` puts ``a`` strictly above ``b``. ``hints`` may have cycles; an
    edge ``a -> b`` there only requires ``a`` to be at least as high as ``b``.

    Raises:
        NodeSetMismatchError: If the graphs do not share the same node set.
        FixedPointOverflowError: If ``dependencies`` has a cycle.
        UnknownNodeError: If an edge leaves the node set.

    """
    dependency_nodes = frozenset(dependencies.nodes)
    hint_nodes = frozenset(hints.nodes)
    if dependency_nodes != hint_nodes:
        raise NodeSetMismatchError(dependency_nodes - hint_nodes, hint_nodes - dependency_nodes)

    def step(levels: dict[T, int]) -> dict[T, int]:
        return {
            node: max(1 + _max_level(levels, dependencies, node), _max_level(levels, hints, node))
            for node in levels
        }

    levels = fixed_point(dict.fromkeys(dependencies.nodes, 0), step, len(dependencies.nodes) + 1)
    return _fold_into_sets(levels)
