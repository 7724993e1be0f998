"""Depth-first post-order traversal."""

from collections.abc import Hashable, Iterator

from ._directed_graph import DirectedGraph

type VisitState[T] = tuple[set[T], list[T]]


def post_ordered_visit[T: Hashable](
    graph: DirectedGraph[T],
    start: T,
    state: VisitState[T],
) -> VisitState[T]:
    """Walk the graph depth-first from ``start``, appending nodes in post-order.

    A node is appended only after every node reachable from it through
    not-yet-visited nodes has been appended. Visiting an already visited node
    leaves the state unchanged.

    The walk uses an explicit stack of ``(node, neighbor iterator)`` frames, so
    deep graphs do not hit the recursion limit. Neighbors are explored in the
    order the neighbor function returns them, which keeps the output identical
    to the recursive formulation.

    Args:
        graph: The graph to walk.
        start: The node to start from.
        state: The ``(visited, accumulator)`` pair carried between walks. The
            set and list are updated in place; pass fresh ones to keep the
            originals intact.

    Returns:
        The same ``(visited, accumulator)`` pair, updated.

    """
    visited, acc = state
    if start in visited:
        return state

    visited.add(start)
    stack: list[tuple[T, Iterator[T]]] = [(start, iter(graph.neighbors(start)))]
    while stack:
        node, pending = stack[-1]
        for child in pending:
            if child not in visited:
                visited.add(child)
                stack.append((child, iter(graph.neighbors(child))))
                break
        else:
            stack.pop()
            acc.append(node)

    return visited, acc


def post_ordered_nodes[T: Hashable](graph: DirectedGraph[T]) -> list[T]:
    """Return the nodes of the whole graph in post-order.

    The walk is started from every declared node in order, sharing one visited
    set, so subtrees of earlier start nodes come first.

    Example:
        >>> post_ordered_nodes(DirectedGraph.from_edges([("a", "b"), ("b", "c")]))
        ['c', 'b', 'a']

    """
    state: VisitState[T] = (set(), [])
    for node in graph.nodes:
        state = post_ordered_visit(graph, node, state)
    return state[1]
