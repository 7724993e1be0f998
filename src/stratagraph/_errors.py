"""Exceptions raised by stratagraph."""

from collections.abc import Hashable, Iterable


class StratagraphError(Exception):
    """Base class for stratagraph errors."""


class FixedPointOverflowError(StratagraphError, OverflowError):
    """Raised when a fixed-point iteration exhausts its bound without converging."""

    def __init__(self, max_iterations: int) -> None:
        self.max_iterations = max_iterations
        super().__init__(f"Fixed point overflow: no convergence after {max_iterations} iterations")


class NodeSetMismatchError(StratagraphError, ValueError):
    """Raised when two graphs that must share a node set do not."""

    def __init__(self, only_in_first: Iterable[Hashable], only_in_second: Iterable[Hashable]) -> None:
        self.only_in_first = frozenset(only_in_first)
        self.only_in_second = frozenset(only_in_second)
        super().__init__(
            "Graphs have different node sets: "
            f"only in first {sorted(map(repr, self.only_in_first))}, "
            f"only in second {sorted(map(repr, self.only_in_second))}",
        )


class UnknownNodeError(StratagraphError, KeyError):
    """Raised when an edge points at a node outside the declared node set."""

    def __init__(self, node: Hashable, source: Hashable) -> None:
        self.node = node
        self.source = source
        super().__init__(f"Node {node!r} (neighbor of {source!r}) is not in the graph's node set")

    def __str__(self) -> str:
        return str(self.args[0])


class GraphDocumentError(StratagraphError):
    """Raised when a graph document cannot be read or validated."""
