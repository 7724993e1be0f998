"""Directed graph analysis: strongly connected components and dependency strata."""

__all__ = [
    "DirectedGraph",
    "FixedPointOverflowError",
    "GraphDocument",
    "GraphDocumentError",
    "NodeSetMismatchError",
    "StratagraphError",
    "UnknownNodeError",
    "dependency_list",
    "fixed_point",
    "has_cycle",
    "load_graph_document",
    "make_graph",
    "neighbors",
    "post_ordered_nodes",
    "reverse_graph",
    "scc",
    "self_recursive_sets",
    "stratification_list",
]

from ._errors import (
    FixedPointOverflowError,
    GraphDocumentError,
    NodeSetMismatchError,
    StratagraphError,
    UnknownNodeError,
)
from ._graph import (
    DirectedGraph,
    dependency_list,
    fixed_point,
    has_cycle,
    make_graph,
    neighbors,
    post_ordered_nodes,
    reverse_graph,
    scc,
    self_recursive_sets,
    stratification_list,
)
from ._io import GraphDocument, load_graph_document
