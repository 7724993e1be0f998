"""Graph module providing directed graph analysis.

This module contains:
- DirectedGraph[T]: A generic, immutable directed graph
- reverse_graph, post_ordered_nodes: Graph transforms and traversal
- scc, self_recursive_sets: Strongly connected component analysis
- fixed_point, dependency_list, stratification_list: Leveled orderings
"""

from ._components import has_cycle, scc, self_recursive_sets
from ._directed_graph import DirectedGraph, make_graph, neighbors, reverse_graph
from ._fixed_point import fixed_point
from ._stratify import dependency_list, stratification_list
from ._traversal import post_ordered_nodes, post_ordered_visit

__all__ = [
    "DirectedGraph",
    "dependency_list",
    "fixed_point",
    "has_cycle",
    "make_graph",
    "neighbors",
    "post_ordered_nodes",
    "post_ordered_visit",
    "reverse_graph",
    "scc",
    "self_recursive_sets",
    "stratification_list",
]
