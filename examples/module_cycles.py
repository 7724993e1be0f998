"""Find import cycles in a set of modules and order the acyclic remainder."""

import stratagraph as sg

imports = {
    "app": ["models", "views"],
    "views": ["models", "forms"],
    "forms": ["views"],
    "models": ["db"],
    "db": [],
}

graph = sg.DirectedGraph.from_mapping(imports)

for component in sg.self_recursive_sets(graph):
    print("cycle:", sorted(component))

# Collapse every component into one node so the condensation is acyclic.
components = sg.scc(graph)
owner = {node: index for index, component in enumerate(components) for node in component}
condensed = sg.make_graph(
    range(len(components)),
    lambda index: sorted({owner[t] for n in components[index] for t in graph.neighbors(n)} - {index}),
)

for level, stratum in enumerate(sg.dependency_list(condensed)):
    print(level, [sorted(components[index]) for index in sorted(stratum)])
