"""
Compare the Prim MST of an edge-list file with networkx (Kruskal)
"""

import sys

import networkx as nx

from graph import Graph


def check_mst(path, source=0):
    """Return (prim_weight, networkx_weight, is_tree) for the file at path"""
    graph = Graph.from_file(path)
    in_mst = graph.prim(source)
    mst_edges = graph.mst_edges()

    # Reference MST of the component holding source
    G = graph.to_networkx()
    component = G.subgraph(nx.node_connected_component(G, source))
    reference = nx.minimum_spanning_tree(component, weight="weight")
    expected = sum(d["weight"] for _, _, d in reference.edges(data=True))

    tree = nx.Graph()
    tree.add_nodes_from(in_mst)
    tree.add_weighted_edges_from(mst_edges)
    is_tree = nx.is_tree(tree) and len(mst_edges) == len(in_mst) - 1

    return graph.mst_weight(), expected, is_tree


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    path = argv[0] if argv else "test_graph_data/simple_graph.txt"

    weight, expected, is_tree = check_mst(path)
    print(f"Prim MST weight: {weight}")
    print(f"NetworkX MST weight: {expected}")
    print(f"Predecessor edges form a tree: {is_tree}")
    print(f"Status: {'✓ CORRECT' if weight == expected and is_tree else '✗ INCORRECT'}")
    return 0 if weight == expected and is_tree else 1


if __name__ == "__main__":
    sys.exit(main())
