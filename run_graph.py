"""
Run BFS and Prim's algorithm on an edge-list file and report the results
"""

import json
import logging
import os
import sys

import networkx as nx

from graph import INFINITY, Graph


def _json_distance(distance):
    return None if distance == INFINITY else distance


def run_bfs(graph, source):
    graph.bfs(source)
    graph.print(f"BFS from node {source}")

    result = {
        "distances": [_json_distance(d) for d in graph.distances()],
        "predecessors": graph.predecessors(),
        "is_binary": graph.is_binary(),
        "is_complete_binary": graph.is_complete_binary(),
    }
    print(f"Is binary tree: {result['is_binary']}")
    print(f"Is complete binary tree: {result['is_complete_binary']}")
    return result


def run_prim(graph, source):
    graph.prim(source)
    graph.print_mst()

    mst_edges = graph.mst_edges()
    total_weight = graph.mst_weight()

    # Verify with NetworkX on the component reached from source
    G = graph.to_networkx()
    component = G.subgraph(nx.node_connected_component(G, source))
    nx_mst = nx.minimum_spanning_tree(component, weight="weight")
    nx_weight = sum(d["weight"] for _, _, d in nx_mst.edges(data=True))
    is_correct = total_weight == nx_weight

    print(f"MST Weight: {total_weight}")
    print(f"MST Edges Found: {len(mst_edges)}/{component.number_of_nodes() - 1} expected")
    print(f"NetworkX MST Weight: {nx_weight}")
    print(f"Status: {'✓ CORRECT' if is_correct else '✗ INCORRECT'}")

    return {
        "mst_edges": mst_edges,
        "mst_weight": total_weight,
        "networkx_weight": nx_weight,
        "is_correct": is_correct,
        "is_binary": graph.is_binary(),
        "is_complete_binary": graph.is_complete_binary(),
    }


def run(path, source=0, visualize=False, output=None):
    """Load path, run both algorithms from source and return a result dict"""
    print("=" * 70)
    print(f"Graph: {path}")
    print("=" * 70)

    graph = Graph.from_file(path)
    graph.print("Graph")
    print(f"Number of nodes: {graph.tot_nodes}")
    print(f"Number of edges: {graph.tot_edges}")

    if source not in graph:
        raise ValueError(f"Source node {source} is not in the graph")

    print("\n" + "=" * 70)
    bfs_result = run_bfs(graph, source)
    if visualize:
        base = os.path.splitext(output or path)[0]
        graph.visualize(f"{base}_bfs.png", title=f"BFS Tree from {source}")

    print("\n" + "=" * 70)
    prim_result = run_prim(graph, source)
    if visualize:
        base = os.path.splitext(output or path)[0]
        graph.visualize(f"{base}_mst.png", title="MST (Prim)")

    result = {
        "input": str(path),
        "source": source,
        "num_nodes": graph.tot_nodes,
        "num_edges": graph.tot_edges,
        "bfs": bfs_result,
        "prim": prim_result,
    }

    if output:
        with open(output, "w") as f:
            json.dump(result, f, indent=2)
        print(f"\nResults saved to: {output}")

    return result


def main(argv=None):
    import argparse

    parser = argparse.ArgumentParser(
        description="Run BFS and Prim's MST on an edge-list graph file"
    )
    parser.add_argument(
        "--input",
        type=str,
        default="graph_data/graph.txt",
        help="Edge-list file (default: graph_data/graph.txt)",
    )
    parser.add_argument(
        "--source", type=int, default=0, help="Source node id (default: 0)"
    )
    parser.add_argument(
        "--output", type=str, default=None, help="Write results as JSON here"
    )
    parser.add_argument(
        "--visualize", action="store_true", help="Save BFS tree and MST pictures"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Show debug messages"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(name)s %(levelname)s] %(message)s",
    )

    try:
        run(args.input, args.source, args.visualize, args.output)
    except (OSError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
