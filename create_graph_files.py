"""
Create edge-list files for the BFS / Prim runner
Writes <node_count, edge_count> followed by one <src, dest, weight> line per edge
"""

import os
import random

import matplotlib.pyplot as plt
import networkx as nx


def create_random_graph(num_nodes=6, edge_probability=0.5, seed=42, max_weight=10):
    """Create a random connected graph with integer weights in 1..max_weight"""
    rng = random.Random(seed)

    G = nx.erdos_renyi_graph(num_nodes, edge_probability, seed=seed)

    # Chain the components together so the MST spans every node
    components = [sorted(c) for c in nx.connected_components(G)]
    for left, right in zip(components, components[1:]):
        G.add_edge(left[0], right[0])

    for u, v in G.edges():
        G[u][v]["weight"] = rng.randint(1, max_weight)

    return G


def write_edge_list(graph, filename, brackets=True):
    """Write a weighted networkx graph in the edge-list format"""
    directory = os.path.dirname(filename)
    if directory:
        os.makedirs(directory, exist_ok=True)

    def record(*fields):
        text = ", ".join(str(field) for field in fields)
        return f"<{text}>" if brackets else " ".join(str(f) for f in fields)

    with open(filename, "w") as f:
        f.write(record(graph.number_of_nodes(), graph.number_of_edges()) + "\n")
        for u, v, data in sorted(graph.edges(data=True)):
            f.write(record(u, v, data["weight"]) + "\n")

    print(f"  Created {filename}: {graph.number_of_nodes()} nodes, "
          f"{graph.number_of_edges()} edges")
    return filename


def visualize_graph(graph, output_file):
    """Draw the graph with its edge weights and save it"""
    plt.figure(figsize=(10, 8))
    pos = nx.spring_layout(graph, seed=42)

    nx.draw(
        graph,
        pos,
        with_labels=True,
        node_color="lightblue",
        node_size=700,
        font_size=12,
        font_weight="bold",
        edge_color="gray",
        width=2,
    )
    edge_labels = nx.get_edge_attributes(graph, "weight")
    nx.draw_networkx_edge_labels(graph, pos, edge_labels, font_size=10)

    plt.title("Input Graph", fontsize=14, fontweight="bold")
    plt.savefig(output_file, dpi=300, bbox_inches="tight")
    print(f"  Visualization saved to {output_file}")
    plt.close()


def print_graph_summary(graph):
    print("\n" + "=" * 70)
    print("Graph Summary")
    print("=" * 70)
    print(f"Number of nodes: {graph.number_of_nodes()}")
    print(f"Number of edges: {graph.number_of_edges()}")
    print(f"Is connected: {nx.is_connected(graph)}")

    print("\nEdge list (with weights):")
    for u, v, data in sorted(graph.edges(data=True)):
        print(f"  ({u}, {v}): weight = {data['weight']}")

    mst = nx.minimum_spanning_tree(graph, weight="weight")
    mst_weight = sum(data["weight"] for _, _, data in mst.edges(data=True))
    print(f"\nExpected MST weight (NetworkX): {mst_weight}")
    print("=" * 70)


def main(argv=None):
    import argparse

    parser = argparse.ArgumentParser(
        description="Generate a random weighted edge-list file"
    )
    parser.add_argument(
        "--nodes", type=int, default=6, help="Number of nodes (default: 6)"
    )
    parser.add_argument(
        "--edge-prob", type=float, default=0.5, help="Edge probability (default: 0.5)"
    )
    parser.add_argument(
        "--seed", type=int, default=42, help="Random seed (default: 42)"
    )
    parser.add_argument(
        "--output",
        type=str,
        default="graph_data/graph.txt",
        help="Edge-list file to write (default: graph_data/graph.txt)",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Write whitespace separated fields without < > and commas",
    )
    parser.add_argument(
        "--visualize", action="store_true", help="Also save a PNG next to the file"
    )
    args = parser.parse_args(argv)

    print("=" * 70)
    print("Edge-List Generator")
    print("=" * 70)
    print(f"  Nodes: {args.nodes}")
    print(f"  Edge probability: {args.edge_prob}")
    print(f"  Random seed: {args.seed}")

    graph = create_random_graph(args.nodes, args.edge_prob, args.seed)
    print_graph_summary(graph)

    write_edge_list(graph, args.output, brackets=not args.plain)
    if args.visualize:
        visualize_graph(graph, os.path.splitext(args.output)[0] + ".png")

    print(f"\nTo run BFS and Prim on it:")
    print(f"  python run_graph.py --input {args.output}")
    return args.output


if __name__ == "__main__":
    main()
