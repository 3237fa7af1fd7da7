"""
Undirected weighted graph with BFS, Prim's MST and binary-tree checks
Nodes live in a list owned by the Graph; adjacency and predecessors hold node ids
"""

import heapq
import itertools
import logging
import sys
from collections import deque
from enum import Enum

import matplotlib.pyplot as plt
import networkx as nx

logger = logging.getLogger(__name__)

INFINITY = float("inf")


class Color(Enum):
    WHITE = "WHITE"  # unvisited
    GRAY = "GRAY"  # frontier
    BLACK = "BLACK"  # visited


class GraphDesyncError(RuntimeError):
    """Adjacency lists and the edge list no longer agree"""


class Node:
    def __init__(self, node_id):
        self.node_id = node_id
        self.adjacency = []  # neighbor ids, in insertion order

        # Result state of the last BFS / Prim run
        self.color = Color.WHITE
        self.distance = INFINITY
        self.predecessor = None

    def add_adjacent(self, node_id):
        self.adjacency.append(node_id)

    def reset(self):
        self.color = Color.WHITE
        self.distance = INFINITY
        self.predecessor = None

    def to_dict(self):
        return {
            "node_id": self.node_id,
            "adjacency": list(self.adjacency),
            "distance": self.distance,
            "predecessor": self.predecessor,
        }

    def __repr__(self):
        return f"Node({self.node_id})"

    def __str__(self):
        distance = "inf" if self.distance == INFINITY else self.distance
        predecessor = "-" if self.predecessor is None else self.predecessor
        adjacency = " ".join(str(n) for n in self.adjacency)
        return (
            f"{self.node_id:<6} dist: {distance:<6} pred: {predecessor:<6} "
            f"adj: [{adjacency}]"
        )


class Edge:
    def __init__(self, source, destination, weight):
        if source == destination:
            raise ValueError(f"Self-loop on node {source} is not a valid edge")
        self.source = source
        self.destination = destination
        self.weight = weight

    def endpoints(self):
        return self.source, self.destination

    def to_dict(self):
        return {
            "source": self.source,
            "destination": self.destination,
            "weight": self.weight,
        }

    def __repr__(self):
        return f"Edge({self.source}, {self.destination}, {self.weight})"

    def __str__(self):
        return f"({self.source}, {self.destination}): weight = {self.weight}"


class Graph:
    def __init__(self, source=None):
        """
        Create an empty graph, or load one when source is given
        source: path to an edge-list file or an iterable of its lines
        """
        self.nodes = []
        self.edges = []
        self.tot_nodes = 0
        self.tot_edges = 0
        self._index = {}  # node_id -> Node
        self._edge_index = {}  # frozenset({a, b}) -> last inserted Edge

        if source is not None:
            self.load(source)

    @classmethod
    def from_file(cls, path):
        return cls(path)

    def load(self, source):
        """Discard the current contents and load an edge list"""
        from graph_loader import load_graph

        return load_graph(self, source)

    def reset(self):
        self.nodes = []
        self.edges = []
        self.tot_nodes = self.tot_edges = 0
        self._index = {}
        self._edge_index = {}

    # Registry

    def insert_node(self, node):
        self.nodes.append(node)
        self._index.setdefault(node.node_id, node)
        if len(self.nodes) > self.tot_nodes:
            self.tot_nodes = len(self.nodes)

    def insert_edge(self, edge):
        src, dest = edge.endpoints()
        for node_id in (src, dest):
            if node_id not in self._index:
                raise ValueError(f"Edge endpoint {node_id} is not in the graph")

        self._index[src].add_adjacent(dest)
        self._index[dest].add_adjacent(src)
        self.edges.append(edge)
        self._edge_index[frozenset((src, dest))] = edge
        if len(self.edges) > self.tot_edges:
            self.tot_edges = len(self.edges)

    def find_node(self, node_id):
        node = self._index.get(node_id)
        if node is None:
            logger.error("Node (%s) not found", node_id)
        return node

    def find_edge(self, a, b):
        """Edge between a and b in either order, or None"""
        a, b = self._node_id(a), self._node_id(b)
        return self._edge_index.get(frozenset((a, b)))

    def __contains__(self, node_id):
        return node_id in self._index

    def _node_id(self, node):
        return node.node_id if isinstance(node, Node) else node

    def _resolve_source(self, source):
        node_id = self._node_id(source)
        node = self._index.get(node_id)
        if node is None or (isinstance(source, Node) and node is not source):
            raise ValueError(f"Source node {node_id} does not belong to this graph")
        return node

    # Algorithms

    def bfs(self, source):
        """
        Breadth-first search from source (Node or id)
        Leaves hop counts in distance and the shortest-path tree in predecessor
        """
        src = self._resolve_source(source)

        for node in self.nodes:
            node.reset()

        src.distance = 0
        src.color = Color.GRAY
        src.predecessor = None

        queue = deque([src])
        reached = 1
        while queue:
            node = queue.popleft()

            for adj_id in node.adjacency:
                adj = self._index[adj_id]
                if adj.color == Color.WHITE:
                    adj.color = Color.GRAY
                    adj.predecessor = node.node_id
                    adj.distance = node.distance + 1
                    queue.append(adj)
                    reached += 1

            node.color = Color.BLACK

        logger.debug(
            "BFS from %s reached %d of %d nodes", src.node_id, reached, len(self.nodes)
        )

    def prim(self, source):
        """
        Prim's algorithm from source (Node or id)
        distance ends up holding the weight of the edge to the parent, not a
        path cost. Returns the set of node ids added to the tree.
        """
        src = self._resolve_source(source)

        for node in self.nodes:
            node.distance = INFINITY
            node.predecessor = None

        src.distance = 0
        src.predecessor = None

        # (distance, push order, node_id); the counter keeps ties FIFO
        counter = itertools.count()
        heap = [(src.distance, next(counter), src.node_id)]
        in_mst = set()

        while heap:
            _, _, node_id = heapq.heappop(heap)
            if node_id in in_mst:
                continue  # stale entry
            in_mst.add(node_id)
            node = self._index[node_id]

            for adj_id in node.adjacency:
                if adj_id in in_mst:
                    continue

                edge = self.find_edge(node_id, adj_id)
                if edge is None:
                    raise GraphDesyncError(
                        f"No edge between adjacent nodes {node_id} and {adj_id}"
                    )

                adj = self._index[adj_id]
                if adj.distance > edge.weight:
                    adj.predecessor = node_id
                    adj.distance = edge.weight
                    heapq.heappush(heap, (adj.distance, next(counter), adj_id))

        logger.debug(
            "Prim from %s spanned %d of %d nodes",
            src.node_id,
            len(in_mst),
            len(self.nodes),
        )
        return in_mst

    # Structural checks on the predecessor tree

    def children(self, node):
        """Adjacent ids other than the node's predecessor"""
        return [n for n in node.adjacency if n != node.predecessor]

    def is_binary(self):
        for node in self.nodes:
            if len(self.children(node)) > 2:
                return False
        return True

    def is_complete_binary(self):
        """
        False when some node has exactly one child. Leaf depths are not
        compared, so this is weaker than the textbook definition.
        """
        for node in self.nodes:
            children = self.children(node)
            if children and len(children) < 2:
                return False
        return True

    # Results

    def distances(self):
        return [node.distance for node in self.nodes]

    def predecessors(self):
        return [node.predecessor for node in self.nodes]

    def mst_edges(self):
        """(parent, child, weight) for every node with a predecessor"""
        result = []
        for node in self.nodes:
            if node.predecessor is not None:
                edge = self.find_edge(node.predecessor, node.node_id)
                if edge is None:
                    raise GraphDesyncError(
                        f"No edge between {node.predecessor} and {node.node_id}"
                    )
                result.append((node.predecessor, node.node_id, edge.weight))
        return result

    def mst_weight(self):
        return sum(weight for _, _, weight in self.mst_edges())

    def print(self, message="Graph", out=None):
        if out is None:
            out = sys.stdout
        print(message, file=out)
        print("Nodes", file=out)
        for node in self.nodes:
            print(node, file=out)

        print("Edges", file=out)
        for edge in self.edges:
            print(edge, file=out)
        print(file=out)

    def print_mst(self, out=None):
        if out is None:
            out = sys.stdout
        print("Minimum Spanning Tree (MST)", file=out)
        for node in self.nodes:
            print(node, file=out)
        print(file=out)

    def to_networkx(self):
        G = nx.Graph()
        G.add_nodes_from(node.node_id for node in self.nodes)
        for edge in self.edges:
            G.add_edge(edge.source, edge.destination, weight=edge.weight)
        return G

    def visualize(self, save_path="graph_tree.png", title="Predecessor Tree"):
        """Draw the graph next to the current predecessor tree"""
        fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(14, 6))

        G = self.to_networkx()
        pos = nx.spring_layout(G, seed=42)

        # Original graph
        ax1.set_title("Original Graph", fontsize=14, fontweight="bold")
        nx.draw(
            G,
            pos,
            ax=ax1,
            with_labels=True,
            node_color="lightblue",
            node_size=700,
            font_size=12,
            font_weight="bold",
        )
        edge_labels = nx.get_edge_attributes(G, "weight")
        nx.draw_networkx_edge_labels(G, pos, edge_labels, ax=ax1)

        # Tree
        ax2.set_title(title, fontsize=14, fontweight="bold")
        tree = nx.Graph()
        tree.add_nodes_from(G.nodes())
        for parent, child, weight in self.mst_edges():
            tree.add_edge(parent, child, weight=weight)

        nx.draw(
            tree,
            pos,
            ax=ax2,
            with_labels=True,
            node_color="lightgreen",
            node_size=700,
            font_size=12,
            font_weight="bold",
            edge_color="red",
            width=3,
        )
        if tree.number_of_edges():
            edge_labels = nx.get_edge_attributes(tree, "weight")
            nx.draw_networkx_edge_labels(tree, pos, edge_labels, ax=ax2)

        plt.tight_layout()
        plt.savefig(save_path, dpi=300, bbox_inches="tight")
        print(f"Visualization saved to {save_path}")
        plt.close(fig)

        return tree
