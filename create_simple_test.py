"""
Create the small 4-node example graph
"""

import os


def create_simple_test(graph_dir="test_graph_data"):
    """Write a 4-node tree and return the file path"""
    # Graph: 0 -- 1 (weight 5)
    #             |  \
    #   (weight 3)2   3 (weight 2)
    #   BFS from 0: distances [0, 1, 2, 2]
    #   Expected MST weight: 10
    os.makedirs(graph_dir, exist_ok=True)
    filename = os.path.join(graph_dir, "simple_graph.txt")

    with open(filename, "w") as f:
        f.write("<4, 3>\n")
        f.write("<0, 1, 5>\n")
        f.write("<1, 2, 3>\n")
        f.write("<1, 3, 2>\n")

    print("Created simple test graph:")
    print("  Nodes: 4")
    print("  Edges: 0-1(5), 1-2(3), 1-3(2)")
    print("  Expected MST weight: 10")
    return filename


if __name__ == "__main__":
    create_simple_test()
