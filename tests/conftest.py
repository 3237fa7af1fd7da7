"""
Pytest configuration and shared fixtures.
"""

import matplotlib

matplotlib.use("Agg")

import pytest

from graph import Graph

EXAMPLE_LINES = ["4 3", "0 1 5", "1 2 3", "1 3 2"]


@pytest.fixture
def example_lines() -> list[str]:
    """The 4-node example: 0-1 (5), 1-2 (3), 1-3 (2)."""
    return list(EXAMPLE_LINES)


@pytest.fixture
def example_graph(example_lines) -> Graph:
    """Example graph loaded from its lines."""
    return Graph(example_lines)


@pytest.fixture
def example_file(tmp_path, example_lines):
    """Example graph written to disk in the bracketed, comma separated form."""
    path = tmp_path / "example.txt"
    path.write_text(
        "\n".join("<" + ", ".join(line.split()) + ">" for line in example_lines)
        + "\n"
    )
    return path


@pytest.fixture
def weighted_graph_lines() -> list[str]:
    """A 6-node graph with a cycle and a unique MST of weight 13."""
    return [
        "<6, 9>",
        "<0, 1, 4>",
        "<0, 2, 1>",
        "<1, 2, 2>",
        "<1, 3, 5>",
        "<2, 3, 8>",
        "<2, 4, 10>",
        "<3, 4, 2>",
        "<3, 5, 6>",
        "<4, 5, 3>",
    ]
