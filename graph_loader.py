"""
Load an undirected weighted graph from an edge-list text file

Format, one record per line, angle brackets and commas optional:
    <node_count, edge_count>
    <src, dest, weight>
    ...
"""

import logging
import os

from graph import Edge, Node

logger = logging.getLogger(__name__)


class GraphFormatError(ValueError):
    """The edge-list header cannot be read"""


def format_line(line):
    """Strip the surrounding < > and turn commas into whitespace"""
    line = line.strip()
    if line.startswith("<"):
        line = line[1:]
    if line.endswith(">"):
        line = line[:-1]
    return line.replace(",", " ")


def _read_ints(line, count):
    fields = format_line(line).split()
    if len(fields) < count:
        raise ValueError(f"expected {count} fields, got {len(fields)}")
    return tuple(int(field) for field in fields[:count])


def parse_header(line):
    """Return (node_count, edge_count) from the first line"""
    try:
        node_count, edge_count = _read_ints(line, 2)
    except ValueError as e:
        raise GraphFormatError(f"Invalid header {line.strip()!r}: {e}") from e

    if node_count < 0 or edge_count < 0:
        raise GraphFormatError(f"Negative counts in header {line.strip()!r}")
    return node_count, edge_count


def parse_edge_line(line):
    """Return (src, dest, weight); raises ValueError on a malformed line"""
    return _read_ints(line, 3)


def read_lines(source):
    """Yield text lines from a path or from an iterable of lines"""
    if isinstance(source, (str, os.PathLike)):
        with open(source, "r") as f:
            yield from f
    else:
        yield from source


def load_graph(graph, source):
    """
    Reset graph and populate it from source
    source: path to an edge-list file or an iterable of its lines
    Malformed edge lines and edges naming unknown nodes are skipped
    """
    graph.reset()
    lines = iter(read_lines(source))

    header = next(lines, None)
    if header is None:
        raise GraphFormatError("Empty input: missing header line")
    node_count, edge_count = parse_header(header)
    graph.tot_nodes, graph.tot_edges = node_count, edge_count

    for node_id in range(node_count):
        graph.insert_node(Node(node_id))

    skipped = 0
    for line_no, line in enumerate(lines, 2):
        if not format_line(line).strip():
            continue

        try:
            src_id, dest_id, weight = parse_edge_line(line)
        except ValueError as e:
            logger.warning("Line %d skipped (%s): %r", line_no, e, line.strip())
            skipped += 1
            continue

        # Look up both ends so each missing id gets reported
        src = graph.find_node(src_id)
        dest = graph.find_node(dest_id)
        if src is None or dest is None:
            skipped += 1
            continue

        try:
            edge = Edge(src.node_id, dest.node_id, weight)
        except ValueError as e:
            logger.warning("Line %d skipped: %s", line_no, e)
            skipped += 1
            continue
        graph.insert_edge(edge)

    logger.info(
        "Loaded %d nodes, %d edges (%d lines skipped)",
        len(graph.nodes),
        len(graph.edges),
        skipped,
    )
    return graph
