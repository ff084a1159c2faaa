"""Command-line interface for graphdemo."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, List, Optional

from graphdemo.config import HIGHLIGHT_CONFIG, PATH_CONFIG
from graphdemo.highlight import PathHighlighter
from graphdemo.lib.exceptions import GraphError
from graphdemo.lib.graph import NodeID, StrictMultiGraph
from graphdemo.logging import get_logger, set_global_log_level
from graphdemo.sample import build_demo_graph

logger = get_logger(__name__)


def _format_table(
    headers: List[str],
    rows: List[List[Any]],
    min_width: int = 8,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string, or an empty string when there are no rows.
    """
    if not rows:
        return ""

    all_data = [headers] + [[str(item) for item in row] for row in rows]
    col_widths = [
        max(min_width, max(len(str(row[col_idx])) for row in all_data))
        for col_idx in range(len(headers))
    ]

    def format_row(row_data: List[Any]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    lines.extend(format_row(row) for row in all_data[1:])
    return "\n".join(lines)


def _resolve_vertex(graph: StrictMultiGraph, label: str) -> NodeID:
    """Return the single vertex carrying ``label``.

    Raises:
        GraphError: If no vertex or more than one vertex has this label.
    """
    matches = graph.find_vertices(label)
    if not matches:
        raise GraphError(f"No vertex labelled '{label}'.")
    if len(matches) > 1:
        raise GraphError(
            f"Label '{label}' is ambiguous ({len(matches)} vertices share it)."
        )
    return matches[0]


def _show_graph(graph: StrictMultiGraph) -> None:
    """Print the vertices and edges of a graph."""
    unit = HIGHLIGHT_CONFIG.distance_unit
    print(f"Vertices ({graph.number_of_nodes()}):")
    print("   " + ", ".join(graph.label(v) for v in graph.nodes))
    print()
    print(f"Edges ({graph.number_of_edges()}):")
    rows = [
        [
            graph.label(u),
            graph.label(v),
            HIGHLIGHT_CONFIG.format_cost(attr.get(PATH_CONFIG.weight_attr, "")),
        ]
        for u, v, _, attr in graph.get_edges().values()
    ]
    print(_format_table(["From", "To", f"Distance ({unit})"], rows))


def _find_path(graph: StrictMultiGraph, start_label: str, end_label: str) -> None:
    """Select start and end by label, run the query and print the summary."""
    highlighter = PathHighlighter(graph)
    highlighter.select_start(_resolve_vertex(graph, start_label))
    highlighter.select_end(_resolve_vertex(graph, end_label))
    result = highlighter.find_and_highlight()
    print(highlighter.summary(result))


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``graphdemo`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="graphdemo",
        description="Find shortest paths on the demo graph with Dijkstra's algorithm.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{path,show}",
        help="Available commands",
    )

    path_parser = subparsers.add_parser(
        "path", help="Find the shortest path between two vertices"
    )
    path_parser.add_argument("start", help="Label of the start vertex")
    path_parser.add_argument("end", help="Label of the end vertex")

    subparsers.add_parser("show", help="List the demo graph's vertices and edges")

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    graph = build_demo_graph()

    if args.command == "show":
        _show_graph(graph)
    elif args.command == "path":
        try:
            _find_path(graph, args.start, args.end)
        except GraphError as exc:
            logger.error(str(exc))
            raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
