"""Shared graph fixtures.

Vertex handles equal their labels so expectations stay readable. Edge keys
are small integers in insertion order.
"""

from __future__ import annotations

import pytest

from graphdemo.lib.graph import StrictMultiGraph


def _graph(labels, edges) -> StrictMultiGraph:
    g = StrictMultiGraph()
    for label in labels:
        g.add_vertex(label, vertex_id=label)
    for key, (u, v, distance) in enumerate(edges):
        g.add_edge(u, v, key=key, distance=distance)
    return g


@pytest.fixture
def square():
    # Metric:
    #       [1]       [5]
    #   A─────────B─────────D
    #   │                   │
    #   │   [2]       [3]   │
    #   └─────────C─────────┘
    #
    return _graph(
        "ABCD",
        [("A", "B", 1), ("B", "D", 5), ("A", "C", 2), ("C", "D", 3)],
    )


@pytest.fixture
def two_islands():
    # Metric:
    #       [1]             [2]
    #   A─────────B     C─────────D
    #
    return _graph("ABCD", [("A", "B", 1), ("C", "D", 2)])


@pytest.fixture
def single():
    return _graph("A", [])


@pytest.fixture
def pair_unlinked():
    return _graph("AB", [])


@pytest.fixture
def line_parallel():
    # Metric:
    #      [4]      [3,1,2]
    #   A─────────B═════════C
    #
    return _graph(
        "ABC",
        [("A", "B", 4), ("B", "C", 3), ("B", "C", 1), ("B", "C", 2)],
    )


@pytest.fixture
def triangle_loop():
    # Metric:
    #          [0]
    #          ┌─┐
    #          B─┘
    #    [1] ╱   ╲ [1]
    #       A─────C
    #         [3]
    #
    return _graph(
        "ABC",
        [("A", "B", 1), ("B", "C", 1), ("A", "C", 3), ("B", "B", 0)],
    )


@pytest.fixture
def ties():
    # Metric:
    #       [1]       [1]
    #   A─────────B─────────D
    #   │                   │
    #   │   [1]       [1]   │
    #   └─────────C─────────┘
    #
    return _graph(
        "ABCD",
        [("A", "B", 1), ("B", "D", 1), ("A", "C", 1), ("C", "D", 1)],
    )
