"""Demo graph of Lower and Upper Austrian towns with road distances in km."""

from __future__ import annotations

from typing import List, Tuple

from graphdemo.config import PATH_CONFIG
from graphdemo.lib.graph import StrictMultiGraph

DEMO_TOWNS: List[str] = [
    "Wien",
    "Hollabrunn",
    "Tulln",
    "Krems",
    "St. Poelten",
    "Horn",
    "Linz",
    "Salzburg",
    "Graz",
]

DEMO_ROADS: List[Tuple[str, str, float]] = [
    ("Wien", "Hollabrunn", 55),
    ("Wien", "Tulln", 40),
    ("Wien", "St. Poelten", 65),
    ("Wien", "Graz", 200),
    ("Hollabrunn", "Horn", 45),
    ("Hollabrunn", "Krems", 50),
    ("Tulln", "Krems", 30),
    ("Tulln", "St. Poelten", 30),
    ("Krems", "St. Poelten", 35),
    ("Krems", "Horn", 35),
    ("St. Poelten", "Linz", 135),
    ("Horn", "Linz", 150),
    ("Linz", "Salzburg", 130),
    ("Graz", "Linz", 220),
]


def build_demo_graph() -> StrictMultiGraph:
    """
    Build the demo graph.

    Vertex handles are generated; look towns up with ``find_vertices``.
    """
    graph = StrictMultiGraph()
    handles = {town: graph.add_vertex(town) for town in DEMO_TOWNS}
    for town_a, town_b, km in DEMO_ROADS:
        graph.add_edge(handles[town_a], handles[town_b], **{PATH_CONFIG.weight_attr: km})
    return graph
