import logging

import pytest

from graphdemo.config import HIGHLIGHT_CONFIG, HighlightConfig
from graphdemo.highlight import HighlightState, PathHighlighter, Selection
from graphdemo.lib.exceptions import SelectionIncompleteError, UnknownVertexError
from graphdemo.lib.graph import StrictMultiGraph
from graphdemo.lib.path import PathResult
from graphdemo.sample import build_demo_graph


@pytest.fixture
def labelled():
    """The square example with opaque handles distinct from labels."""
    g = StrictMultiGraph()
    ids = {name: g.add_vertex(name, vertex_id=f"v-{name}") for name in "ABCD"}
    g.add_edge(ids["A"], ids["B"], key="ab", distance=1)
    g.add_edge(ids["B"], ids["D"], key="bd", distance=5)
    g.add_edge(ids["A"], ids["C"], key="ac", distance=2)
    g.add_edge(ids["C"], ids["D"], key="cd", distance=3)
    return g


def test_selection_lifecycle():
    sel = Selection()
    assert not sel.is_complete
    sel.start = "A"
    assert not sel.is_complete
    sel.end = "B"
    assert sel.is_complete
    sel.clear()
    assert sel == Selection()


def test_initial_state_uses_base_styles(labelled):
    hl = PathHighlighter(labelled)
    assert set(hl.state.vertex_styles.values()) == {"vertex"}
    assert set(hl.state.edge_styles.values()) == {"edge"}
    assert set(hl.state.vertex_styles) == labelled.vertices()
    assert set(hl.state.edge_styles) == {"ab", "bd", "ac", "cd"}


def test_select_marks_start_and_end(labelled):
    hl = PathHighlighter(labelled)
    hl.select_start("v-A")
    hl.select_end("v-D")
    assert hl.selection == Selection(start="v-A", end="v-D")
    assert hl.state.vertex_styles["v-A"] == "highlightStartVertex"
    assert hl.state.vertex_styles["v-D"] == "highlightEndVertex"


def test_select_unknown_vertex(labelled):
    hl = PathHighlighter(labelled)
    with pytest.raises(UnknownVertexError):
        hl.select_start("v-Z")
    assert hl.selection.start is None


def test_find_requires_complete_selection(labelled):
    hl = PathHighlighter(labelled)
    hl.select_start("v-A")
    with pytest.raises(SelectionIncompleteError, match="both a start and an end"):
        hl.find_and_highlight()


def test_find_and_highlight_styles_path(labelled):
    hl = PathHighlighter(labelled)
    hl.select_start("v-A")
    hl.select_end("v-D")
    result = hl.find_and_highlight()

    assert result.nodes == ("v-A", "v-C", "v-D")
    assert hl.last_result == result
    assert hl.state.vertex_styles == {
        "v-A": "highlightStartVertex",
        "v-B": "vertex",
        "v-C": "highlightPathVertex",
        "v-D": "highlightEndVertex",
    }
    assert hl.state.edge_styles == {
        "ab": "edge",
        "bd": "edge",
        "ac": "highlightPathEdge",
        "cd": "highlightPathEdge",
    }


def test_only_traversed_parallel_edge_is_styled(line_parallel):
    hl = PathHighlighter(line_parallel)
    hl.select_start("A")
    hl.select_end("C")
    hl.find_and_highlight()
    assert hl.state.edge_styles == {
        0: "highlightPathEdge",
        1: "edge",
        2: "highlightPathEdge",
        3: "edge",
    }


def test_no_path_leaves_styles(pair_unlinked, caplog):
    caplog.set_level(logging.INFO, logger="graphdemo")
    hl = PathHighlighter(pair_unlinked)
    hl.select_start("A")
    hl.select_end("B")
    before = HighlightState(
        dict(hl.state.vertex_styles), dict(hl.state.edge_styles)
    )
    result = hl.find_and_highlight()
    assert result == PathResult.no_path()
    assert hl.state == before
    assert "No path found from A to B." in caplog.text
    assert hl.summary(result) == "No path found."


def test_same_start_and_end(single):
    hl = PathHighlighter(single)
    hl.select_start("A")
    hl.select_end("A")
    result = hl.find_and_highlight()
    assert result.nodes == ("A",)
    # End style is applied last
    assert hl.state.vertex_styles["A"] == "highlightEndVertex"
    assert hl.summary(result) == (
        "Result for A to A\nTotal Distance: 0 km\nPath: A"
    )


def test_clear_selection_resets(labelled, caplog):
    caplog.set_level(logging.INFO, logger="graphdemo")
    hl = PathHighlighter(labelled)
    hl.select_start("v-A")
    hl.select_end("v-D")
    hl.find_and_highlight()
    hl.clear_selection()
    assert hl.selection == Selection()
    assert hl.last_result is None
    assert set(hl.state.vertex_styles.values()) == {"vertex"}
    assert set(hl.state.edge_styles.values()) == {"edge"}
    assert "Selection cleared" in caplog.text


def test_styles_skip_removed_edges(labelled):
    labelled.remove_edge("v-A", "v-B", key="ab")
    hl = PathHighlighter(labelled)
    assert set(hl.state.edge_styles) == {"bd", "ac", "cd"}


def test_summary_large_distance_has_no_separator(labelled):
    labelled.get_edge_attr("ac")["distance"] = 1229.5
    labelled.get_edge_attr("ab")["distance"] = 1300
    hl = PathHighlighter(labelled)
    hl.select_start("v-A")
    hl.select_end("v-D")
    result = hl.find_and_highlight()
    assert "Total Distance: 1232.5 km" in hl.summary(result)


def test_summary_uses_labels(labelled):
    hl = PathHighlighter(labelled)
    hl.select_start("v-A")
    hl.select_end("v-D")
    result = hl.find_and_highlight()
    assert hl.format_path(result) == "A-C-D"
    assert hl.summary(result) == (
        "Result for A to D\nTotal Distance: 5 km\nPath: A-C-D"
    )


def test_selection_logged(labelled, caplog):
    caplog.set_level(logging.INFO, logger="graphdemo")
    hl = PathHighlighter(labelled)
    hl.select_start("v-A")
    hl.select_end("v-D")
    hl.find_and_highlight()
    assert "Start node: A" in caplog.text
    assert "End node: D" in caplog.text
    assert "Path: A-C-D (5 km)" in caplog.text


def test_custom_config(labelled):
    config = HighlightConfig(
        path_vertex_style="onPath",
        distance_unit="mi",
        path_separator=" > ",
    )
    hl = PathHighlighter(labelled, config=config)
    hl.select_start("v-A")
    hl.select_end("v-D")
    result = hl.find_and_highlight()
    assert hl.state.vertex_styles["v-C"] == "onPath"
    assert hl.summary(result).splitlines()[1:] == [
        "Total Distance: 5 mi",
        "Path: A > C > D",
    ]
    # The shared default is untouched
    assert HIGHLIGHT_CONFIG.distance_unit == "km"


def test_demo_graph_route():
    g = build_demo_graph()
    hl = PathHighlighter(g)
    (start,) = g.find_vertices("Hollabrunn")
    (end,) = g.find_vertices("Linz")
    hl.select_start(start)
    hl.select_end(end)
    result = hl.find_and_highlight()
    assert hl.format_path(result) == "Hollabrunn-Horn-Linz"
    assert result.cost == 195
