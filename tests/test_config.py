import pytest

from graphdemo.config import (
    HIGHLIGHT_CONFIG,
    PATH_CONFIG,
    HighlightConfig,
    PathFinderConfig,
)


def test_path_defaults():
    config = PathFinderConfig()
    assert config.weight_attr == "distance"
    assert config.stop_at_end is True
    assert config.validate_weights is True
    assert PATH_CONFIG == config


def test_highlight_defaults():
    assert HIGHLIGHT_CONFIG == HighlightConfig()
    assert HIGHLIGHT_CONFIG.path_edge_style == "highlightPathEdge"
    assert HIGHLIGHT_CONFIG.distance_unit == "km"


@pytest.mark.parametrize(
    "value, expected",
    [
        (5, "5"),
        (5.0, "5"),
        (0, "0"),
        (0.1, "0.1"),
        (2.125, "2.125"),
        (1.23456, "1.235"),
        (1234.5, "1234.5"),
        (10**400, str(10**400)),
        (float("inf"), "inf"),
        ("n/a", "n/a"),
        (None, "None"),
    ],
)
def test_format_cost(value, expected):
    assert HighlightConfig().format_cost(value) == expected


def test_format_cost_precision():
    assert HighlightConfig(cost_precision=1).format_cost(2.26) == "2.3"
