"""Shared fixtures for the tableau_plots tests."""

from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402
from hypothesis import settings  # noqa: E402
from loguru import logger  # noqa: E402

from tableau_plots import REGISTRY, PaletteRegistry  # noqa: E402

settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.load_profile("dev")

TABLEAU_10 = [
    "#4e79a7", "#f28e2b", "#e15759", "#76b7b2", "#59a14f",
    "#edc948", "#b07aa1", "#ff9da7", "#9c755f", "#bab0ac",
]


@pytest.fixture
def tableau_10():
    """Tableau 10 in catalog order."""
    return list(TABLEAU_10)


@pytest.fixture
def registry():
    return REGISTRY


@pytest.fixture
def small_registry():
    """A registry over hand-written tables, independent of the shipped data."""
    colors = {
        "regular": {
            "Three": ["#ff0000", "#00ff00", "#0000ff"],
            "One": ["#123456"],
        },
        "ordered-sequential": {"Ramp": ["#ffffff", "#000000"]},
        "ordered-diverging": {"Split": ["#ff0000", "#ffffff", "#0000ff"]},
    }
    shapes = {"default": ["o", "s"], "filled": ["o"], "proportions": ["$○$", "$●$"]}
    return PaletteRegistry(colors, shapes)


@pytest.fixture
def rc_restore():
    """Undo any rcParams changes made by the test."""
    with plt.rc_context():
        yield
    plt.close("all")


@pytest.fixture
def log_records():
    """Collect tableau_plots log messages emitted during the test."""
    records = []
    logger.enable("tableau_plots")
    sink_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(sink_id)
    logger.disable("tableau_plots")
