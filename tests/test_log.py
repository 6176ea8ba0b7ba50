"""Tests for configure_logging()."""

from __future__ import annotations

import io

from loguru import logger

import tableau_plots as tp


class TestConfigureLogging:
    """The package is silent until configure_logging() is called."""

    def test_silent_by_default(self):
        stream = io.StringIO()
        sink_id = logger.add(stream, level="DEBUG")
        try:
            tp.resolve("color", "regular", "Tableau 10")
        finally:
            logger.remove(sink_id)
        assert stream.getvalue() == ""

    def test_enabled_sink_sees_package_records(self):
        stream = io.StringIO()
        sink_id = tp.configure_logging(level="DEBUG", sink=stream)
        try:
            tp.resolve("color", "regular", "Summer", direction=-1)
            logger.info("unrelated application message")
        finally:
            logger.remove(sink_id)
            logger.disable("tableau_plots")

        output = stream.getvalue()
        assert "Summer" in output
        assert "| DEBUG |" in output
        assert "tableau_plots.palettes" in output
        assert "unrelated application message" not in output

    def test_level_filters(self):
        stream = io.StringIO()
        sink_id = tp.configure_logging(level="WARNING", sink=stream)
        try:
            tp.resolve("color", "regular", "Summer")
        finally:
            logger.remove(sink_id)
            logger.disable("tableau_plots")
        assert stream.getvalue() == ""
