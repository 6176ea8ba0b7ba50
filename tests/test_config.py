"""Tests for environment overrides in config.py."""

from __future__ import annotations

import importlib

import pytest

from tableau_plots import config


@pytest.fixture
def reload_config(monkeypatch):
    """Reload config under patched environment, then restore it."""

    def _reload(**env):
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return importlib.reload(config)

    yield _reload
    monkeypatch.undo()
    importlib.reload(config)


class TestConfig:
    """Test config defaults and overrides."""

    def test_defaults(self, reload_config):
        cfg = reload_config()
        assert cfg.DEFAULT_COLOR_PALETTE == "Tableau 10"
        assert cfg.DEFAULT_SEQUENTIAL_PALETTE == "Blue"
        assert cfg.DEFAULT_DIVERGING_PALETTE == "Orange-Blue Diverging"
        assert cfg.DEFAULT_SHAPE_PALETTE == "default"

    def test_env_overrides(self, reload_config):
        cfg = reload_config(
            TABLEAU_PLOTS_NA_VALUE="#000000",
            TABLEAU_PLOTS_GRADIENT_N="64",
            TABLEAU_PLOTS_COLORMAP_PREFIX="tab",
        )
        assert cfg.NA_VALUE == "#000000"
        assert cfg.GRADIENT_N == 64
        assert cfg.COLORMAP_PREFIX == "tab"

    def test_invalid_gradient_n(self, reload_config):
        with pytest.raises(ValueError):
            reload_config(TABLEAU_PLOTS_GRADIENT_N="lots")
