"""Translate Tableau palettes into matplotlib rcParams."""

from __future__ import annotations

import matplotlib as mpl
import matplotlib.pyplot as plt

from . import config
from .errors import PaletteNotFoundError
from .scales import register_colormaps, scale_colour_tableau, scale_shape_tableau


def style(
    palette: str = config.DEFAULT_COLOR_PALETTE,
    shapes: str | None = None,
    gradient: str | None = None,
    direction: int = 1,
) -> dict:
    """Build the rcParams dict for a palette, without applying it.

    With ``shapes``, colours and markers cycle together, both truncated to
    the shorter of the two palettes.
    """
    colors = scale_colour_tableau(palette, direction=direction)
    if shapes is not None:
        markers = scale_shape_tableau(shapes)
        n = min(len(colors), len(markers))
        prop_cycle = colors[:n] + markers[:n]
    else:
        prop_cycle = colors

    params: dict = {"axes.prop_cycle": prop_cycle}
    if gradient is not None:
        cmap_name = f"{config.COLORMAP_PREFIX}.{gradient}"
        if cmap_name not in mpl.colormaps:
            registered = register_colormaps()
            if cmap_name not in registered:
                names = [name.split(".", 1)[1] for name in registered]
                raise PaletteNotFoundError(gradient, "ordered-sequential/ordered-diverging", names)
        params["image.cmap"] = cmap_name
    return params


def apply(
    palette: str = config.DEFAULT_COLOR_PALETTE,
    shapes: str | None = None,
    gradient: str | None = None,
    direction: int = 1,
) -> None:
    """Apply a Tableau palette to matplotlib globally."""
    plt.rcParams.update(style(palette, shapes, gradient, direction))
