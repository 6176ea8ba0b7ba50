"""Wire Tableau palettes into matplotlib: property cyclers and colormaps."""

from __future__ import annotations

import warnings
from typing import Any

import matplotlib as mpl
import numpy as np
from cycler import Cycler
from loguru import logger
from matplotlib.colors import ListedColormap

from . import config
from .palettes import (
    palette_names,
    tableau_color_pal,
    tableau_div_gradient_pal,
    tableau_seq_gradient_pal,
    tableau_shape_pal,
)


def _take(palette, n: int | None) -> list[str]:
    return palette(palette.max_n if n is None else n)


def scale_colour_tableau(
    palette: str = config.DEFAULT_COLOR_PALETTE,
    n: int | None = None,
    type: str = "regular",
    direction: int = 1,
) -> Cycler:
    """Categorical colour cycle, for ``axes.prop_cycle`` or ``ax.set_prop_cycle``.

    ``n`` defaults to the palette's full length.
    """
    return mpl.cycler(color=_take(tableau_color_pal(palette, type, direction), n))


def scale_fill_tableau(
    palette: str = config.DEFAULT_COLOR_PALETTE,
    n: int | None = None,
    type: str = "regular",
    direction: int = 1,
) -> Cycler:
    """Like :func:`scale_colour_tableau`, but cycles ``facecolor`` (used by ``Axes.fill``)."""
    return mpl.cycler(facecolor=_take(tableau_color_pal(palette, type, direction), n))


def scale_shape_tableau(palette: str = config.DEFAULT_SHAPE_PALETTE, n: int | None = None) -> Cycler:
    return mpl.cycler(marker=_take(tableau_shape_pal(palette), n))


def listed_colormap_tableau(
    palette: str = config.DEFAULT_COLOR_PALETTE,
    n: int | None = None,
    type: str = "regular",
    direction: int = 1,
) -> ListedColormap:
    """Categorical colormap, one colour per class, for ``imshow`` and friends."""
    pal = tableau_color_pal(palette, type, direction)
    return ListedColormap(_take(pal, n), name=f"{config.COLORMAP_PREFIX}.{palette}")


def _gradient_cmap(name: str, gradient, na_value: str, N: int) -> ListedColormap:
    cmap = ListedColormap(gradient(np.linspace(0.0, 1.0, N)), name=name)
    cmap.set_bad(na_value)
    return cmap


def scale_colour_gradient_tableau(
    palette: str = config.DEFAULT_SEQUENTIAL_PALETTE,
    na_value: str = config.NA_VALUE,
    N: int = config.GRADIENT_N,
    **kwargs: Any,
) -> ListedColormap:
    """Sequential colormap sampled from a Tableau Lab gradient.

    Extra keyword arguments (``values``, ``direction``) go to
    :func:`tableau_seq_gradient_pal`. Masked/NaN data is drawn in ``na_value``.
    """
    gradient = tableau_seq_gradient_pal(palette, **kwargs)
    return _gradient_cmap(f"{config.COLORMAP_PREFIX}.{palette}", gradient, na_value, N)


def scale_colour_gradient2_tableau(
    palette: str = config.DEFAULT_DIVERGING_PALETTE,
    na_value: str = config.NA_VALUE,
    N: int = config.GRADIENT_N,
    **kwargs: Any,
) -> ListedColormap:
    """Diverging colormap sampled from a Tableau Lab gradient."""
    gradient = tableau_div_gradient_pal(palette, **kwargs)
    return _gradient_cmap(f"{config.COLORMAP_PREFIX}.{palette}", gradient, na_value, N)


scale_color_tableau = scale_colour_tableau

# matplotlib does not split colour from fill for continuous data
scale_fill_gradient_tableau = scale_colour_gradient_tableau
scale_color_gradient_tableau = scale_colour_gradient_tableau
scale_color_continuous_tableau = scale_colour_gradient_tableau
scale_fill_continuous_tableau = scale_colour_gradient_tableau

scale_fill_gradient2_tableau = scale_colour_gradient2_tableau
scale_color_gradient2_tableau = scale_colour_gradient2_tableau


def register_colormaps(prefix: str = config.COLORMAP_PREFIX) -> list[str]:
    """Register every sequential and diverging palette with matplotlib.

    Colormaps are named ``"<prefix>.<palette>"`` (e.g. ``"tableau.Blue"``) and
    replace any earlier registration under the same name. Returns the names.
    """
    registered = []
    builders = [
        ("ordered-sequential", scale_colour_gradient_tableau),
        ("ordered-diverging", scale_colour_gradient2_tableau),
    ]
    with warnings.catch_warnings():
        # force=True still warns when it replaces a colormap
        warnings.filterwarnings("ignore", message="Overwriting the cmap", category=UserWarning)
        for variant, build in builders:
            for name in palette_names("color", variant):
                cmap = build(name)
                cmap_name = f"{prefix}.{name}"
                mpl.colormaps.register(cmap, name=cmap_name, force=True)
                registered.append(cmap_name)
    logger.debug("Registered {} colormaps under prefix {!r}", len(registered), prefix)
    return registered
