"""Package defaults. Each may be overridden from the environment at import time.

For example: export TABLEAU_PLOTS_GRADIENT_N=64
"""

import os

DEFAULT_COLOR_PALETTE = "Tableau 10"
DEFAULT_SEQUENTIAL_PALETTE = "Blue"
DEFAULT_DIVERGING_PALETTE = "Orange-Blue Diverging"
DEFAULT_SHAPE_PALETTE = "default"

# Colour for missing / out-of-range values in continuous scales (R's grey50)
NA_VALUE = os.environ.get("TABLEAU_PLOTS_NA_VALUE", "#7f7f7f")

# Number of samples taken from a gradient when building a colormap
GRADIENT_N = int(os.environ.get("TABLEAU_PLOTS_GRADIENT_N", "256"))

# Colormaps are registered with matplotlib as "<prefix>.<palette name>"
COLORMAP_PREFIX = os.environ.get("TABLEAU_PLOTS_COLORMAP_PREFIX", "tableau")
