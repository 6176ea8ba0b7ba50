"""tableau-plots — Tableau colour and shape palettes for matplotlib."""

from loguru import logger

from .errors import (
    InsufficientPaletteCapacityError,
    PaletteDataError,
    PaletteNotFoundError,
    TableauPaletteError,
    VariantNotRecognizedError,
)
from .log import configure_logging
from .palettes import (
    GradientAnchors,
    Palette,
    gradient_anchors,
    palette_names,
    resolve,
    tableau_color_pal,
    tableau_div_gradient_pal,
    tableau_gradient_pal,
    tableau_seq_gradient_pal,
    tableau_shape_pal,
)
from .registry import REGISTRY, ColorVariant, Family, PaletteRegistry, PaletteTable, ShapeVariant
from .scales import (
    listed_colormap_tableau,
    register_colormaps,
    scale_color_continuous_tableau,
    scale_color_gradient2_tableau,
    scale_color_gradient_tableau,
    scale_color_tableau,
    scale_colour_gradient2_tableau,
    scale_colour_gradient_tableau,
    scale_colour_tableau,
    scale_fill_continuous_tableau,
    scale_fill_gradient2_tableau,
    scale_fill_gradient_tableau,
    scale_fill_tableau,
    scale_shape_tableau,
)
from .style import apply

logger.disable("tableau_plots")

__all__ = [
    "apply",
    "configure_logging",
    "gradient_anchors",
    "listed_colormap_tableau",
    "palette_names",
    "register_colormaps",
    "resolve",
    "scale_color_continuous_tableau",
    "scale_color_gradient2_tableau",
    "scale_color_gradient_tableau",
    "scale_color_tableau",
    "scale_colour_gradient2_tableau",
    "scale_colour_gradient_tableau",
    "scale_colour_tableau",
    "scale_fill_continuous_tableau",
    "scale_fill_gradient2_tableau",
    "scale_fill_gradient_tableau",
    "scale_fill_tableau",
    "scale_shape_tableau",
    "tableau_color_pal",
    "tableau_div_gradient_pal",
    "tableau_gradient_pal",
    "tableau_seq_gradient_pal",
    "tableau_shape_pal",
    "ColorVariant",
    "Family",
    "GradientAnchors",
    "Palette",
    "PaletteRegistry",
    "PaletteTable",
    "REGISTRY",
    "ShapeVariant",
    "InsufficientPaletteCapacityError",
    "PaletteDataError",
    "PaletteNotFoundError",
    "TableauPaletteError",
    "VariantNotRecognizedError",
]
