"""Palette functions: turn a named Tableau table into a callable palette.

``resolve()`` is the single lookup path. ``tableau_color_pal()``,
``tableau_shape_pal()`` and the gradient helpers are thin wrappers that
pick the family and variant for the caller.
"""

from __future__ import annotations

import operator
from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np
from loguru import logger

from . import config
from .colorspace import GradientPalette, gradient_n_pal
from .errors import InsufficientPaletteCapacityError, VariantNotRecognizedError
from .registry import REGISTRY, ColorVariant, Family, PaletteRegistry, PaletteTable

_GRADIENT_VARIANTS = (ColorVariant.ORDERED_SEQUENTIAL, ColorVariant.ORDERED_DIVERGING)


def _is_reversed(direction) -> bool:
    # Only a strictly negative direction reverses; 0, 2, 1.5 all mean forward.
    return direction < 0


def check_pal_n(n, max_n: int) -> int:
    """Validate a requested palette size and return it as an int."""
    try:
        n = operator.index(n)
    except TypeError:
        raise ValueError(f"`n` must be a non-negative integer, not {n!r}.") from None
    if n < 0:
        raise ValueError(f"`n` must be a non-negative integer, not {n}.")
    if n > max_n:
        raise InsufficientPaletteCapacityError(max_n, n)
    return n


@dataclass(frozen=True)
class Palette:
    """A discrete palette bound to one table and a fixed direction.

    ``palette(n)`` returns the first ``n`` values in the palette's direction
    and refuses to hand out more than ``max_n``. Colours are never recycled.
    """

    table: PaletteTable
    direction: int = 1
    values: tuple[str, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        values = self.table.values
        if _is_reversed(self.direction):
            values = values[::-1]
        object.__setattr__(self, "values", values)

    @property
    def name(self) -> str:
        return self.table.name

    @property
    def max_n(self) -> int:
        return self.table.max_n

    def __call__(self, n: int) -> list[str]:
        n = check_pal_n(n, self.max_n)
        return list(self.values[:n])


def resolve(
    family: Family | str,
    variant,
    name: str,
    direction: int = 1,
    registry: PaletteRegistry = REGISTRY,
) -> Palette:
    """Look up ``(family, variant, name)`` and bind it to ``direction``.

    Raises:
        VariantNotRecognizedError: ``variant`` is not one of the family's variants.
        PaletteNotFoundError: ``name`` is not in that variant's table. The
            error lists every valid name.
    """
    table = registry.get(family, variant, name)
    logger.debug(
        "Resolved {}/{} palette {!r} (max_n={}, direction={})",
        table.family.value, table.variant.value, table.name, table.max_n, direction,
    )
    return Palette(table, direction)


def palette_names(family: Family | str, variant, registry: PaletteRegistry = REGISTRY) -> list[str]:
    """Names available for ``(family, variant)``, in catalog order."""
    return list(registry.names(family, variant))


def tableau_color_pal(
    palette: str = config.DEFAULT_COLOR_PALETTE,
    type: str = "regular",
    direction: int = 1,
) -> Palette:
    """Tableau colour palette (discrete).

    Args:
        palette: Palette name. See ``palette_names("color", type)``.
        type: One of ``"regular"``, ``"ordered-sequential"`` or
            ``"ordered-diverging"``.
        direction: 1 keeps the original order of colours; -1 reverses it.
    """
    return resolve(Family.COLOR, type, palette, direction)


def tableau_shape_pal(palette: str = config.DEFAULT_SHAPE_PALETTE) -> Palette:
    """Tableau shape palette (discrete): ``"default"``, ``"filled"`` or ``"proportions"``.

    These are approximations using matplotlib markers and unicode glyphs, so
    their look depends on the font in use.
    """
    # Each shape variant holds a single table named after it
    return resolve(Family.SHAPE, palette, palette)


@dataclass(frozen=True)
class GradientAnchors:
    """Ordered gradient stops: each colour and its position in [0, 1]."""

    colors: tuple[str, ...]
    positions: tuple[float, ...]

    def __post_init__(self) -> None:
        if len(self.colors) != len(self.positions):
            raise ValueError(
                f"`values` must have one position per colour: "
                f"got {len(self.positions)} for {len(self.colors)} colours."
            )
        pos = np.asarray(self.positions, dtype=np.float64)
        if not np.all(np.isfinite(pos)) or np.any(pos < 0.0) or np.any(pos > 1.0):
            raise ValueError(f"`values` must lie between 0 and 1, got {list(self.positions)}.")
        if np.any(np.diff(pos) < 0):
            raise ValueError(f"`values` must be non-decreasing, got {list(self.positions)}.")

    def __iter__(self):
        return iter(zip(self.colors, self.positions))


def gradient_anchors(
    palette: str = config.DEFAULT_SEQUENTIAL_PALETTE,
    type: str = "ordered-sequential",
    values: Sequence[float] | None = None,
    direction: int = 1,
) -> GradientAnchors:
    """Ordered (colour, position) stops for a continuous Tableau gradient."""
    try:
        variant = ColorVariant(type)
    except ValueError:
        variant = None
    if variant not in _GRADIENT_VARIANTS:
        raise VariantNotRecognizedError(type, [v.value for v in _GRADIENT_VARIANTS])

    colors = resolve(Family.COLOR, variant, palette, direction).values
    if values is None:
        positions = np.linspace(0.0, 1.0, len(colors))
    else:
        positions = values
    return GradientAnchors(colors, tuple(float(p) for p in positions))


def tableau_gradient_pal(
    palette: str = config.DEFAULT_SEQUENTIAL_PALETTE,
    type: str = "ordered-sequential",
    values: Sequence[float] | None = None,
    direction: int = 1,
) -> GradientPalette:
    """Tableau colour gradient palette (continuous).

    Args:
        palette: Palette name.
        type: ``"ordered-sequential"`` or ``"ordered-diverging"``.
        values: Position (between 0 and 1) of each colour, if the colours
            should not be evenly spaced along the gradient.
        direction: 1 keeps the original order of colours; -1 reverses it.

    Returns:
        A callable mapping positions in [0, 1] to hex colours.
    """
    anchors = gradient_anchors(palette, type, values, direction)
    return gradient_n_pal(anchors.colors, anchors.positions)


def tableau_seq_gradient_pal(palette: str = config.DEFAULT_SEQUENTIAL_PALETTE, **kwargs) -> GradientPalette:
    return tableau_gradient_pal(palette=palette, type="ordered-sequential", **kwargs)


def tableau_div_gradient_pal(palette: str = config.DEFAULT_DIVERGING_PALETTE, **kwargs) -> GradientPalette:
    return tableau_gradient_pal(palette=palette, type="ordered-diverging", **kwargs)
