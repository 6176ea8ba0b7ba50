"""Typed, read-only registry over the raw tables in tables.py.

The registry is built once at import (``REGISTRY``) and shared by every
lookup. Nothing in it can be mutated afterwards.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from matplotlib.colors import to_hex

from .errors import PaletteDataError, PaletteNotFoundError, VariantNotRecognizedError
from .tables import COLOR_PALETTES, SHAPE_PALETTES


class Family(str, enum.Enum):
    COLOR = "color"
    SHAPE = "shape"


class ColorVariant(str, enum.Enum):
    REGULAR = "regular"
    ORDERED_SEQUENTIAL = "ordered-sequential"
    ORDERED_DIVERGING = "ordered-diverging"


class ShapeVariant(str, enum.Enum):
    DEFAULT = "default"
    FILLED = "filled"
    PROPORTIONS = "proportions"


VARIANTS: dict[Family, type[enum.Enum]] = {
    Family.COLOR: ColorVariant,
    Family.SHAPE: ShapeVariant,
}


def _coerce_family(family: Family | str) -> Family:
    try:
        return Family(family)
    except ValueError:
        raise VariantNotRecognizedError(family, [f.value for f in Family]) from None


def _coerce_variant(family: Family, variant: enum.Enum | str) -> enum.Enum:
    """Exact match against the family's variants; no prefix matching."""
    variant_type = VARIANTS[family]
    try:
        return variant_type(variant)
    except ValueError:
        raise VariantNotRecognizedError(variant, [v.value for v in variant_type]) from None


@dataclass(frozen=True)
class PaletteTable:
    """One named, ordered sequence of colour or marker tokens."""

    family: Family
    variant: enum.Enum
    name: str
    values: tuple[str, ...]

    @property
    def max_n(self) -> int:
        return len(self.values)

    def __len__(self) -> int:
        return len(self.values)


class PaletteRegistry:
    """Immutable ``family -> variant -> name -> PaletteTable`` store."""

    def __init__(
        self,
        color_tables: Mapping[str, Mapping[str, list[str]]],
        shape_tables: Mapping[str, list[str]],
    ) -> None:
        store: dict[Family, Mapping] = {}

        colors = {}
        for variant in ColorVariant:
            raw = color_tables.get(variant.value, {})
            colors[variant] = MappingProxyType({
                name: PaletteTable(Family.COLOR, variant, name, _validate_colors(name, values))
                for name, values in raw.items()
            })
        store[Family.COLOR] = MappingProxyType(colors)

        # A shape variant holds a single table named after the variant
        shapes = {}
        for variant in ShapeVariant:
            values = shape_tables.get(variant.value)
            if values is None:
                raise PaletteDataError(f"Missing shape palette {variant.value!r}")
            table = PaletteTable(Family.SHAPE, variant, variant.value, _validate_shapes(variant.value, values))
            shapes[variant] = MappingProxyType({variant.value: table})
        store[Family.SHAPE] = MappingProxyType(shapes)

        self._store = MappingProxyType(store)

    def variants(self, family: Family | str) -> tuple[enum.Enum, ...]:
        return tuple(self._store[_coerce_family(family)])

    def names(self, family: Family | str, variant: enum.Enum | str) -> tuple[str, ...]:
        """Palette names for one table, in catalog order."""
        fam = _coerce_family(family)
        return tuple(self._store[fam][_coerce_variant(fam, variant)])

    def get(self, family: Family | str, variant: enum.Enum | str, name: str) -> PaletteTable:
        fam = _coerce_family(family)
        var = _coerce_variant(fam, variant)
        tables = self._store[fam][var]
        try:
            return tables[name]
        except (KeyError, TypeError):
            raise PaletteNotFoundError(name, var.value, tables) from None

    def __iter__(self):
        for variants in self._store.values():
            for tables in variants.values():
                yield from tables.values()

    def __len__(self) -> int:
        return sum(len(tables) for variants in self._store.values() for tables in variants.values())


def _validate_colors(name: str, values: list[str]) -> tuple[str, ...]:
    if not values:
        raise PaletteDataError(f"Palette {name!r} is empty")
    try:
        return tuple(to_hex(v) for v in values)
    except ValueError as e:
        raise PaletteDataError(f"Palette {name!r} holds an invalid colour: {e}") from e


def _validate_shapes(name: str, values: list[str]) -> tuple[str, ...]:
    if not values:
        raise PaletteDataError(f"Shape palette {name!r} is empty")
    return tuple(values)


REGISTRY = PaletteRegistry(COLOR_PALETTES, SHAPE_PALETTES)
