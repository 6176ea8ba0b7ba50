"""Exceptions raised by palette lookups and palette calls."""

from __future__ import annotations

from collections.abc import Iterable


class TableauPaletteError(Exception):
    """Base class for every error raised by tableau_plots."""


class PaletteNotFoundError(TableauPaletteError, KeyError):
    """A palette name is not present in the requested table."""

    def __init__(self, name: str, variant: str, valid_names: Iterable[str]) -> None:
        self.name = name
        self.variant = variant
        self.valid_names = tuple(valid_names)
        message = (
            f"`palette` must be one of {', '.join(self.valid_names)}. "
            f"Got {name!r} for {variant!r} palettes."
        )
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class VariantNotRecognizedError(TableauPaletteError, ValueError):
    """A variant (palette type) is outside the enumerated set for its family."""

    def __init__(self, variant: object, valid_variants: Iterable[str]) -> None:
        self.variant = variant
        self.valid_variants = tuple(valid_variants)
        super().__init__(
            f"`type` must be one of {', '.join(repr(v) for v in self.valid_variants)}, "
            f"not {variant!r}."
        )


class InsufficientPaletteCapacityError(TableauPaletteError, ValueError):
    """More values were requested than a discrete palette holds."""

    def __init__(self, max_n: int, n: int) -> None:
        self.max_n = max_n
        self.n = n
        super().__init__(
            f"This palette can handle a maximum of {max_n} values. "
            f"You have supplied {n}."
        )


class PaletteDataError(TableauPaletteError, ValueError):
    """The palette tables themselves are malformed."""
