"""CIE Lab conversions and Lab-space gradient interpolation.

Gradients are interpolated in Lab rather than RGB so that equal steps along
the gradient look like roughly equal changes in colour.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from matplotlib.colors import to_hex, to_rgb
from numpy.typing import ArrayLike

# D65 reference white
_WHITE = np.array([0.95047, 1.0, 1.08883])

_RGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
])
_XYZ_TO_RGB = np.linalg.inv(_RGB_TO_XYZ)

_EPSILON = 216 / 24389
_KAPPA = 24389 / 27


def rgb_to_lab(rgb: ArrayLike) -> np.ndarray:
    """Convert sRGB floats in [0, 1], shape (..., 3), to Lab."""
    rgb = np.asarray(rgb, dtype=np.float64)

    linear = np.where(rgb > 0.04045, ((rgb + 0.055) / 1.055) ** 2.4, rgb / 12.92)
    xyz = linear @ _RGB_TO_XYZ.T / _WHITE

    f = np.where(xyz > _EPSILON, np.cbrt(xyz), (_KAPPA * xyz + 16) / 116)
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]

    return np.stack([116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)], axis=-1)


def lab_to_rgb(lab: ArrayLike) -> np.ndarray:
    """Convert Lab, shape (..., 3), to sRGB floats clipped to [0, 1]."""
    lab = np.asarray(lab, dtype=np.float64)
    L, a, b = lab[..., 0], lab[..., 1], lab[..., 2]

    fy = (L + 16) / 116
    fx = a / 500 + fy
    fz = fy - b / 200

    x = np.where(fx ** 3 > _EPSILON, fx ** 3, (116 * fx - 16) / _KAPPA)
    y = np.where(L > _KAPPA * _EPSILON, fy ** 3, L / _KAPPA)
    z = np.where(fz ** 3 > _EPSILON, fz ** 3, (116 * fz - 16) / _KAPPA)

    xyz = np.stack([x, y, z], axis=-1) * _WHITE
    linear = np.clip(xyz @ _XYZ_TO_RGB.T, 0.0, None)
    rgb = np.where(linear > 0.0031308, 1.055 * linear ** (1 / 2.4) - 0.055, 12.92 * linear)
    return np.clip(rgb, 0.0, 1.0)


class GradientPalette:
    """Maps positions in [0, 1] to colours along a multi-stop Lab gradient.

    Positions that are NaN or fall outside [0, 1] map to ``None``.
    """

    def __init__(self, colors: Sequence[str], positions: Sequence[float]) -> None:
        self.colors = tuple(colors)
        self.positions = np.asarray(positions, dtype=np.float64)
        self._lab = rgb_to_lab([to_rgb(c) for c in self.colors])

    def __call__(self, x):
        arr = np.asarray(x, dtype=np.float64)
        scalar = arr.ndim == 0
        arr = np.atleast_1d(arr)

        lab = np.column_stack([
            np.interp(arr, self.positions, self._lab[:, channel])
            for channel in range(3)
        ])
        rgb = lab_to_rgb(lab)
        valid = np.isfinite(arr) & (arr >= 0.0) & (arr <= 1.0)
        out = [to_hex(c) if ok else None for c, ok in zip(rgb, valid)]
        return out[0] if scalar else out

    def __repr__(self) -> str:
        return f"GradientPalette(colors={list(self.colors)!r}, positions={self.positions.tolist()!r})"


def gradient_n_pal(colors: Sequence[str], values: Sequence[float] | None = None) -> GradientPalette:
    """Build a Lab gradient through ``colors``.

    ``values`` gives the position of each colour in [0, 1]; when omitted the
    colours are spaced evenly.
    """
    if values is None:
        values = np.linspace(0.0, 1.0, len(colors))
    return GradientPalette(colors, values)
