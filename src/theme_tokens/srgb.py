"""sRGB transfer functions: gamma-encoded <-> linear-light, 8-bit <-> float.

All functions accept scalars or array-likes and return numpy arrays. They
are total over their input domain; out-of-range floats are clipped.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

# IEC 61966-2-1 piecewise curve
_DECODE_KNEE = 0.04045
_ENCODE_KNEE = 0.0031308
_GAMMA = 2.4


def to_unit(rgb8: ArrayLike) -> np.ndarray:
    """8-bit channel values -> floats in [0, 1]."""
    return np.asarray(rgb8, dtype=float) / 255.0


def to_u8(unit: ArrayLike) -> np.ndarray:
    """Floats in [0, 1] -> 8-bit channel values (clipped, rounded half-up)."""
    clipped = np.clip(np.asarray(unit, dtype=float), 0.0, 1.0)
    return np.floor(clipped * 255.0 + 0.5).astype(np.uint8)


def decode(values: ArrayLike) -> np.ndarray:
    """Gamma-encoded sRGB -> linear-light."""
    v = np.clip(np.asarray(values, dtype=float), 0.0, 1.0)
    return np.where(
        v <= _DECODE_KNEE,
        v / 12.92,
        ((v + 0.055) / 1.055) ** _GAMMA,
    )


def encode(values: ArrayLike) -> np.ndarray:
    """Linear-light -> gamma-encoded sRGB."""
    v = np.clip(np.asarray(values, dtype=float), 0.0, 1.0)
    return np.where(
        v <= _ENCODE_KNEE,
        v * 12.92,
        1.055 * v ** (1.0 / _GAMMA) - 0.055,
    )
