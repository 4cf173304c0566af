"""Oklab and Okhsl conversions (Björn Ottosson, 2020-2021).

Okhsl is a hue/saturation/lightness space built on Oklab so that equal
steps in lightness look equally large. Inputs and outputs on the RGB
side are *linear-light* sRGB triples; apply ``srgb.encode`` afterwards
for display values.

Hue is in turns, [0, 1). Saturation and lightness are in [0, 1].
"""

from __future__ import annotations

import math
from typing import NamedTuple

import numpy as np
from numpy.typing import ArrayLike

# linear sRGB -> LMS cone response
_M1 = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
])

# cube-rooted LMS -> Oklab
_M2 = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
])

# Oklab -> cube-rooted LMS (a, b columns only; L maps through with weight 1)
_M2_INV_AB = np.array([
    [0.3963377774, 0.2158037573],
    [-0.1055613458, -0.0638541728],
    [-0.0894841775, -1.2914855480],
])

# LMS -> linear sRGB
_M1_INV = np.array([
    [4.0767416621, -3.3077115913, 0.2309699292],
    [-1.2684380046, 2.6097574011, -0.3413193965],
    [-0.0041960863, -0.7034186147, 1.7076147010],
])

# Lightness toe: maps Oklab L to a lightness closer to CIE L*
_K1 = 0.206
_K2 = 0.03
_K3 = (1.0 + _K1) / (1.0 + _K2)

# Saturation at which Okhsl switches from the C_0 to the C_max segment
_MID = 0.8
_MID_INV = 1.25

_ACHROMATIC = 1e-6


class Okhsl(NamedTuple):
    h: float
    s: float
    l: float  # noqa: E741


def linear_srgb_to_oklab(rgb: ArrayLike) -> np.ndarray:
    lms = _M1 @ np.asarray(rgb, dtype=float)
    return _M2 @ np.cbrt(lms)


def oklab_to_linear_srgb(lab: ArrayLike) -> np.ndarray:
    L, a, b = np.asarray(lab, dtype=float)
    lms_ = L + _M2_INV_AB @ np.array([a, b])
    return _M1_INV @ lms_ ** 3


def toe(x: float) -> float:
    return 0.5 * (_K3 * x - _K1 + math.sqrt((_K3 * x - _K1) ** 2 + 4 * _K2 * _K3 * x))


def toe_inv(x: float) -> float:
    return (x * x + _K1 * x) / (_K3 * (x + _K2))


def _max_saturation(a: float, b: float) -> float:
    """Largest S = C / L that stays in gamut for the normalized hue (a, b).

    A polynomial first guess, refined by one Halley step on whichever RGB
    channel clips first.
    """
    if -1.88170328 * a - 0.80936493 * b > 1:
        k = (1.19086277, 1.76576728, 0.59662641, 0.75515197, 0.56771245)
        w = _M1_INV[0]
    elif 1.81444104 * a - 1.19445276 * b > 1:
        k = (0.73956515, -0.45954404, 0.08285427, 0.12541070, 0.14503204)
        w = _M1_INV[1]
    else:
        k = (1.35733652, -0.00915799, -1.15130210, -0.50559606, 0.00692167)
        w = _M1_INV[2]

    S = k[0] + k[1] * a + k[2] * b + k[3] * a * a + k[4] * a * b

    k_lms = _M2_INV_AB @ np.array([a, b])
    lms_ = 1.0 + S * k_lms
    lms = lms_ ** 3
    lms_dS = 3.0 * k_lms * lms_ ** 2
    lms_dS2 = 6.0 * k_lms ** 2 * lms_

    f = float(w @ lms)
    f1 = float(w @ lms_dS)
    f2 = float(w @ lms_dS2)
    return S - f * f1 / (f1 * f1 - 0.5 * f * f2)


def _find_cusp(a: float, b: float) -> tuple[float, float]:
    """(L, C) of the most saturated in-gamut color for hue (a, b)."""
    S_cusp = _max_saturation(a, b)
    rgb_at_max = oklab_to_linear_srgb([1.0, S_cusp * a, S_cusp * b])
    L_cusp = float(np.cbrt(1.0 / np.max(rgb_at_max)))
    return L_cusp, L_cusp * S_cusp


def _gamut_intersection(
    a: float, b: float, L1: float, C1: float, L0: float, cusp: tuple[float, float]
) -> float:
    """t where the line (L0, 0) -> (L1, C1) leaves the sRGB gamut."""
    L_cusp, C_cusp = cusp

    if (L1 - L0) * C_cusp - (L_cusp - L0) * C1 <= 0:
        # lower half: the triangle edge is exact
        return C_cusp * L0 / (C1 * L_cusp + C_cusp * (L0 - L1))

    # upper half: triangle estimate plus one Halley step per channel
    t = C_cusp * (L0 - 1.0) / (C1 * (L_cusp - 1.0) + C_cusp * (L0 - L1))

    dL = L1 - L0
    dC = C1
    k_lms = _M2_INV_AB @ np.array([a, b])
    lms_dt = dL + dC * k_lms

    L = L0 * (1.0 - t) + t * L1
    C = t * C1
    lms_ = L + C * k_lms
    lms = lms_ ** 3
    ldt = 3.0 * lms_dt * lms_ ** 2
    ldt2 = 6.0 * lms_dt ** 2 * lms_

    step = math.inf
    for w in _M1_INV:
        f = float(w @ lms) - 1.0
        f1 = float(w @ ldt)
        f2 = float(w @ ldt2)
        u = f1 / (f1 * f1 - 0.5 * f * f2)
        if u >= 0:
            step = min(step, -f * u)
    if step == math.inf:
        return t
    return t + step


def _st_mid(a: float, b: float) -> tuple[float, float]:
    """Smooth approximation of the cusp (S, T) used for the mid chroma."""
    S = 0.11516993 + 1.0 / (
        7.44778970 + 4.15901240 * b
        + a * (-2.19557347 + 1.75198401 * b
               + a * (-2.13704948 - 10.02301043 * b
                      + a * (-4.24894561 + 5.38770819 * b + 4.69891013 * a)))
    )
    T = 0.11239642 + 1.0 / (
        1.61320320 - 0.68124379 * b
        + a * (0.40370612 + 0.90148123 * b
               + a * (-0.27087943 + 0.61223990 * b
                      + a * (0.00299215 - 0.45399568 * b - 0.14661872 * a)))
    )
    return S, T


def _chroma_bounds(L: float, a: float, b: float) -> tuple[float, float, float]:
    """(C_0, C_mid, C_max) for lightness L and normalized hue (a, b)."""
    cusp = _find_cusp(a, b)
    C_max = _gamut_intersection(a, b, L, 1.0, L, cusp)

    L_cusp, C_cusp = cusp
    S_max, T_max = C_cusp / L_cusp, C_cusp / (1.0 - L_cusp)
    k = C_max / min(L * S_max, (1.0 - L) * T_max)

    S_mid, T_mid = _st_mid(a, b)
    C_a = L * S_mid
    C_b = (1.0 - L) * T_mid
    C_mid = 0.9 * k * math.sqrt(math.sqrt(1.0 / (1.0 / C_a ** 4 + 1.0 / C_b ** 4)))

    C_a = L * 0.4
    C_b = (1.0 - L) * 0.8
    C_0 = math.sqrt(1.0 / (1.0 / C_a ** 2 + 1.0 / C_b ** 2))
    return C_0, C_mid, C_max


def linear_srgb_to_okhsl(rgb: ArrayLike) -> Okhsl:
    L, a, b = linear_srgb_to_oklab(rgb)
    C = math.hypot(a, b)
    l = toe(L)  # noqa: E741

    if C < _ACHROMATIC or L <= 0.0 or L >= 1.0:
        return Okhsl(0.0, 0.0, min(max(l, 0.0), 1.0))

    h = 0.5 + 0.5 * math.atan2(-b, -a) / math.pi
    a_, b_ = a / C, b / C
    C_0, C_mid, C_max = _chroma_bounds(L, a_, b_)

    if C < C_mid:
        k_1 = _MID * C_0
        k_2 = 1.0 - k_1 / C_mid
        t = C / (k_1 + k_2 * C)
        s = t * _MID
    else:
        k_0 = C_mid
        k_1 = (1.0 - _MID) * C_mid * C_mid * _MID_INV * _MID_INV / C_0
        k_2 = 1.0 - k_1 / (C_max - C_mid)
        t = (C - k_0) / (k_1 + k_2 * (C - k_0))
        s = _MID + (1.0 - _MID) * t

    return Okhsl(h, s, l)


def okhsl_to_linear_srgb(hsl: Okhsl) -> np.ndarray:
    h, s, l = hsl  # noqa: E741

    if l >= 1.0:
        return np.ones(3)
    if l <= 0.0:
        return np.zeros(3)

    a_ = math.cos(2.0 * math.pi * h)
    b_ = math.sin(2.0 * math.pi * h)
    L = toe_inv(l)

    if s <= 0.0:
        return oklab_to_linear_srgb([L, 0.0, 0.0])

    C_0, C_mid, C_max = _chroma_bounds(L, a_, b_)

    if s < _MID:
        t = _MID_INV * s
        k_1 = _MID * C_0
        k_2 = 1.0 - k_1 / C_mid
        C = t * k_1 / (1.0 - k_2 * t)
    else:
        t = (s - _MID) / (1.0 - _MID)
        k_0 = C_mid
        k_1 = (1.0 - _MID) * C_mid * C_mid * _MID_INV * _MID_INV / C_0
        k_2 = 1.0 - k_1 / (C_max - C_mid)
        C = k_0 + t * k_1 / (1.0 - k_2 * t)

    return oklab_to_linear_srgb([L, C * a_, C * b_])
