"""APCA lightness contrast (Lc) estimate, APCA-W3 0.0.98G-4g.

``estimate_lc`` returns a signed Lc value: positive for dark text on a
light background, negative for light text on a dark background. The
magnitude grows with perceived contrast; identical colors give 0.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from .color import ColorValue

RGB8 = ColorValue | Sequence[int]

# Model constants
APCA = {
    "main_trc": 2.4,
    "coefficients": (0.2126729, 0.7151522, 0.0721750),
    "norm_bg": 0.56,
    "norm_txt": 0.57,
    "rev_txt": 0.62,
    "rev_bg": 0.65,
    "blk_thrs": 0.022,
    "blk_clmp": 1.414,
    "scale_bow": 1.14,
    "scale_wob": 1.14,
    "lo_bow_offset": 0.027,
    "lo_wob_offset": 0.027,
    "delta_y_min": 0.0005,
    "lo_clip": 0.1,
}


def screen_luminance(color: RGB8) -> float:
    """Estimated screen luminance Y of an 8-bit sRGB color, soft-clamped near black."""
    if isinstance(color, ColorValue):
        color = color.rgb()
    channels = np.asarray(color, dtype=float) / 255.0
    y = float(np.dot(APCA["coefficients"], channels ** APCA["main_trc"]))
    if y > APCA["blk_thrs"]:
        return y
    return y + (APCA["blk_thrs"] - y) ** APCA["blk_clmp"]


def estimate_lc(foreground: RGB8, background: RGB8) -> float:
    """Lc contrast of *foreground* text on *background*, roughly -108 to 106."""
    y_txt = screen_luminance(foreground)
    y_bg = screen_luminance(background)

    if abs(y_bg - y_txt) < APCA["delta_y_min"]:
        return 0.0

    if y_bg > y_txt:
        # normal polarity: dark text on light background
        sapc = (y_bg ** APCA["norm_bg"] - y_txt ** APCA["norm_txt"]) * APCA["scale_bow"]
        lc = 0.0 if sapc < APCA["lo_clip"] else sapc - APCA["lo_bow_offset"]
    else:
        # reverse polarity: light text on dark background
        sapc = (y_bg ** APCA["rev_bg"] - y_txt ** APCA["rev_txt"]) * APCA["scale_wob"]
        lc = 0.0 if sapc > -APCA["lo_clip"] else sapc + APCA["lo_wob_offset"]

    return lc * 100.0
