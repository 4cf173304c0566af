"""Semantic color tokens and the resolved 12-slot store.

A scale generator produces 12 colors for one base hue. ``ColorTokens``
assigns them positionally to functional UI slots, derives a legible text
color for the solid (accent) background, and answers ``TokenColor``
queries with concrete colors.

Population order::

    tokens = ColorTokens()
    for i, color in enumerate(scale):
        tokens.update_schema(i, color)
    tokens.resolve_color_on_accent()
    tokens.set_color(TokenColor.ACCENT_TEXT)

Until all twelve slots are written and the accent text is resolved,
queries return the defaults (opaque black, ``inverse_color() == False``)
instead of failing. ``ColorTokens.from_scale`` does all three steps at
once for callers that want an object that is complete from the start.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field, fields
from enum import Enum

import numpy as np

from . import srgb
from .apca import estimate_lc
from .color import BLACK, TRANSPARENT, WHITE, ColorValue
from .okhsl import linear_srgb_to_okhsl, okhsl_to_linear_srgb

logger = logging.getLogger(__name__)

# Accent-text rule. Calibrated against the APCA body-text guideline;
# these are exact values, not defaults.
ACCENT = {
    "lc_threshold": -46.0,
    "lightness": 0.01,
    "saturation": 0.7,
}

# ColorTokens field for each scale index, 0-11
SCALE_SLOTS: tuple[str, ...] = (
    "app_background",
    "subtle_background",
    "ui_element_background",
    "hovered_ui_element_background",
    "active_ui_element_background",
    "subtle_borders_and_separators",
    "ui_element_border_and_focus_rings",
    "hovered_ui_element_border",
    "solid_backgrounds",
    "hovered_solid_backgrounds",
    "low_contrast_text",
    "high_contrast_text",
)


class TokenColor(Enum):
    """A purpose-named color. Members 0-11 follow the scale order."""

    APP_BACKGROUND = 0
    SUBTLE_BACKGROUND = 1
    UI_ELEMENT_BACKGROUND = 2
    HOVERED_UI_ELEMENT_BACKGROUND = 3
    ACTIVE_UI_ELEMENT_BACKGROUND = 4
    SUBTLE_BORDERS_AND_SEPARATORS = 5
    UI_ELEMENT_BORDER_AND_FOCUS_RINGS = 6
    HOVERED_UI_ELEMENT_BORDER = 7
    SOLID_BACKGROUNDS = 8
    HOVERED_SOLID_BACKGROUNDS = 9
    LOW_CONTRAST_TEXT = 10
    HIGH_CONTRAST_TEXT = 11
    ACCENT_TEXT = 12
    TRANSPARENT = 13

    @classmethod
    def default(cls) -> TokenColor:
        return cls.APP_BACKGROUND

    @classmethod
    def custom(cls, color: ColorValue) -> CustomToken:
        return CustomToken(color)

    @property
    def slot(self) -> int | None:
        """Scale index for functional tokens, None otherwise."""
        return self.value if self.value < len(SCALE_SLOTS) else None

    @property
    def field(self) -> str | None:
        slot = self.slot
        return None if slot is None else SCALE_SLOTS[slot]


@dataclass(frozen=True)
class CustomToken:
    """Bypasses the store: resolves to its own color."""

    color: ColorValue


@dataclass
class ColorTokens:
    """Resolved colors for every functional UI slot, plus the accent text."""

    app_background: ColorValue = BLACK
    subtle_background: ColorValue = BLACK
    ui_element_background: ColorValue = BLACK
    hovered_ui_element_background: ColorValue = BLACK
    active_ui_element_background: ColorValue = BLACK
    subtle_borders_and_separators: ColorValue = BLACK
    ui_element_border_and_focus_rings: ColorValue = BLACK
    hovered_ui_element_border: ColorValue = BLACK
    solid_backgrounds: ColorValue = BLACK
    hovered_solid_backgrounds: ColorValue = BLACK
    low_contrast_text: ColorValue = BLACK
    high_contrast_text: ColorValue = BLACK
    color_on_accent: ColorValue = BLACK
    _inverse_color: bool = field(default=False, init=False, repr=False)

    @classmethod
    def from_scale(cls, scale: Sequence[ColorValue]) -> ColorTokens:
        """Populate all 12 slots and resolve the accent text in one step."""
        if len(scale) != len(SCALE_SLOTS):
            raise ValueError(
                f"Expected a scale of {len(SCALE_SLOTS)} colors, got {len(scale)}"
            )
        tokens = cls()
        for i, fill in enumerate(scale):
            tokens.update_schema(i, fill)
        tokens.resolve_color_on_accent()
        return tokens

    def update_schema(self, i: int, fill: ColorValue) -> None:
        """Assign scale color *i* to its slot. Indices outside 0-11 are ignored."""
        if 0 <= i < len(SCALE_SLOTS):
            setattr(self, SCALE_SLOTS[i], fill)
        else:
            logger.debug("Ignoring scale index %d (no slot)", i)

    def resolve_color_on_accent(self) -> None:
        """Pick the text color for solid backgrounds.

        White when its APCA contrast against the background is at or
        beyond Lc -46; otherwise a near-black carrying the background's
        hue, and ``inverse_color()`` turns True.
        """
        bg = self.solid_backgrounds
        lc = estimate_lc(WHITE, bg.rgb())

        if lc > ACCENT["lc_threshold"]:
            self._inverse_color = True
            self.color_on_accent = _darken_in_hue(bg)
        else:
            self._inverse_color = False
            self.color_on_accent = WHITE

        logger.debug(
            "Accent text for %s: Lc %.2f, inverse=%s, color %s",
            bg.to_hex(), lc, self._inverse_color, self.color_on_accent.to_hex(),
        )

    def inverse_color(self) -> bool:
        """True when white text was too weak on the solid background."""
        return self._inverse_color

    def set_color(self, token: TokenColor | CustomToken) -> ColorValue:
        """Resolve a token to its concrete color."""
        if isinstance(token, CustomToken):
            return token.color
        if not isinstance(token, TokenColor):
            raise TypeError(f"Not a color token: {token!r}")
        if token is TokenColor.TRANSPARENT:
            return TRANSPARENT
        if token is TokenColor.ACCENT_TEXT:
            return self.color_on_accent
        return getattr(self, token.field)

    def as_dict(self) -> dict[str, str]:
        """Hex string per slot, plus color_on_accent."""
        return {
            f.name: getattr(self, f.name).to_hex(keep_alpha=True)
            for f in fields(self)
            if f.name != "_inverse_color"
        }


def accent_linear(bg: ColorValue) -> np.ndarray:
    """Linear-light accent text for *bg*, before gamma encoding and quantization."""
    # 8-bit channels are read as linear components, not gamma-decoded.
    okhsl = linear_srgb_to_okhsl(srgb.to_unit(bg.rgb()))
    okhsl = okhsl._replace(l=ACCENT["lightness"], s=ACCENT["saturation"])
    return okhsl_to_linear_srgb(okhsl)


def _darken_in_hue(bg: ColorValue) -> ColorValue:
    encoded = srgb.encode(accent_linear(bg))
    r, g, b = (int(c) for c in srgb.to_u8(encoded))
    return ColorValue.rgb8(r, g, b)
