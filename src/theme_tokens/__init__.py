"""theme-tokens — accessible semantic UI colors from a single base hue."""

from .apca import estimate_lc
from .color import BLACK, TRANSPARENT, WHITE, ColorValue
from .theme import THEME_COLORS, CustomThemeColor, ThemeColor
from .tokens import SCALE_SLOTS, ColorTokens, CustomToken, TokenColor

__all__ = [
    "estimate_lc",
    "BLACK",
    "TRANSPARENT",
    "WHITE",
    "ColorValue",
    "THEME_COLORS",
    "CustomThemeColor",
    "ThemeColor",
    "SCALE_SLOTS",
    "ColorTokens",
    "CustomToken",
    "TokenColor",
]
