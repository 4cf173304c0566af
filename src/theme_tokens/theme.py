"""Base hues: 22 preset themes plus a caller-supplied custom RGB.

Each preset is a constant sRGB triple. ``get_srgb()`` hands the
linear-light version to a scale generator, which interpolates in linear
space.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np

from . import srgb


class ThemeColor(Enum):
    GRAY = (117, 117, 117)
    EGUI_BLUE = (0, 109, 143)
    TOMATO = (229, 77, 46)
    RED = (229, 72, 77)
    RUBY = (229, 70, 102)
    CRIMSON = (233, 61, 130)
    PINK = (214, 64, 159)
    PLUM = (171, 74, 186)
    PURPLE = (142, 78, 198)
    VIOLET = (110, 86, 207)
    IRIS = (91, 91, 214)
    INDIGO = (62, 99, 214)
    BLUE = (0, 144, 255)
    CYAN = (0, 162, 199)
    TEAL = (18, 165, 148)
    JADE = (41, 163, 131)
    GREEN = (48, 164, 108)
    GRASS = (70, 167, 88)
    BROWN = (173, 127, 88)
    BRONZE = (161, 128, 114)
    GOLD = (151, 131, 101)
    ORANGE = (247, 107, 21)

    @classmethod
    def default(cls) -> ThemeColor:
        return cls.GRAY

    @classmethod
    def custom(cls, r: int, g: int, b: int) -> CustomThemeColor:
        return CustomThemeColor((r, g, b))

    @classmethod
    def from_label(cls, label: str) -> ThemeColor:
        """Inverse of ``label``: "EguiBlue" -> ThemeColor.EGUI_BLUE."""
        for theme in cls:
            if theme.label == label:
                return theme
        raise ValueError(f"Unknown theme color: {label!r}")

    @property
    def label(self) -> str:
        return "".join(part.capitalize() for part in self.name.split("_"))

    def rgb(self) -> tuple[int, int, int]:
        """The preset's sRGB triple. Useful for serializing a chosen theme."""
        return self.value

    def get_srgb(self) -> np.ndarray:
        return srgb.decode(srgb.to_unit(self.rgb()))


@dataclass(frozen=True)
class CustomThemeColor:
    """A base hue outside the presets."""

    value: tuple[int, int, int]

    label = "Custom"

    def __post_init__(self) -> None:
        if len(self.value) != 3:
            raise ValueError(f"Expected an RGB triple, got {self.value!r}")
        for c in self.value:
            if isinstance(c, bool) or not isinstance(c, int) or not 0 <= c <= 255:
                raise ValueError(f"Channel out of range 0-255: {c!r}")

    def rgb(self) -> tuple[int, int, int]:
        r, g, b = self.value
        return (r, g, b)

    def get_srgb(self) -> np.ndarray:
        return srgb.decode(srgb.to_unit(self.rgb()))


THEME_COLORS: tuple[ThemeColor, ...] = tuple(ThemeColor)
