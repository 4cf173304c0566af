"""ColorValue: the immutable 8-bit RGBA unit every other module works with."""

from __future__ import annotations

from dataclasses import dataclass, replace

from matplotlib.colors import to_rgba

from .srgb import to_u8


@dataclass(frozen=True)
class ColorValue:
    """An 8-bit RGBA color. Equality is component-wise."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Channel {name} must be an int, got {value!r}")
            if not 0 <= value <= 255:
                raise ValueError(f"Channel {name} out of range 0-255: {value}")

    @classmethod
    def rgb8(cls, r: int, g: int, b: int) -> ColorValue:
        """Opaque color from three 8-bit channels."""
        return cls(int(r), int(g), int(b))

    @classmethod
    def parse(cls, text: str) -> ColorValue:
        """Parse any color string matplotlib understands ("#2E4D37", "navy", ...)."""
        try:
            rgba = to_rgba(text)
        except ValueError as exc:
            raise ValueError(f"Cannot parse color: {text!r}") from exc
        r, g, b, a = (int(c) for c in to_u8(rgba))
        return cls(r, g, b, a)

    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def rgba_float(self) -> tuple[float, float, float, float]:
        """Channels as floats in [0, 1], the form matplotlib takes."""
        return (self.r / 255, self.g / 255, self.b / 255, self.a / 255)

    def with_alpha(self, a: int) -> ColorValue:
        return replace(self, a=a)

    def to_hex(self, keep_alpha: bool = False) -> str:
        text = f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        if keep_alpha:
            text += f"{self.a:02x}"
        return text


WHITE = ColorValue(255, 255, 255)
BLACK = ColorValue(0, 0, 0)
TRANSPARENT = ColorValue(0, 0, 0, 0)
