"""Example: resolve a 12-step scale and chart it, light and dark accents."""

import theme_tokens as tt
from theme_tokens import swatches

SCALES = {
    "blue": [
        "#fbfdff", "#f4faff", "#e6f4fe", "#d5efff", "#c2e5ff", "#acd8fc",
        "#8ec8f6", "#5eb1ef", "#0090ff", "#0588f0", "#0d74ce", "#113264",
    ],
    "amber": [
        "#fefdfb", "#fefbe9", "#fff7c2", "#ffee9c", "#fbe577", "#f3d673",
        "#e9c162", "#e2a336", "#ffc53d", "#ffba18", "#ab6400", "#4f3422",
    ],
}

for name, scale in SCALES.items():
    tokens = tt.ColorTokens.from_scale([tt.ColorValue.parse(h) for h in scale])
    accent = tokens.set_color(tt.TokenColor.ACCENT_TEXT)
    print(f"{name:>6}: accent text {accent.to_hex()}  inverse={tokens.inverse_color()}")

    swatches.save(tokens, f"{name}-tokens.svg")
