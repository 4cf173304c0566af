"""Example: how white text reads on each preset hue used as a solid background."""

import theme_tokens as tt

print(f"{'theme':<10} {'rgb':<16} {'Lc':>8}  accent text")
for theme in tt.THEME_COLORS:
    tokens = tt.ColorTokens()
    tokens.update_schema(8, tt.ColorValue.rgb8(*theme.rgb()))
    tokens.resolve_color_on_accent()
    lc = tt.estimate_lc(tt.WHITE, theme.rgb())
    accent = tokens.set_color(tt.TokenColor.ACCENT_TEXT).to_hex()
    print(f"{theme.label:<10} {str(theme.rgb()):<16} {lc:8.2f}  {accent}")
