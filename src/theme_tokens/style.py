"""Translate resolved ColorTokens into matplotlib rcParams."""

from __future__ import annotations

import matplotlib as mpl
import matplotlib.pyplot as plt

from .tokens import ColorTokens, TokenColor


def rc_params(tokens: ColorTokens) -> dict:
    """matplotlib rcParams for charts drawn in *tokens*' theme."""

    def c(token: TokenColor) -> str:
        return tokens.set_color(token).to_hex(keep_alpha=True)

    return {
        # Figure
        "figure.facecolor": c(TokenColor.APP_BACKGROUND),
        "figure.edgecolor": "none",
        "savefig.facecolor": c(TokenColor.APP_BACKGROUND),
        "savefig.edgecolor": "none",

        # Axes
        "axes.facecolor": c(TokenColor.APP_BACKGROUND),
        "axes.edgecolor": c(TokenColor.SUBTLE_BORDERS_AND_SEPARATORS),
        "axes.titlecolor": c(TokenColor.HIGH_CONTRAST_TEXT),
        "axes.labelcolor": c(TokenColor.HIGH_CONTRAST_TEXT),
        "axes.prop_cycle": mpl.cycler(color=[
            c(TokenColor.SOLID_BACKGROUNDS),
            c(TokenColor.HOVERED_SOLID_BACKGROUNDS),
            c(TokenColor.LOW_CONTRAST_TEXT),
        ]),

        # Grid
        "grid.color": c(TokenColor.SUBTLE_BORDERS_AND_SEPARATORS),

        # Ticks: marks muted, labels readable
        "xtick.color": c(TokenColor.LOW_CONTRAST_TEXT),
        "ytick.color": c(TokenColor.LOW_CONTRAST_TEXT),
        "xtick.labelcolor": c(TokenColor.HIGH_CONTRAST_TEXT),
        "ytick.labelcolor": c(TokenColor.HIGH_CONTRAST_TEXT),

        # Legend
        "legend.facecolor": c(TokenColor.SUBTLE_BACKGROUND),
        "legend.edgecolor": c(TokenColor.UI_ELEMENT_BORDER_AND_FOCUS_RINGS),

        # Text
        "text.color": c(TokenColor.HIGH_CONTRAST_TEXT),
    }


def apply(tokens: ColorTokens) -> None:
    """Apply *tokens* to matplotlib globally."""
    plt.rcParams.update(rc_params(tokens))
