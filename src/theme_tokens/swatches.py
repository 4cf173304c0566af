"""Swatch charts for inspecting a resolved token set: figure(), describe(), save()."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from .style import apply
from .tokens import SCALE_SLOTS, ColorTokens, TokenColor

logger = logging.getLogger(__name__)

# Output directory when save() gets none; overridable per environment
CHART_DIR_ENV = "THEME_TOKENS_CHART_DIR"
_DEFAULT_CHART_DIR = "charts"


def _charts_dir() -> Path:
    return Path(os.environ.get(CHART_DIR_ENV, _DEFAULT_CHART_DIR))


def figure(
    tokens: ColorTokens,
    figsize: tuple[float, float] | None = None,
) -> tuple[plt.Figure, plt.Axes]:
    """Draw the 12 slots as a row of swatches, with an accent-text sample below."""
    apply(tokens)
    fig, ax = plt.subplots(figsize=figsize or (10.0, 3.5))

    n = len(SCALE_SLOTS)
    for token in TokenColor:
        if token.slot is None:
            continue
        ax.add_patch(Rectangle(
            (token.slot, 1.2), 0.9, 0.9,
            facecolor=tokens.set_color(token).rgba_float(),
            edgecolor="none",
        ))
        ax.text(
            token.slot + 0.45, 1.1, str(token.slot + 1),
            ha="center", va="top", fontsize=8,
        )

    # Accent text on its solid background
    ax.add_patch(Rectangle(
        (0, 0), n - 0.1, 0.8,
        facecolor=tokens.set_color(TokenColor.SOLID_BACKGROUNDS).rgba_float(),
        edgecolor="none",
    ))
    label = "Accent text (inverse)" if tokens.inverse_color() else "Accent text"
    ax.text(
        (n - 0.1) / 2, 0.4, label,
        ha="center", va="center", fontsize=12, fontweight="bold",
        color=tokens.set_color(TokenColor.ACCENT_TEXT).rgba_float(),
    )

    ax.set_xlim(-0.1, n)
    ax.set_ylim(-0.1, 2.2)
    ax.set_aspect("equal")
    ax.axis("off")
    return fig, ax


def describe(tokens: ColorTokens) -> str:
    """One-line summary of the accent decision, stored as the chart title."""
    accent = tokens.set_color(TokenColor.ACCENT_TEXT).to_hex()
    solid = tokens.set_color(TokenColor.SOLID_BACKGROUNDS).to_hex()
    return f"accent text {accent} on {solid}, inverse={tokens.inverse_color()}"


def save(
    tokens: ColorTokens,
    filename: str,
    output_dir: str | Path | None = None,
    figsize: tuple[float, float] | None = None,
) -> Path:
    """Draw *tokens* as swatches and write them to the chart directory.

    The accent decision is embedded as the file's Title metadata, so a
    saved chart records which text color was resolved. Returns the path.
    """
    dest = Path(output_dir) if output_dir else _charts_dir()
    dest.mkdir(parents=True, exist_ok=True)
    path = dest / filename

    fig, _ = figure(tokens, figsize=figsize)
    try:
        fig.savefig(path, metadata={"Title": describe(tokens)})
    finally:
        plt.close(fig)
    logger.debug("Wrote swatch chart %s (%s)", path, describe(tokens))
    return path
