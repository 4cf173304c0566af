"""Tests for the matplotlib rcParams bridge."""

import matplotlib.pyplot as plt

from theme_tokens.style import apply, rc_params
from theme_tokens.tokens import ColorTokens


def test_rc_params_follow_tokens(blue_scale):
    params = rc_params(ColorTokens.from_scale(blue_scale))
    assert params["figure.facecolor"] == "#fbfdffff"
    assert params["axes.edgecolor"] == "#acd8fcff"
    assert params["axes.labelcolor"] == "#113264ff"
    assert params["xtick.color"] == "#0d74ceff"
    assert params["legend.edgecolor"] == "#8ec8f6ff"
    cycle = [entry["color"] for entry in params["axes.prop_cycle"]]
    assert cycle[:2] == ["#0090ffff", "#0588f0ff"]


def test_apply_updates_rcparams(blue_scale):
    with plt.rc_context():
        apply(ColorTokens.from_scale(blue_scale))
        assert plt.rcParams["axes.facecolor"] == "#fbfdffff"
