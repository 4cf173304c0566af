"""Tests for ThemeColor presets."""

import pytest

from theme_tokens.theme import THEME_COLORS, CustomThemeColor, ThemeColor


def test_twenty_two_presets():
    assert len(THEME_COLORS) == 22
    assert THEME_COLORS[0] is ThemeColor.GRAY
    assert THEME_COLORS[-1] is ThemeColor.ORANGE


def test_default_is_gray():
    assert ThemeColor.default() is ThemeColor.GRAY


@pytest.mark.parametrize(
    "theme,expected",
    [
        (ThemeColor.GRAY, (117, 117, 117)),
        (ThemeColor.EGUI_BLUE, (0, 109, 143)),
        (ThemeColor.BLUE, (0, 144, 255)),
        (ThemeColor.GOLD, (151, 131, 101)),
        (ThemeColor.ORANGE, (247, 107, 21)),
    ],
)
def test_preset_rgb(theme, expected):
    assert theme.rgb() == expected


@pytest.mark.parametrize("theme", THEME_COLORS)
def test_rgb_is_pure(theme):
    first = theme.rgb()
    assert theme.rgb() == first
    assert all(0 <= c <= 255 for c in first)


@pytest.mark.parametrize("rgb", [(0, 0, 0), (255, 255, 255), (12, 200, 99)])
def test_custom_rgb_passthrough(rgb):
    custom = ThemeColor.custom(*rgb)
    assert isinstance(custom, CustomThemeColor)
    assert custom.rgb() == rgb
    assert custom.label == "Custom"


def test_get_srgb_is_linear():
    assert ThemeColor.custom(255, 255, 255).get_srgb() == pytest.approx([1.0, 1.0, 1.0])
    assert ThemeColor.custom(0, 0, 0).get_srgb() == pytest.approx([0.0, 0.0, 0.0])
    assert ThemeColor.GRAY.get_srgb() == pytest.approx([0.1779] * 3, abs=1e-3)


@pytest.mark.parametrize(
    "theme,label",
    [(ThemeColor.GRAY, "Gray"), (ThemeColor.EGUI_BLUE, "EguiBlue"), (ThemeColor.ORANGE, "Orange")],
)
def test_label_roundtrip(theme, label):
    assert theme.label == label
    assert ThemeColor.from_label(label) is theme


def test_unknown_label():
    with pytest.raises(ValueError):
        ThemeColor.from_label("Custom")


@pytest.mark.parametrize(
    "rgb",
    [(300, -5, 0), (256, 0, 0), (0, 0, -1), (0.5, 0, 0), (True, 0, 0)],
)
def test_custom_rejects_invalid_channels(rgb):
    with pytest.raises(ValueError):
        ThemeColor.custom(*rgb)


def test_custom_rejects_wrong_length():
    with pytest.raises(ValueError):
        CustomThemeColor((1, 2))
