"""Tests for the ColorValue type."""

import dataclasses

import pytest

from theme_tokens.color import BLACK, TRANSPARENT, WHITE, ColorValue


@pytest.mark.parametrize(
    "text,expected",
    [
        ("#2E4D37", ColorValue(46, 77, 55)),
        ("#ffffff", WHITE),
        ("black", BLACK),
        ("#0000ff80", ColorValue(0, 0, 255, 128)),
        ("none", TRANSPARENT),
    ],
)
def test_parse(text, expected):
    assert ColorValue.parse(text) == expected


@pytest.mark.parametrize("text", ["#12", "not-a-color", "#gggggg"])
def test_parse_rejects_invalid(text):
    with pytest.raises(ValueError):
        ColorValue.parse(text)


@pytest.mark.parametrize(
    "channels",
    [(256, 0, 0), (0, -1, 0), (0, 0, 0, 300), (0.5, 0, 0), (True, 0, 0)],
)
def test_channels_must_be_bytes(channels):
    with pytest.raises(ValueError):
        ColorValue(*channels)


def test_to_hex():
    color = ColorValue(17, 50, 100, 0)
    assert color.to_hex() == "#113264"
    assert color.to_hex(keep_alpha=True) == "#11326400"


def test_rgb8_is_opaque():
    assert ColorValue.rgb8(1, 2, 3) == ColorValue(1, 2, 3, 255)


def test_rgba_float():
    assert WHITE.rgba_float() == (1.0, 1.0, 1.0, 1.0)
    assert TRANSPARENT.rgba_float() == (0.0, 0.0, 0.0, 0.0)


def test_with_alpha_copies():
    faded = WHITE.with_alpha(10)
    assert faded == ColorValue(255, 255, 255, 10)
    assert WHITE.a == 255


def test_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        WHITE.r = 0


def test_equality_is_component_wise():
    assert ColorValue(1, 2, 3) == ColorValue(1, 2, 3)
    assert ColorValue(1, 2, 3) != ColorValue(1, 2, 3, 0)
    assert len({ColorValue(1, 2, 3), ColorValue(1, 2, 3)}) == 1
