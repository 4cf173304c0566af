import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402

from theme_tokens import ColorValue  # noqa: E402

# Radix-style 12-step light scales
BLUE_SCALE = [
    "#fbfdff", "#f4faff", "#e6f4fe", "#d5efff", "#c2e5ff", "#acd8fc",
    "#8ec8f6", "#5eb1ef", "#0090ff", "#0588f0", "#0d74ce", "#113264",
]
AMBER_SCALE = [
    "#fefdfb", "#fefbe9", "#fff7c2", "#ffee9c", "#fbe577", "#f3d673",
    "#e9c162", "#e2a336", "#ffc53d", "#ffba18", "#ab6400", "#4f3422",
]


@pytest.fixture
def blue_scale():
    return [ColorValue.parse(h) for h in BLUE_SCALE]


@pytest.fixture
def amber_scale():
    return [ColorValue.parse(h) for h in AMBER_SCALE]
