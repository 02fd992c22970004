from typing import Dict

import pytest

from pi_casso.palette import (
    DEFAULT_PALETTE,
    DIGITS,
    MONOCHROME_PALETTE,
    PALETTE_REGISTRY,
    PaletteError,
    get_preset,
    make_palette,
    normalize_color,
    to_rgb,
    with_color,
)
from pi_casso.types import PresetName
from tests.test_utils import TEST_PALETTE, raw_palette


@pytest.mark.parametrize("name", list(PresetName))
def test_presets_are_complete(name: PresetName) -> None:
    palette = PALETTE_REGISTRY[name]
    assert set(palette.keys()) == set(DIGITS)
    for color in palette.values():
        assert color.startswith("#") and len(color) == 7
        assert color == color.lower()


def test_monochrome_runs_black_to_white() -> None:
    assert MONOCHROME_PALETTE["0"] == "#000000"
    assert MONOCHROME_PALETTE["9"] == "#ffffff"
    values = [to_rgb(MONOCHROME_PALETTE[d])[0] for d in DIGITS]
    assert values == sorted(values)


@pytest.mark.parametrize(
    "color, expected",
    [
        ("#FF0000", "#ff0000"),
        ("#f00", "#ff0000"),
        ("red", "#ff0000"),
        ("#112233", "#112233"),
    ],
)
def test_normalize_color(color: str, expected: str) -> None:
    assert normalize_color(color) == expected


@pytest.mark.parametrize("color", ["", "#12", "not-a-color", "#gggggg"])
def test_invalid_color_raises(color: str) -> None:
    with pytest.raises(PaletteError):
        to_rgb(color)


def test_make_palette_normalizes_values() -> None:
    palette = make_palette(raw_palette(**{"3": "#ABCDEF"}))
    assert palette["3"] == "#abcdef"


def test_make_palette_missing_key() -> None:
    mapping: Dict[str, str] = raw_palette()
    del mapping["7"]
    with pytest.raises(PaletteError, match="missing"):
        make_palette(mapping)


def test_make_palette_extra_key() -> None:
    mapping: Dict[str, str] = raw_palette()
    mapping["10"] = "#000000"
    with pytest.raises(PaletteError, match="extra"):
        make_palette(mapping)


def test_make_palette_non_string_value() -> None:
    mapping: Dict[str, object] = dict(raw_palette())
    mapping["1"] = 0xFF0000
    with pytest.raises(PaletteError):
        make_palette(mapping)  # type: ignore[arg-type]


def test_with_color_returns_new_palette() -> None:
    updated = with_color(TEST_PALETTE, "5", "#00FF00")
    assert updated["5"] == "#00ff00"
    assert TEST_PALETTE["5"] != "#00ff00"
    assert {d: updated[d] for d in DIGITS if d != "5"} == {
        d: TEST_PALETTE[d] for d in DIGITS if d != "5"
    }


@pytest.mark.parametrize("digit", ["a", "10", "", "-1"])
def test_with_color_unknown_digit(digit: str) -> None:
    with pytest.raises(PaletteError):
        with_color(TEST_PALETTE, digit, "#000000")


def test_get_preset_by_name() -> None:
    assert get_preset("default") is DEFAULT_PALETTE
    assert get_preset(PresetName.MONOCHROME) is MONOCHROME_PALETTE


def test_get_preset_unknown() -> None:
    with pytest.raises(PaletteError):
        get_preset("neon")
