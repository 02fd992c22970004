"""Digit -> color palettes.

A palette is a persistent map with exactly the ten digit keys ``"0"`` ..
``"9"``; every value is a lowercase ``#rrggbb`` string. Palettes are values:
editing one (a color picker change, a preset, an AI generated theme) always
produces a new map and the previous one stays untouched.
"""

from typing import Dict, Mapping

from PIL import ImageColor
from pyrsistent import pmap

from pi_casso.types import RGB, PaletteMapping, PresetName

DIGITS: str = "0123456789"


class PaletteError(ValueError):
    """Raised when a mapping cannot be turned into a complete palette."""


def to_rgb(color: str) -> RGB:
    """Parse any Pillow color string (``#rgb``, ``#rrggbb``, names) to RGB."""
    try:
        rgb = ImageColor.getrgb(color)
    except (ValueError, AttributeError) as e:
        raise PaletteError(f"Invalid color: {color!r}") from e
    return rgb[0], rgb[1], rgb[2]


def normalize_color(color: str) -> str:
    r, g, b = to_rgb(color)
    return f"#{r:02x}{g:02x}{b:02x}"


def make_palette(mapping: Mapping[str, str]) -> PaletteMapping:
    """Validate and normalize a raw mapping into a palette.

    Raises:
        PaletteError: If keys are not exactly the ten digits or a value is not
            a parseable color.
    """
    keys = set(mapping.keys())
    missing = sorted(set(DIGITS) - keys)
    extra = sorted(str(k) for k in keys - set(DIGITS))
    if missing or extra:
        raise PaletteError(f"Palette keys mismatch (missing={missing}, extra={extra})")
    normalized: Dict[str, str] = {}
    for digit in DIGITS:
        value = mapping[digit]
        if not isinstance(value, str):
            raise PaletteError(f"Color for digit {digit} must be a string: {value!r}")
        normalized[digit] = normalize_color(value)
    return pmap(normalized)


def with_color(palette: PaletteMapping, digit: str, color: str) -> PaletteMapping:
    """Return ``palette`` with a single digit recolored."""
    if digit not in DIGITS or len(digit) != 1:
        raise PaletteError(f"Unknown digit: {digit!r}")
    return palette.set(digit, normalize_color(color))


DEFAULT_PALETTE: PaletteMapping = make_palette(
    {
        "0": "#1e1b4b",
        "1": "#ef4444",
        "2": "#f97316",
        "3": "#f59e0b",
        "4": "#84cc16",
        "5": "#10b981",
        "6": "#06b6d4",
        "7": "#3b82f6",
        "8": "#8b5cf6",
        "9": "#ec4899",
    }
)

PASTEL_PALETTE: PaletteMapping = make_palette(
    {
        "0": "#fbcfe8",
        "1": "#fecaca",
        "2": "#fed7aa",
        "3": "#fef08a",
        "4": "#d9f99d",
        "5": "#bbf7d0",
        "6": "#a5f3fc",
        "7": "#bfdbfe",
        "8": "#ddd6fe",
        "9": "#f5d0fe",
    }
)

# Even steps from black to white
MONOCHROME_PALETTE: PaletteMapping = make_palette(
    {
        digit: "#{0:02x}{0:02x}{0:02x}".format(round(i * 255 / 9))
        for i, digit in enumerate(DIGITS)
    }
)

PALETTE_REGISTRY: Dict[PresetName, PaletteMapping] = {
    PresetName.DEFAULT: DEFAULT_PALETTE,
    PresetName.PASTEL: PASTEL_PALETTE,
    PresetName.MONOCHROME: MONOCHROME_PALETTE,
}


def get_preset(name: PresetName | str) -> PaletteMapping:
    try:
        return PALETTE_REGISTRY[PresetName(name)]
    except ValueError as e:
        raise PaletteError(f"Unknown palette preset: {name!r}") from e
