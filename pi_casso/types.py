"""Common type aliases and enumerations."""

from enum import StrEnum, auto
from typing import Callable, Tuple

from pyrsistent.typing import PMap

# Ordered decimal digit characters, e.g. "31415926535"
DigitSequence = str

# Single digit character -> "#rrggbb"
PaletteMapping = PMap[str, str]

RGB = Tuple[int, int, int]

# theme text -> palette; raises GenerationError on failure
PaletteGenerateFn = Callable[[str], PaletteMapping]


class PresetName(StrEnum):
    """Built-in palette presets offered next to the color pickers."""

    DEFAULT = auto()
    PASTEL = auto()
    MONOCHROME = auto()
