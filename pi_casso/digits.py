"""Embedded digit source.

The first 10 000 digits of pi (leading ``3`` included, no decimal point) are
shipped as ``data/pi_10000.txt``. The sequence is loaded once and treated as a
read-only string for the lifetime of the process.
"""

import os
from functools import lru_cache

from pi_casso.types import DigitSequence

DATA_DIR: str = os.path.join(os.path.dirname(os.path.realpath(__file__)), "data")
PI_DIGITS_PATH: str = os.path.join(DATA_DIR, "pi_10000.txt")


def parse_digits(text: str) -> DigitSequence:
    """Strip whitespace and validate that only decimal digits remain."""
    digits = "".join(text.split())
    bad = sorted(set(ch for ch in digits if ch not in "0123456789"))
    if bad:
        raise ValueError(f"Digit source contains non-digit characters: {bad}")
    return digits


@lru_cache(maxsize=None)
def load_digits(path: str = PI_DIGITS_PATH) -> DigitSequence:
    with open(path, encoding="utf-8") as f:
        return parse_digits(f.read())


PI_DIGITS: DigitSequence = load_digits()
