"""Digit grid rendering and hit testing.

Both entry points are pure functions of ``(ViewConfig, palette, digits)``:

* :func:`render` paints one square cell per digit, row-major, into an
  ``(height, width, 3)`` ``uint8`` buffer.
* :func:`hit_test` maps a pixel coordinate back to the digit painted there.

Out-of-range start offsets are clamped to the last digit of the sequence; a
window running past the end of the sequence simply paints fewer cells and
leaves the rest of the bounding box as background.
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
import numpy.typing as npt
from PIL import Image

from pi_casso.palette import to_rgb
from pi_casso.types import RGB, DigitSequence, PaletteMapping
from pi_casso.view import ViewConfig

UInt8Array = npt.NDArray[np.uint8]

# Canvas clear color behind unpainted cells
BACKGROUND_COLOR: str = "#111827"


@dataclass(frozen=True, eq=False)
class RenderedGrid:
    """Result of a single draw.

    Attributes:
        config: The view the grid was drawn for.
        start: Clamped index of the first painted digit.
        segment: The painted digits, at most ``config.digit_count`` long.
        pixels: RGB buffer of shape ``(height, width, 3)``.
    """

    config: ViewConfig
    start: int
    segment: DigitSequence
    pixels: UInt8Array

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def columns(self) -> int:
        return self.config.grid_width

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    def cell_color(self, row: int, col: int) -> RGB:
        """Color of the top-left pixel of cell ``(row, col)``."""
        size = self.config.cell_size
        r, g, b = self.pixels[row * size, col * size]
        return int(r), int(g), int(b)

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.pixels)


@dataclass(frozen=True)
class CellHit:
    """Digit under a queried pixel.

    Attributes:
        digit_index: 0-based index into the full digit sequence.
        digit: The digit character.
        color: Palette color of the digit.
        row: Grid row of the cell.
        col: Grid column of the cell.
        local_index: Row-major index of the cell inside the grid.
    """

    digit_index: int
    digit: str
    color: str
    row: int
    col: int
    local_index: int

    @property
    def position(self) -> int:
        """1-based position shown to users (``#1`` is the leading ``3``)."""
        return self.digit_index + 1


def safe_start(config: ViewConfig, digits: DigitSequence) -> int:
    return max(0, min(config.start_offset, len(digits) - 1))


def digit_window(
    config: ViewConfig, digits: DigitSequence
) -> Tuple[int, DigitSequence]:
    """Return the clamped start index and the slice of digits to paint."""
    if not digits:
        return 0, ""
    start = safe_start(config, digits)
    end = min(start + config.digit_count, len(digits))
    return start, digits[start:end]


def cell_origin(index: int, config: ViewConfig) -> Tuple[int, int]:
    """Pixel (x, y) of the top-left corner of the ``index``-th cell."""
    col = index % config.grid_width
    row = index // config.grid_width
    return col * config.cell_size, row * config.cell_size


def render(
    config: ViewConfig, palette: PaletteMapping, digits: DigitSequence
) -> RenderedGrid:
    """Paint the configured window of ``digits`` using ``palette``.

    The buffer is always ``grid_width * cell_size`` wide and
    ``ceil(digit_count / grid_width) * cell_size`` high, regardless of how many
    digits were actually available.
    """
    start, segment = digit_window(config, digits)
    cols, size, rows = config.grid_width, config.cell_size, config.rows

    cells: UInt8Array = np.empty((rows * cols, 3), dtype=np.uint8)
    cells[:] = to_rgb(BACKGROUND_COLOR)

    if segment:
        # Lookup table indexed by digit value; only digits present need a color
        lut: UInt8Array = np.zeros((10, 3), dtype=np.uint8)
        for digit in set(segment):
            lut[int(digit)] = to_rgb(palette[digit])
        codes = np.frombuffer(segment.encode("ascii"), dtype=np.uint8) - ord("0")
        cells[: len(segment)] = lut[codes]

    grid = cells.reshape(rows, cols, 3)
    pixels = np.repeat(np.repeat(grid, size, axis=0), size, axis=1)
    return RenderedGrid(
        config=config,
        start=start,
        segment=segment,
        pixels=np.ascontiguousarray(pixels),
    )


def hit_test(
    px: float,
    py: float,
    config: ViewConfig,
    palette: PaletteMapping,
    digits: DigitSequence,
) -> Optional[CellHit]:
    """Return the digit drawn at pixel ``(px, py)``, or None outside the grid."""
    col = math.floor(px / config.cell_size)
    row = math.floor(py / config.cell_size)
    if col < 0 or col >= config.grid_width or row < 0:
        return None

    local_index = row * config.grid_width + col
    if local_index < 0 or local_index >= config.digit_count:
        return None

    if not digits:
        return None
    global_index = safe_start(config, digits) + local_index
    if global_index >= len(digits):
        return None

    digit = digits[global_index]
    return CellHit(
        digit_index=global_index,
        digit=digit,
        color=palette[digit],
        row=row,
        col=col,
        local_index=local_index,
    )
