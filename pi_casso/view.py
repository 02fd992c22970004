"""View configuration for the digit grid.

``ViewConfig`` is replaced wholesale on every edit. Range problems are never
errors: :func:`clamp_view` pulls any configuration back into something the
renderer can draw for a given digit sequence length.
"""

from dataclasses import dataclass, replace
from typing import Tuple

# Slider ranges used by the UI: (min, max, step)
START_OFFSET_STEP: int = 10
DIGIT_COUNT_RANGE: Tuple[int, int, int] = (100, 5000, 50)
GRID_WIDTH_RANGE: Tuple[int, int, int] = (10, 200, 1)
CELL_SIZE_RANGE: Tuple[int, int, int] = (2, 40, 1)


@dataclass(frozen=True)
class ViewConfig:
    """Which digits to draw and how large.

    Attributes:
        start_offset: Index of the first digit drawn (0 is the leading ``3``).
        digit_count: Number of cells in the grid.
        grid_width: Number of columns.
        cell_size: Edge length of one square cell in pixels.
    """

    start_offset: int = 0
    digit_count: int = 1000
    grid_width: int = 50
    cell_size: int = 12

    @property
    def rows(self) -> int:
        return -(-self.digit_count // self.grid_width)

    @property
    def pixel_size(self) -> Tuple[int, int]:
        """(width, height) of the rendered image in pixels."""
        return self.grid_width * self.cell_size, self.rows * self.cell_size


DEFAULT_VIEW: ViewConfig = ViewConfig()


def max_start(digit_count: int, length: int) -> int:
    """Largest start offset that still leaves ``digit_count`` digits."""
    return max(0, length - digit_count)


def clamp_view(config: ViewConfig, length: int) -> ViewConfig:
    """Clamp every field into a drawable range for a sequence of ``length``.

    ``digit_count`` never exceeds the sequence length (when the sequence is
    non-empty) and ``start_offset`` is kept so the whole window fits.
    """
    digit_count = max(1, config.digit_count)
    if length > 0:
        digit_count = min(digit_count, length)
    start_offset = min(max(0, config.start_offset), max_start(digit_count, length))
    return replace(
        config,
        start_offset=start_offset,
        digit_count=digit_count,
        grid_width=max(1, config.grid_width),
        cell_size=max(1, config.cell_size),
    )
