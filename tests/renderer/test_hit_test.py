from typing import Tuple

import pytest

from pi_casso.digits import PI_DIGITS
from pi_casso.renderer import hit_test, render
from pi_casso.view import ViewConfig
from tests.test_utils import SAMPLE_DIGITS, TEST_PALETTE, expected_rgb, make_view


@pytest.mark.parametrize(
    "config",
    [ViewConfig(0, 10, 5, 10), ViewConfig(42, 57, 8, 3), ViewConfig(9_980, 40, 6, 4)],
)
def test_hit_test_inverts_render_layout(config: ViewConfig) -> None:
    grid = render(config, TEST_PALETTE, PI_DIGITS)
    for i in range(len(grid.segment)):
        row, col = divmod(i, config.grid_width)
        px, py = col * config.cell_size, row * config.cell_size
        hit = hit_test(px, py, config, TEST_PALETTE, PI_DIGITS)
        assert hit is not None
        assert hit.local_index == row * config.grid_width + col
        assert (hit.row, hit.col) == (row, col)
        assert hit.digit == grid.segment[i]
        assert expected_rgb(TEST_PALETTE, hit.digit) == grid.cell_color(row, col)


def test_hit_test_reference_cell() -> None:
    hit = hit_test(49, 19, make_view(), TEST_PALETTE, SAMPLE_DIGITS)
    assert hit is not None
    assert (hit.row, hit.col) == (1, 4)
    assert hit.digit_index == 9
    assert hit.position == 10
    assert hit.digit == "3"
    assert hit.color == TEST_PALETTE["3"]


def test_position_is_one_based() -> None:
    hit = hit_test(0, 0, make_view(start_offset=4), TEST_PALETTE, SAMPLE_DIGITS)
    assert hit is not None
    assert hit.digit_index == 4
    assert hit.position == 5
    assert hit.digit == SAMPLE_DIGITS[4]


def test_fractional_coordinates() -> None:
    hit = hit_test(19.99, 9.5, make_view(), TEST_PALETTE, SAMPLE_DIGITS)
    assert hit is not None
    assert (hit.row, hit.col) == (0, 1)


@pytest.mark.parametrize(
    "point",
    [
        (-1, 0),
        (0, -1),
        (-0.5, 5),
        (-100, -100),
        (50, 0),  # first column past the right edge
        (1000, 5),
        (0, 20),  # row past digit_count
        (0, 10_000),
    ],
)
def test_outside_canvas_misses(point: Tuple[float, float]) -> None:
    px, py = point
    assert hit_test(px, py, make_view(), TEST_PALETTE, SAMPLE_DIGITS) is None


def test_unpopulated_cell_in_last_row_misses() -> None:
    config = make_view(digit_count=7)
    assert hit_test(10, 10, config, TEST_PALETTE, SAMPLE_DIGITS) is not None  # index 6
    assert hit_test(20, 10, config, TEST_PALETTE, SAMPLE_DIGITS) is None  # index 7


def test_past_sequence_end_misses() -> None:
    config = make_view(start_offset=8, digit_count=10)
    assert hit_test(10, 0, config, TEST_PALETTE, SAMPLE_DIGITS) is not None  # global 9
    assert hit_test(20, 0, config, TEST_PALETTE, SAMPLE_DIGITS) is None  # global 10


def test_empty_sequence_misses() -> None:
    assert hit_test(0, 0, make_view(), TEST_PALETTE, "") is None
