"""Rendering subpackage.

Turns a :class:`~pi_casso.view.ViewConfig`, a palette and the digit sequence
into pixels. The renderer focuses on:

* A fixed, row-major cell layout shared by drawing and hit testing.
* Clamping instead of failing when the window runs past the sequence end.
* Lightweight NumPy buffers encoded with Pillow for display and export.

See :mod:`pi_casso.renderer.grid` for the layout and
:mod:`pi_casso.renderer.export` for PNG output.
"""

from .grid import (
    BACKGROUND_COLOR,
    CellHit,
    RenderedGrid,
    cell_origin,
    digit_window,
    hit_test,
    render,
)
from .export import export_filename, export_png

__all__ = [
    "BACKGROUND_COLOR",
    "CellHit",
    "RenderedGrid",
    "cell_origin",
    "digit_window",
    "export_filename",
    "export_png",
    "hit_test",
    "render",
]
