"""PNG export of a rendered grid."""

from io import BytesIO

from pi_casso.renderer.grid import RenderedGrid
from pi_casso.view import ViewConfig

EXPORT_PREFIX: str = "pi-art"


def export_filename(config: ViewConfig, extension: str = "png") -> str:
    """``pi-art-<start>-<count>.png`` for the configured window."""
    return f"{EXPORT_PREFIX}-{config.start_offset}-{config.digit_count}.{extension}"


def export_png(grid: RenderedGrid) -> bytes:
    """Encode the grid as PNG bytes with the grid's exact pixel dimensions."""
    buf = BytesIO()
    grid.to_image().save(buf, format="PNG")
    return buf.getvalue()
