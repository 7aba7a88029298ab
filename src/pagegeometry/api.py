from __future__ import annotations

from src.config.model import POINTS_PER_INCH
from .model import PageSize
from .pagegeometry import PageGeometry


def page_size_for(pixel_width: int, pixel_height: int, dpi: int, points_per_inch: float = POINTS_PER_INCH) -> PageSize:
    """Public API (PageGeometry)

    Contract:
    - width = pixel_width * 72 / dpi, height = pixel_height * 72 / dpi (points).
    - No rounding, no clamping, no min/max page size.
    - Deterministic, side-effect free.
    """
    return PageGeometry(dpi, points_per_inch).page_size_for(pixel_width, pixel_height)
