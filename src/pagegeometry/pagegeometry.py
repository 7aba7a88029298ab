from __future__ import annotations

from src.config.model import POINTS_PER_INCH
from .model import PageSize


class PageGeometry:
    def __init__(self, dpi: int, points_per_inch: float = POINTS_PER_INCH) -> None:
        if dpi <= 0:
            raise ValueError(f"dpi must be positive, got {dpi}")
        if points_per_inch <= 0:
            raise ValueError(f"points_per_inch must be positive, got {points_per_inch}")
        self.dpi = dpi
        self.points_per_inch = points_per_inch

    def page_size_for(self, pixel_width: int, pixel_height: int) -> PageSize:
        if pixel_width <= 0 or pixel_height <= 0:
            raise ValueError(f"invalid pixel size: {pixel_width}x{pixel_height}")
        return PageSize(
            width=pixel_width * self.points_per_inch / self.dpi,
            height=pixel_height * self.points_per_inch / self.dpi,
        )
