from __future__ import annotations

from typing import Optional, Sequence

from src.assetscanner.model import ImageAsset
from src.config.model import POINTS_PER_INCH
from .composer import (
    DocumentComposer,
    ImageLoadFailure,
    OutputWriteFailure,
    ProgressCallback,
    WriterInitFailure,
    progress_percent,
)
from .model import ComposeResult, DecodedImage


def compose(
    assets: Sequence[ImageAsset],
    dpi: int,
    output_path: str,
    on_progress: Optional[ProgressCallback] = None,
    points_per_inch: float = POINTS_PER_INCH,
) -> ComposeResult:
    """Public API (DocumentComposer)

    Contract:
    - One page per asset, in the given order.
    - Page size per image from PageGeometry at `dpi`; image fills the full page.
    - Images embedded at full resolution (JPEG/PNG untouched, others as PNG).
    - on_progress(round((i+1) * 100 / N)) after each page; last value is 100.
    - Decode failure -> ImageLoadFailure(path); unwritable target -> WriterInitFailure;
      save/replace failure -> OutputWriteFailure.
    - Output replaced atomically on success only; a failed run leaves no partial file.
    """
    return DocumentComposer(dpi, points_per_inch).compose(assets, output_path, on_progress)
