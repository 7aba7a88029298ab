from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePath
from typing import Tuple

DEFAULT_DPI: int = 150
POINTS_PER_INCH: float = 72.0
OUTPUT_FILENAME: str = "images.pdf"
IMAGE_EXTENSIONS: Tuple[str, ...] = ("jpg", "jpeg", "png", "tif", "tiff", "bmp", "webp")


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class ConversionConfig:
    dpi: int = DEFAULT_DPI
    points_per_inch: float = POINTS_PER_INCH
    output_filename: str = OUTPUT_FILENAME
    extensions: Tuple[str, ...] = field(default=IMAGE_EXTENSIONS)

    def __post_init__(self) -> None:
        if self.dpi <= 0:
            raise ConfigError(f"dpi must be positive, got {self.dpi}")
        if self.points_per_inch <= 0:
            raise ConfigError(f"points_per_inch must be positive, got {self.points_per_inch}")

        name = (self.output_filename or "").strip()
        if not name or PurePath(name).name != name or name in (".", ".."):
            raise ConfigError(f"output_filename must be a bare filename: {self.output_filename!r}")

        if isinstance(self.extensions, str):
            raise ConfigError(f"extensions must be a sequence of strings, got {self.extensions!r}")
        exts = tuple(e.strip().lstrip(".").lower() for e in self.extensions if e and e.strip().lstrip("."))
        if not exts:
            raise ConfigError("at least one image extension is required")
        # frozen: bypass __setattr__ for the normalised value
        object.__setattr__(self, "extensions", exts)
