from __future__ import annotations

from .model import ConfigError, ConversionConfig


def default_config() -> ConversionConfig:
    """Public API (Config)

    Contract:
    - dpi = 150, 72 points per inch.
    - output filename = images.pdf (written inside the input folder).
    - extensions = jpg, jpeg, png, tif, tiff, bmp, webp (case-insensitive).
    """
    return ConversionConfig()
