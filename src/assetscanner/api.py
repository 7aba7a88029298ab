from __future__ import annotations

from typing import List, Optional

from src.config.api import ConversionConfig
from .assetscanner import AssetScanner, FolderNotFoundError, NoImagesFoundError
from .model import ImageAsset


def scan(folder_path: str, config: Optional[ConversionConfig] = None) -> List[ImageAsset]:
    """Public API (AssetScanner)

    Contract:
    - Folder must exist and be a readable directory, else FolderNotFoundError.
    - Regular, readable files only; no recursion.
    - Extension allow-list from config, case-insensitive.
    - Sorted by filename, case-insensitive, ascending.
    - Empty result -> NoImagesFoundError.
    - Snapshot at call time.
    """
    return AssetScanner(config).scan(folder_path)
