from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional

from src.config.api import ConversionConfig, default_config
from .model import ImageAsset

logger = logging.getLogger(__name__)


class FolderNotFoundError(RuntimeError):
    pass


class NoImagesFoundError(RuntimeError):
    pass


class AssetScanner:
    def __init__(self, config: Optional[ConversionConfig] = None) -> None:
        self.config = config or default_config()

    def scan(self, folder_path: str) -> List[ImageAsset]:
        if not folder_path or not str(folder_path).strip():
            raise FolderNotFoundError("No folder path was provided.")

        folder = Path(folder_path)
        if not folder.is_dir() or not os.access(folder, os.R_OK | os.X_OK):
            raise FolderNotFoundError("The provided folder does not exist.")

        allowed = set(self.config.extensions)
        try:
            entries = list(os.scandir(folder))
        except OSError as e:
            raise FolderNotFoundError(f"The provided folder cannot be read: {e}") from e

        names: List[str] = []
        for entry in entries:
            if not self._is_image_file(entry, allowed):
                continue
            names.append(entry.name)

        if not names:
            raise NoImagesFoundError("No images found in the selected folder.")

        names.sort(key=lambda n: (n.casefold(), n))
        root = Path(os.path.abspath(folder))
        logger.debug("scan %s: %d image(s)", root, len(names))
        return [ImageAsset(path=str(root / n)) for n in names]

    def _is_image_file(self, entry: os.DirEntry, allowed: set) -> bool:
        ext = os.path.splitext(entry.name)[1].lstrip(".").lower()
        if ext not in allowed:
            return False
        try:
            if not entry.is_file():
                return False
        except OSError:
            return False
        return os.access(entry.path, os.R_OK)
