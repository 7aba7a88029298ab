from dataclasses import dataclass
from typing import List

from src.pagegeometry.model import PageSize


@dataclass(frozen=True)
class DecodedImage:
    path: str
    width: int  # pixels
    height: int  # pixels
    image_format: str
    data: bytes  # JPEG/PNG stream embedded as-is


@dataclass(frozen=True)
class ComposeResult:
    output_path: str
    page_sizes: List[PageSize]

    @property
    def page_count(self) -> int:
        return len(self.page_sizes)
