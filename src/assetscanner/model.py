from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ImageAsset:
    path: str  # absolute; pixel size is only known after decoding

    @property
    def name(self) -> str:
        return Path(self.path).name
