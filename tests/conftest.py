from pathlib import Path
from typing import List, Tuple

import pytest
from PIL import Image

from src.pipeline.api import JobListener


@pytest.fixture
def make_image():
    def _make(path: Path, size: Tuple[int, int], color=(200, 30, 30), mode: str = "RGB") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.new(mode, size, color).save(path)
        return path

    return _make


class RecordingListener(JobListener):
    def __init__(self) -> None:
        self.events: List[Tuple[str, object]] = []

    def status(self, message: str) -> None:
        self.events.append(("status", message))

    def progress(self, percent: int) -> None:
        self.events.append(("progress", percent))

    def finished(self, output_path: str) -> None:
        self.events.append(("finished", output_path))

    def failed(self, message: str) -> None:
        self.events.append(("failed", message))

    def of(self, kind: str) -> list:
        return [v for k, v in self.events if k == kind]


@pytest.fixture
def listener() -> RecordingListener:
    return RecordingListener()
