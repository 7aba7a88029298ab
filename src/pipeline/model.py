from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from src.assetscanner.model import ImageAsset
from src.config.model import ConversionConfig
from src.pagegeometry.model import PageSize


class JobStatus(str, Enum):
    IDLE = "Idle"
    SCANNING = "Scanning"
    COMPOSING = "Composing"
    COMPLETED = "Completed"
    FAILED = "Failed"

    @property
    def terminal(self) -> bool:
        return self in (JobStatus.COMPLETED, JobStatus.FAILED)


class ErrorKind(str, Enum):
    FOLDER_NOT_FOUND = "FolderNotFound"
    NO_IMAGES_FOUND = "NoImagesFound"
    IMAGE_LOAD_FAILURE = "ImageLoadFailure"
    WRITER_INIT_FAILURE = "WriterInitFailure"
    OUTPUT_WRITE_FAILURE = "OutputWriteFailure"
    INTERNAL = "Internal"


@dataclass
class ConversionJob:
    folder_path: str
    config: ConversionConfig
    output_path: str
    assets: List[ImageAsset] = field(default_factory=list)
    status: JobStatus = JobStatus.IDLE


@dataclass(frozen=True)
class JobResult:
    status: JobStatus  # COMPLETED|FAILED
    folder_path: str
    output_path: Optional[str] = None
    page_sizes: Tuple[PageSize, ...] = ()
    error_kind: Optional[ErrorKind] = None
    message: str = ""
    failed_path: Optional[str] = None  # set for IMAGE_LOAD_FAILURE

    @property
    def ok(self) -> bool:
        return self.status is JobStatus.COMPLETED

    @property
    def page_count(self) -> int:
        return len(self.page_sizes)


class JobListener:
    """Receives job events. Methods are called from the thread running the job."""

    def status(self, message: str) -> None:
        pass

    def progress(self, percent: int) -> None:
        pass

    def finished(self, output_path: str) -> None:
        pass

    def failed(self, message: str) -> None:
        pass
