from __future__ import annotations

import logging
import os
from typing import Optional, Tuple, Type

from src.assetscanner.assetscanner import AssetScanner, FolderNotFoundError, NoImagesFoundError
from src.composer.composer import DocumentComposer, ImageLoadFailure, OutputWriteFailure, WriterInitFailure
from src.config.api import ConversionConfig, default_config
from .model import ConversionJob, ErrorKind, JobListener, JobResult, JobStatus

logger = logging.getLogger(__name__)

STATUS_SCANNING = "Scanning folder..."
STATUS_COMPOSING = "Creating PDF..."

_ERROR_KINDS: Tuple[Tuple[Type[Exception], ErrorKind], ...] = (
    (FolderNotFoundError, ErrorKind.FOLDER_NOT_FOUND),
    (NoImagesFoundError, ErrorKind.NO_IMAGES_FOUND),
    (ImageLoadFailure, ErrorKind.IMAGE_LOAD_FAILURE),
    (WriterInitFailure, ErrorKind.WRITER_INIT_FAILURE),
    (OutputWriteFailure, ErrorKind.OUTPUT_WRITE_FAILURE),
)

_TRANSITIONS = {
    JobStatus.IDLE: (JobStatus.SCANNING,),
    JobStatus.SCANNING: (JobStatus.COMPOSING, JobStatus.FAILED),
    JobStatus.COMPOSING: (JobStatus.COMPLETED, JobStatus.FAILED),
}


class PipelineStateError(RuntimeError):
    pass


class ConversionPipeline:
    """Runs one conversion job: scan -> compose -> terminal event.

    An instance is single-use; create a new one per job.
    """

    def __init__(self, config: Optional[ConversionConfig] = None, listener: Optional[JobListener] = None) -> None:
        self.config = config or default_config()
        self.listener = listener or JobListener()
        self.job: Optional[ConversionJob] = None

    @property
    def status(self) -> JobStatus:
        return self.job.status if self.job else JobStatus.IDLE

    def run(self, folder_path: str) -> JobResult:
        if self.job is not None:
            raise PipelineStateError("a pipeline runs exactly one job")

        folder = os.path.abspath(folder_path) if folder_path else ""
        job = ConversionJob(
            folder_path=folder_path,
            config=self.config,
            output_path=os.path.join(folder, self.config.output_filename),
        )
        self.job = job

        try:
            result = self._execute(job)
        except Exception as e:
            result = self._failure(job, e)

        if result.ok:
            self.listener.finished(result.output_path)
        else:
            self.listener.failed(result.message)
        return result

    def _execute(self, job: ConversionJob) -> JobResult:
        cfg = job.config

        # SCAN
        self._transition(job, JobStatus.SCANNING)
        self.listener.status(STATUS_SCANNING)
        job.assets = AssetScanner(cfg).scan(job.folder_path)

        # COMPOSE
        self._transition(job, JobStatus.COMPOSING)
        self.listener.status(STATUS_COMPOSING)
        composed = DocumentComposer(cfg.dpi, cfg.points_per_inch).compose(
            job.assets, job.output_path, self.listener.progress
        )

        self._transition(job, JobStatus.COMPLETED)
        logger.info("job done: %d page(s) -> %s", composed.page_count, composed.output_path)
        return JobResult(
            status=JobStatus.COMPLETED,
            folder_path=job.folder_path,
            output_path=composed.output_path,
            page_sizes=tuple(composed.page_sizes),
        )

    def _failure(self, job: ConversionJob, error: Exception) -> JobResult:
        kind = self._kind_of(error)
        if kind is ErrorKind.INTERNAL:
            logger.exception("job failed unexpectedly in state %s", job.status.value)
            message = f"Unexpected error: {error}"
        else:
            logger.warning("job failed in state %s: %s: %s", job.status.value, kind.value, error)
            message = str(error)

        job.status = JobStatus.FAILED
        return JobResult(
            status=JobStatus.FAILED,
            folder_path=job.folder_path,
            error_kind=kind,
            message=message,
            failed_path=error.path if isinstance(error, ImageLoadFailure) else None,
        )

    def _kind_of(self, error: Exception) -> ErrorKind:
        for exc_type, kind in _ERROR_KINDS:
            if isinstance(error, exc_type):
                return kind
        return ErrorKind.INTERNAL

    def _transition(self, job: ConversionJob, target: JobStatus) -> None:
        if target not in _TRANSITIONS.get(job.status, ()):
            raise PipelineStateError(f"invalid transition {job.status.value} -> {target.value}")
        logger.info("job %s: %s -> %s", job.folder_path, job.status.value, target.value)
        job.status = target
