from __future__ import annotations

from typing import Optional

from src.config.api import ConversionConfig
from .model import ConversionJob, ErrorKind, JobListener, JobResult, JobStatus
from .pipeline import STATUS_COMPOSING, STATUS_SCANNING, ConversionPipeline, PipelineStateError
from .runner import JobAlreadyRunningError, JobHandle, JobRunner

_runner = JobRunner()


def convert_folder(
    folder_path: str,
    listener: Optional[JobListener] = None,
    config: Optional[ConversionConfig] = None,
) -> JobResult:
    """Public API (ConversionPipeline), synchronous

    Contract:
    - Idle -> Scanning -> Composing -> Completed|Failed, one fresh pipeline per call.
    - listener.status before each phase, listener.progress per page (during Composing).
    - Exactly one terminal event: listener.finished(output_path) or listener.failed(message).
    - Errors never escape: the returned JobResult carries error_kind + message.
    - Output: <folder>/<config.output_filename>, overwritten on success.
    """
    return ConversionPipeline(config, listener).run(folder_path)


def start_conversion(
    folder_path: str,
    listener: Optional[JobListener] = None,
    config: Optional[ConversionConfig] = None,
) -> JobHandle:
    """Public API (ConversionPipeline), background

    Contract:
    - Same job semantics as convert_folder, executed in a daemon thread.
    - Listener methods are called from that thread.
    - One job at a time: raises JobAlreadyRunningError while a job is in flight.
    """
    return _runner.start(folder_path, listener, config)
