from __future__ import annotations

import logging
import threading
from typing import Optional

from src.config.api import ConversionConfig, default_config
from .model import JobListener, JobResult
from .pipeline import ConversionPipeline

logger = logging.getLogger(__name__)


class JobAlreadyRunningError(RuntimeError):
    pass


class JobHandle:
    def __init__(self, folder_path: str) -> None:
        self.folder_path = folder_path
        self._done = threading.Event()
        self._result: Optional[JobResult] = None

    @property
    def done(self) -> bool:
        return self._done.is_set()

    @property
    def result(self) -> Optional[JobResult]:
        return self._result

    def wait(self, timeout: Optional[float] = None) -> Optional[JobResult]:
        self._done.wait(timeout)
        return self._result

    def _finish(self, result: Optional[JobResult]) -> None:
        self._result = result
        self._done.set()


class JobRunner:
    """Runs conversion jobs in a background thread, one at a time."""

    def __init__(self, config: Optional[ConversionConfig] = None) -> None:
        self.config = config or default_config()
        self._lock = threading.Lock()
        self._active: Optional[JobHandle] = None

    @property
    def busy(self) -> bool:
        with self._lock:
            return self._active is not None and not self._active.done

    def start(
        self,
        folder_path: str,
        listener: Optional[JobListener] = None,
        config: Optional[ConversionConfig] = None,
    ) -> JobHandle:
        with self._lock:
            if self._active is not None and not self._active.done:
                raise JobAlreadyRunningError(f"a conversion is already running for {self._active.folder_path}")
            handle = JobHandle(folder_path)
            self._active = handle

        try:
            pipeline = ConversionPipeline(config or self.config, listener)
            t = threading.Thread(target=self._run, args=(pipeline, handle), name="conversion-job", daemon=True)
            t.start()
        except BaseException:
            # the job never ran; release the slot
            handle._finish(None)
            raise
        return handle

    def _run(self, pipeline: ConversionPipeline, handle: JobHandle) -> None:
        result: Optional[JobResult] = None
        try:
            result = pipeline.run(handle.folder_path)
        except Exception:
            # only reachable when a listener's terminal callback raises
            logger.exception("conversion job for %s raised after reaching %s", handle.folder_path, pipeline.status.value)
        finally:
            handle._finish(result)
