import threading
from pathlib import Path

import pytest

from src.pipeline.api import JobAlreadyRunningError, JobListener, JobRunner, start_conversion


class _Gate(JobListener):
    def __init__(self) -> None:
        self.entered = threading.Event()
        self.release = threading.Event()
        self.terminal = []

    def status(self, message: str) -> None:
        self.entered.set()
        self.release.wait(5)

    def finished(self, output_path: str) -> None:
        self.terminal.append(("finished", output_path))

    def failed(self, message: str) -> None:
        self.terminal.append(("failed", message))


def test_runs_in_background(tmp_path: Path, make_image, listener):
    make_image(tmp_path / "a.png", (10, 20))

    handle = JobRunner().start(str(tmp_path), listener)
    res = handle.wait(10)

    assert handle.done
    assert res is not None and res.ok
    assert handle.result is res
    assert listener.of("finished") == [str(tmp_path / "images.pdf")]


def test_rejects_second_job_while_running(tmp_path: Path, make_image):
    make_image(tmp_path / "a.png", (10, 20))
    runner = JobRunner()
    gate = _Gate()

    handle = runner.start(str(tmp_path), gate)
    assert gate.entered.wait(5)
    assert runner.busy

    with pytest.raises(JobAlreadyRunningError):
        runner.start(str(tmp_path))

    gate.release.set()
    assert handle.wait(10).ok
    assert not runner.busy
    assert gate.terminal == [("finished", str(tmp_path / "images.pdf"))]

    # failure of the previous job does not block the next one
    again = runner.start(str(tmp_path / "missing"))
    assert not again.wait(10).ok


def test_start_conversion(tmp_path: Path, make_image):
    make_image(tmp_path / "a.jpg", (30, 10))
    res = start_conversion(str(tmp_path)).wait(10)
    assert res is not None and res.ok
    assert res.page_count == 1


def test_failed_thread_start_frees_the_runner(tmp_path: Path, make_image, monkeypatch):
    make_image(tmp_path / "a.png", (10, 20))
    runner = JobRunner()

    def _no_threads(self):
        raise RuntimeError("can't start new thread")

    monkeypatch.setattr(threading.Thread, "start", _no_threads)
    with pytest.raises(RuntimeError):
        runner.start(str(tmp_path))
    assert not runner.busy

    monkeypatch.undo()
    assert runner.start(str(tmp_path)).wait(10).ok
