"""Outbound reporting interface used by the orchestrator."""

from typing import Protocol

from uploader.exceptions import UploadError


class UploadSink(Protocol):
    """Receives progress, results and errors; owns all presentation."""

    def report_progress(self, fraction: float) -> None:
        ...

    def report_result(self, payload: str) -> None:
        ...

    def report_error(self, reason: UploadError) -> None:
        ...

