"""Sequential chunked upload driver."""

from common.constants import DEFAULT_MAX_MB, UPLOAD_CHUNK_SIZE
from common.logging_config import get_logger
from uploader.exceptions import SizeExceeded, TransferFailure, UploadError, UploadFailed
from uploader.finalizer import FinalizeRequester
from uploader.partitioner import count_chunks, plan_chunks
from uploader.session_id import IdGenerator, generate_random_id
from uploader.sink import UploadSink
from uploader.size_guard import check_size
from uploader.transmitter import ChunkTransmitter
from uploader.types import (
    Completed,
    Failed,
    FileSource,
    Rejected,
    UploadOutcome,
    UploadSession,
    UploadState,
)

logger = get_logger(__name__)

ALLOWED_TRANSITIONS = {
    UploadState.IDLE: {UploadState.VALIDATING},
    UploadState.VALIDATING: {UploadState.REJECTED, UploadState.UPLOADING, UploadState.FINALIZING},
    UploadState.UPLOADING: {UploadState.UPLOADING, UploadState.FINALIZING, UploadState.FAILED},
    UploadState.FINALIZING: {UploadState.COMPLETED, UploadState.FAILED},
}


class UploadOrchestrator:
    """
    Drives one upload attempt from size check to finalize.

    Chunks are sent strictly in index order and each result is awaited before
    the next request is issued. The first failure ends the attempt; nothing is
    retried and the server is not told about the abort. An orchestrator runs a
    single attempt; start a new one with a new orchestrator.
    """

    def __init__(
        self,
        transmitter: ChunkTransmitter,
        finalizer: FinalizeRequester,
        sink: UploadSink,
        max_mb: int = DEFAULT_MAX_MB,
        chunk_size: int = UPLOAD_CHUNK_SIZE,
        id_generator: IdGenerator = generate_random_id,
    ):
        """
        Initialize orchestrator.

        Args:
            transmitter: Sends individual chunks
            finalizer: Sends the completion request
            sink: Receives progress, result and error reports
            max_mb: Maximum upload size in megabytes
            chunk_size: Chunk size in bytes
            id_generator: Produces the upload id for this attempt
        """
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be > 0, got {chunk_size}")
        self.transmitter = transmitter
        self.finalizer = finalizer
        self.sink = sink
        self.max_mb = max_mb
        self.chunk_size = chunk_size
        self.id_generator = id_generator

        self.state = UploadState.IDLE
        self.current_index: int | None = None
        self.session: UploadSession | None = None
        self.completed_chunks = 0
        self.outcome: UploadOutcome | None = None

    @property
    def progress(self) -> float:
        """Fraction of chunks acknowledged by the server."""
        if self.session is None or self.session.total_chunks == 0:
            return 1.0 if self.state == UploadState.COMPLETED else 0.0
        return self.completed_chunks / self.session.total_chunks

    def _transition(self, new_state: UploadState) -> None:
        if self.state.is_terminal:
            raise RuntimeError(f"Upload attempt already ended as {self.state.value}")
        if new_state not in ALLOWED_TRANSITIONS.get(self.state, set()):
            raise RuntimeError(f"Invalid upload transition: {self.state.value} -> {new_state.value}")
        logger.debug(f"Upload state {self.state.value} -> {new_state.value}")
        self.state = new_state

    def run(self, file: FileSource) -> UploadOutcome:
        """
        Upload ``file`` and report the outcome to the sink exactly once.

        Args:
            file: File to upload

        Returns:
            Completed, Rejected or Failed

        Raises:
            RuntimeError: If this orchestrator already ran an attempt
        """
        if self.state != UploadState.IDLE:
            raise RuntimeError("Upload attempt already started; use a new orchestrator")

        self._transition(UploadState.VALIDATING)
        try:
            check_size(file.size, self.max_mb)
        except SizeExceeded as e:
            logger.info(f"Rejected {file.name}: {file.size} bytes exceeds {self.max_mb}MB limit")
            return self._finish(UploadState.REJECTED, Rejected(reason=e))

        self.session = UploadSession(
            upload_id=self.id_generator(),
            chunk_size=self.chunk_size,
            total_chunks=count_chunks(file.size, self.chunk_size),
            file_name=file.name,
            file_size=file.size,
        )
        upload_id = self.session.upload_id
        logger.info(
            f"Starting upload of {file.name} ({file.size} bytes, "
            f"{self.session.total_chunks} chunks) [upload_id={upload_id}]"
        )

        try:
            self._send_chunks(file)
            self._transition(UploadState.FINALIZING)
            payload = self.finalizer.finalize(upload_id, file.name, self.session.total_chunks)
        except UploadError as e:
            failed_in = self.state.value
            failure = UploadFailed()
            failure.__cause__ = e
            # the sink closes the progress line; log after it
            outcome = self._finish(UploadState.FAILED, Failed(reason=failure))
            logger.error(f"Upload of {file.name} failed in state {failed_in}: {e} [upload_id={upload_id}]")
            return outcome

        if self.session.total_chunks == 0:
            self.sink.report_progress(1.0)
        logger.info(f"Upload of {file.name} completed [upload_id={upload_id}]")
        return self._finish(UploadState.COMPLETED, Completed(payload=payload))

    def _send_chunks(self, file: FileSource) -> None:
        session = self.session
        for chunk_range in plan_chunks(session.file_size, session.chunk_size):
            self._transition(UploadState.UPLOADING)
            self.current_index = chunk_range.index
            try:
                payload = file.read_range(chunk_range)
            except OSError as e:
                raise TransferFailure(f"Cannot read chunk {chunk_range.index}: {e}") from e

            self.transmitter.send(session.upload_id, chunk_range.index, payload)

            self.completed_chunks = chunk_range.index + 1
            self.sink.report_progress(self.completed_chunks / session.total_chunks)

    def _finish(self, state: UploadState, outcome: UploadOutcome) -> UploadOutcome:
        self._transition(state)
        self.outcome = outcome
        if isinstance(outcome, Completed):
            self.sink.report_result(outcome.payload)
        else:
            self.sink.report_error(outcome.reason)
        return outcome
