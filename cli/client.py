"""HTTP client for uploading files to a safebin server."""

import os
from typing import Optional
from urllib.parse import urlsplit

import httpx

from common.logging_config import get_logger
from cli.config import Config
from cli.utils import TerminalSink, format_file_size
from uploader.direct import DirectUploader
from uploader.exceptions import UploadError
from uploader.finalizer import FinalizeRequester
from uploader.orchestrator import UploadOrchestrator
from uploader.session_id import get_id_generator
from uploader.sink import UploadSink
from uploader.transmitter import ChunkTransmitter
from uploader.types import Completed, LocalFile, UploadOutcome

logger = get_logger(__name__)


class SafebinClient:
    """Owns the HTTP session and starts one fresh orchestrator per upload."""

    def __init__(self, config: Config):
        """
        Initialize safebin client.

        Args:
            config: Configuration instance
        """
        self.config = config
        self.session = httpx.Client(
            base_url=config.get_base_url(),
            timeout=config.get_timeout()
        )
        logger.info(f"Initialized SafebinClient [base_url={config.get_base_url()}]")

    def set_server(self, url: str) -> None:
        """Point the client at another server and remember it in config."""
        self.config.set_base_url(url)
        self.session.close()
        self.session = httpx.Client(
            base_url=self.config.get_base_url(),
            timeout=self.config.get_timeout()
        )

    @property
    def scheme(self) -> str:
        return urlsplit(self.config.get_base_url()).scheme or "http"

    def new_orchestrator(self, sink: UploadSink) -> UploadOrchestrator:
        """
        Build an orchestrator for a brand-new attempt.

        Args:
            sink: Receives progress and outcome reports

        Returns:
            Idle UploadOrchestrator sharing this client's HTTP session
        """
        return UploadOrchestrator(
            transmitter=ChunkTransmitter(self.session),
            finalizer=FinalizeRequester(self.session),
            sink=sink,
            max_mb=self.config.get_max_mb(),
            chunk_size=self.config.get_chunk_size(),
            id_generator=get_id_generator(self.config.get_upload_id_strategy()),
        )

    def upload(self, file: LocalFile, sink: UploadSink) -> UploadOutcome:
        """Run one chunked upload attempt for ``file``."""
        return self.new_orchestrator(sink).run(file)

    def _open_local(self, file_path: str) -> tuple[Optional[LocalFile], Optional[str]]:
        path = os.path.expanduser(file_path)
        if not os.path.exists(path):
            return None, f"Error: File not found: {file_path}"
        if not os.path.isfile(path):
            return None, f"Error: Not a file: {file_path}"
        try:
            return LocalFile(path), None
        except OSError as e:
            return None, f"Error: Cannot read {file_path}: {e}"

    def upload_files(self, file_paths: list[str]) -> str:
        """
        Upload files in chunks, one independent attempt per file.

        Args:
            file_paths: Paths of local files

        Returns:
            Formatted result message with one line per file
        """
        results = []

        for file_path in file_paths:
            file, error = self._open_local(file_path)
            if error:
                results.append(error)
                continue

            logger.info(f"Uploading {file.name} ({format_file_size(file.size)})")
            sink = TerminalSink(file.name, scheme=self.scheme)
            try:
                outcome = self.upload(file, sink)
            except ValueError as e:
                results.append(f"Error: Invalid configuration: {e}")
                continue

            if isinstance(outcome, Completed):
                results.append(sink.message)
            else:
                results.append(f"Error uploading {file_path}: {sink.message}")

        return '\n'.join(results) if results else "No files uploaded."

    def send_file(self, file_path: str) -> str:
        """
        Upload a file in a single request.

        Args:
            file_path: Path of a local file

        Returns:
            Formatted result message
        """
        file, error = self._open_local(file_path)
        if error:
            return error

        sink = TerminalSink(file.name, scheme=self.scheme)
        try:
            payload = DirectUploader(self.session, max_mb=self.config.get_max_mb()).send(file)
        except UploadError as e:
            sink.report_error(e)
            return f"Error uploading {file_path}: {sink.message}"

        sink.report_result(payload)
        return sink.message

    def describe_config(self) -> str:
        """Human-readable summary of the active configuration."""
        return (
            f"Server:      {self.config.get_base_url()}\n"
            f"Max size:    {self.config.get_max_mb()} MB\n"
            f"Chunk size:  {format_file_size(self.config.get_chunk_size())}\n"
            f"Timeout:     {self.config.get_timeout():.0f}s\n"
            f"Upload ids:  {self.config.get_upload_id_strategy()}\n"
            f"Config file: {self.config.config_path}"
        )

    def close(self) -> None:
        """Close the HTTP session."""
        self.session.close()
