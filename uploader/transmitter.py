"""Single-chunk transmission over HTTP."""

import httpx

from common.constants import CHUNK_ENDPOINT
from common.logging_config import get_logger
from uploader.exceptions import TransferFailure

logger = get_logger(__name__)


class ChunkTransmitter:
    """Sends one chunk per call to the chunk endpoint. Never retries."""

    def __init__(self, session: httpx.Client, endpoint: str = CHUNK_ENDPOINT):
        """
        Initialize chunk transmitter.

        Args:
            session: HTTP client (base_url and timeout already configured)
            endpoint: Chunk endpoint path
        """
        self.session = session
        self.endpoint = endpoint

    def send(self, upload_id: str, index: int, payload: bytes) -> None:
        """
        Upload one chunk.

        Args:
            upload_id: Session identifier
            index: 0-based chunk index
            payload: The chunk's bytes

        Raises:
            TransferFailure: On a non-2xx status or any transport error
        """
        data = {'upload_id': upload_id, 'index': str(index)}
        files = {'chunk': ('blob', payload, 'application/octet-stream')}

        logger.debug(f"Sending chunk {index} ({len(payload)} bytes) [upload_id={upload_id}]")
        try:
            response = self.session.post(self.endpoint, data=data, files=files)
        except httpx.HTTPError as e:
            logger.debug(f"Chunk {index} transport error: {e!r} [upload_id={upload_id}]")
            raise TransferFailure(f"Chunk {index} transport error: {type(e).__name__}") from e

        if not response.is_success:
            raise TransferFailure(f"Chunk {index} rejected: status={response.status_code}")

        logger.debug(f"Chunk {index} accepted [upload_id={upload_id}]")
