"""Single-request upload for files that do not need chunking."""

import httpx

from common.constants import AJAX_HEADERS, DEFAULT_MAX_MB, DIRECT_ENDPOINT
from common.logging_config import get_logger
from uploader.size_guard import check_size
from uploader.exceptions import TransferFailure
from uploader.types import LocalFile

logger = get_logger(__name__)


class DirectUploader:
    """Posts a whole file as the multipart ``file`` field of one request."""

    def __init__(self, session: httpx.Client, max_mb: int = DEFAULT_MAX_MB, endpoint: str = DIRECT_ENDPOINT):
        self.session = session
        self.max_mb = max_mb
        self.endpoint = endpoint

    def send(self, file: LocalFile) -> str:
        """
        Upload ``file`` in a single request.

        Args:
            file: File to upload; its body is streamed from disk

        Returns:
            Response body, unparsed

        Raises:
            SizeExceeded: If the file is over the limit (no request is sent)
            TransferFailure: On a non-2xx status or any transport error
        """
        check_size(file.size, self.max_mb)

        logger.info(f"Direct upload of {file.name} ({file.size} bytes)")
        try:
            with file.open() as f:
                response = self.session.post(
                    self.endpoint,
                    files={'file': (file.name, f)},
                    headers=dict(AJAX_HEADERS),
                )
        except (httpx.HTTPError, OSError) as e:
            logger.warning(f"Direct upload of {file.name} failed: {type(e).__name__}")
            raise TransferFailure(f"Direct upload failed: {type(e).__name__}") from e

        if not response.is_success:
            logger.warning(f"Direct upload of {file.name} rejected: status={response.status_code}")
            raise TransferFailure(f"Server returned status {response.status_code}")

        return response.text
