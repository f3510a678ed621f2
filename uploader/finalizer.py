"""Completion request sent once every chunk is on the server."""

import httpx

from common.constants import AJAX_HEADERS, FINISH_ENDPOINT
from common.logging_config import get_logger
from uploader.exceptions import FinalizeFailure

logger = get_logger(__name__)


class FinalizeRequester:
    """Asks the server to assemble an upload and returns its display fragment."""

    def __init__(self, session: httpx.Client, endpoint: str = FINISH_ENDPOINT):
        self.session = session
        self.endpoint = endpoint

    def finalize(self, upload_id: str, filename: str, total: int) -> str:
        """
        Send the completion request.

        Args:
            upload_id: Session identifier
            filename: Original file name
            total: Number of chunks sent

        Returns:
            Response body, unparsed

        Raises:
            FinalizeFailure: On a non-2xx status or any transport error
        """
        data = {'upload_id': upload_id, 'filename': filename, 'total': str(total)}

        logger.debug(f"Finalizing {filename} ({total} chunks) [upload_id={upload_id}]")
        try:
            response = self.session.post(self.endpoint, data=data, headers=dict(AJAX_HEADERS))
        except httpx.HTTPError as e:
            logger.debug(f"Finalize transport error: {e!r} [upload_id={upload_id}]")
            raise FinalizeFailure(f"Finalize transport error: {type(e).__name__}") from e

        if not response.is_success:
            raise FinalizeFailure(f"Finalize rejected: status={response.status_code}")

        return response.text
