"""Pre-flight size check."""

from common.constants import MEGABYTE
from uploader.exceptions import SizeExceeded


def exceeds_limit(file_size: int, max_mb: int) -> bool:
    """Return True if ``file_size`` bytes is over ``max_mb`` megabytes."""
    return file_size > max_mb * MEGABYTE


def check_size(file_size: int, max_mb: int) -> None:
    """
    Raise SizeExceeded if the file is over the limit.

    Raises:
        SizeExceeded: Carrying ``max_mb`` for display
    """
    if exceeds_limit(file_size, max_mb):
        raise SizeExceeded(max_mb)
