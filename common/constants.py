"""Project-wide constants (chunk size, size limits, endpoint contracts)."""

MEGABYTE: int = 1024 * 1024
UPLOAD_CHUNK_SIZE: int = 8 * MEGABYTE  # 8 MiB default chunk size
DEFAULT_MAX_MB: int = 512

CHUNK_ENDPOINT = "/upload/chunk"
FINISH_ENDPOINT = "/upload/finish"
DIRECT_ENDPOINT = "/"

AJAX_HEADERS = {"X-Requested-With": "XMLHttpRequest"}

# Shape of upload ids the server accepts
UPLOAD_ID_PATTERN = r"^[a-zA-Z0-9]{10,50}$"
UPLOAD_ID_LENGTH = 13
