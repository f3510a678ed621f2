"""Exception classes for the upload core."""


class UploadError(Exception):
    """
    Base exception class for all upload errors.
    """
    pass


class SizeExceeded(UploadError):
    """
    Raised before any network activity when a file is larger than the configured limit.
    """

    def __init__(self, max_mb: int):
        self.max_mb = max_mb
        super().__init__(f"File too large (Max {max_mb}MB)")


class TransferFailure(UploadError):
    """
    Raised when a chunk request is not ok or the transport fails.
    """

    def __init__(self, message: str = "Chunk transfer failed"):
        super().__init__(message)


class FinalizeFailure(UploadError):
    """
    Raised when the completion request is not ok or the transport fails.
    """

    def __init__(self, message: str = "Finalize request failed"):
        super().__init__(message)


class UploadFailed(UploadError):
    """
    Generic failure reported to the user for any transfer or finalize error.

    The specific cause is kept in ``__cause__`` for logging only.
    """

    def __init__(self, message: str = "Upload Failed"):
        super().__init__(message)
