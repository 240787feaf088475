"""Errors raised by the wallet service and translated into 500 responses."""


class InternalError(Exception):
    """Base error surfaced to clients as HTTP 500 with its message."""
    status_code = 500

    def __init__(self, message: str = "Internal Server Error"):
        self.message = message
        super().__init__(message)


class DataFetchError(InternalError):
    """Raised when the wallet list cannot be built."""
