# backend/app/exceptions.py


class ScreenerError(RuntimeError):
    """Base class for errors raised by the screening workflow."""


class PdfLibraryNotReady(ScreenerError):
    """Raised when text extraction is attempted before the PDF library is loaded."""


class PdfExtractionError(ScreenerError):
    """Raised when a file cannot be opened or read as a PDF."""


class RelayError(ScreenerError):
    """Raised when the relay answers with a non-success status.

    Carries the HTTP status so callers can tell configuration errors (500)
    from upstream failures forwarded by the relay.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class EmailDraftUnavailable(ScreenerError):
    """Raised when an outreach email is requested for a result that is not offered one."""
