"""Errors raised by the URL data scraper."""


class MissingUrlError(ValueError):
    """No URL was submitted."""

    def __init__(self, message: str = "URL is not specified"):
        super().__init__(message)


class ExtractionError(RuntimeError):
    """Fetching, rendering or parsing a page failed."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"URL extraction failed: {reason}")
