"""Exceptions raised while fetching pages"""


class OgTagsError(Exception):
    """Base exception for the package"""
    def __init__(self, message: str, error_code: str | None = None):
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class FetchError(OgTagsError):
    """Raised when a page could not be downloaded"""
    def __init__(self, message: str = "Failed to fetch content from URL"):
        super().__init__(message, "FETCH_ERROR")


class HTTPFetchError(FetchError):
    """Raised when the server answers with a non-success status"""
    def __init__(self, status_code: int, message: str | None = None):
        if message is None:
            message = f"HTTP request failed with status code {status_code}"
        super().__init__(message)
        self.status_code = status_code
