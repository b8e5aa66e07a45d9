from typing import Optional


class UnifiNetworkError(Exception):
    """Base exception for UniFi Network API client errors."""

    pass


class UnifiConfigurationError(UnifiNetworkError):
    """Raised when the client cannot be built from the supplied configuration."""

    pass


class UnifiTransportError(UnifiNetworkError):
    """Raised when the HTTP transport fails (connection, TLS, timeout)."""

    def __init__(self, message: str, original: Optional[Exception] = None):
        super().__init__(message)
        self.original = original


class UnifiURLError(UnifiNetworkError):
    """Raised when the base URL or a request URL cannot be parsed."""

    pass


class UnifiAPIError(UnifiNetworkError):
    """
    Raised when the API answers with a non-success status code.

    Attributes:
        status_code: HTTP status code reported in the error envelope.
        message: Error message reported by the server.
    """

    def __init__(self, status_code: int, message: str):
        super().__init__(f"API error: {status_code} - {message}")
        self.status_code = status_code
        self.message = message


class UnifiDataError(UnifiNetworkError):
    """Raised when a response body cannot be decoded into the expected model."""

    pass
