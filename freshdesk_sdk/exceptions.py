"""Public exceptions for the Freshdesk SDK."""


class FreshdeskError(Exception):
    """Base exception for all Freshdesk SDK errors."""


class FreshdeskAPIError(FreshdeskError):
    """Error from the Freshdesk API or the network in front of it.

    ``status_code`` is None when the request never got a response.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class FreshdeskConfigError(FreshdeskError):
    """Configuration error (missing env vars, invalid config)."""


class FreshdeskValidationError(FreshdeskError):
    """Validation error for request/response data."""


class FreshdeskCursorExhaustedError(FreshdeskError):
    """Raised when asking a result cursor for a page it does not have."""
