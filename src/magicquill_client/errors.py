"""Exceptions raised by the MagicQuill client."""


class MagicQuillError(Exception):
    """Base class for every error raised by this package."""


class MagicQuillAPIError(MagicQuillError):
    """The backend answered with an unexpected status code or body."""

    def __init__(self, status_code: int, detail: str):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"{status_code} - {detail}")


class EndpointNotAvailableError(MagicQuillAPIError):
    """The endpoint is not deployed on the backend (404/405)."""


class MagicQuillConnectionError(MagicQuillError):
    """The request never got an HTTP response."""


class InvalidImageError(MagicQuillError, ValueError):
    """A data URI or base64 string could not be decoded into an image."""
