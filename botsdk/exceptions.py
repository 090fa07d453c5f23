"""Exception hierarchy for the Telegram Bot API SDK."""

from typing import Any, Dict, Optional


class SDKException(Exception):
    """Base class for every error raised by :mod:`botsdk`."""


class ValidationError(SDKException, ValueError):
    """A required argument is missing or out of bounds.

    Always raised before any network I/O takes place.
    """


class TransportError(SDKException):
    """The API answered with an HTTP status other than 200.

    Attributes:
        status_code: HTTP status code returned by the server.
        body: Raw response body text.
    """

    def __init__(self, status_code: int, body: str = "") -> None:
        """Initialise with the HTTP status code and raw body."""
        self.status_code = status_code
        self.body = body
        super().__init__(f"Telegram Bot API returned status {status_code}: {body}")


class DecodeError(SDKException):
    """The response body could not be decoded as a JSON envelope.

    The underlying parse failure is chained as ``__cause__``.

    Attributes:
        body: Raw response body text.
    """

    def __init__(self, message: str, body: str = "") -> None:
        """Initialise with a message that includes the parser's own error."""
        self.body = body
        super().__init__(message)


class ApiError(SDKException):
    """The envelope was parsed but reported ``ok: false``.

    Attributes:
        error_code: Remote ``error_code`` value.
        description: Remote ``description`` text, verbatim.
        parameters: Optional ``parameters`` object (``retry_after`` etc.).
    """

    def __init__(
        self,
        error_code: Optional[int],
        description: Optional[str],
        parameters: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialise from the fields of an error envelope."""
        self.error_code = error_code
        self.description = description
        self.parameters = parameters or {}
        super().__init__(f"Telegram API error code {error_code}: {description}")
