"""Exception hierarchy for the Kraken client."""

from __future__ import annotations


class TwitchException(Exception):
    """Base exception for all libtwitch errors."""


class CredentialsError(TwitchException):
    """
    Raised when credentials can't be loaded from the environment or a file.
    """


class TokenRequired(TwitchException):
    """
    Raised when an endpoint scoped to a user is called without an OAuth token.

    No request is issued when this is raised.
    """

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"An OAuth token is required to access {path}")


class RequestError(TwitchException):
    """Base class for failures of an issued request."""


class TransportError(RequestError):
    """
    Raised on DNS, connection, TLS or timeout failures.

    The underlying exception is available as ``__cause__``.
    """


class StatusError(RequestError):
    """
    Raised when the API responds with a status outside of the 2xx range.

    Kraken error documents look like:
        {"error": "Unauthorized", "status": 401, "message": "invalid oauth token"}
    When the body is one, ``error`` and ``message`` are filled in from it.
    """

    def __init__(
        self,
        status: int,
        body: str,
        *,
        error: str | None = None,
        message: str | None = None,
    ):
        self.status = status
        self.body = body
        self.error = error
        self.message = message
        text = f"HTTP {status}"
        if error:
            text += f" {error}"
        if message:
            text += f": {message}"
        super().__init__(text)


class DecodeError(RequestError):
    """Raised when the response body isn't JSON or doesn't match the expected model."""

    def __init__(self, message: str, body: str = ""):
        self.body = body
        super().__init__(message)


class EmptyResponseError(DecodeError):
    """Raised when a model was expected, but the response body was empty."""

    def __init__(self):
        super().__init__("Received an empty response body")
