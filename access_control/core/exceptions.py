"""Access Control client exceptions.

Remote failures never surface as exceptions: they are returned inside the
``APIResponse`` envelope. The types below only cover mistakes on the caller side
that are detected before a request is sent.
"""


class AccessControlError(Exception):
    """Base exception for all Access Control client operations."""
    pass


class InvalidRequestError(AccessControlError, ValueError):
    """Request cannot be built from the supplied arguments.

    Attributes:
        message: Description of the invalid argument
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class MissingAccessTokenError(InvalidRequestError):
    """No access token was supplied for an authenticated call."""

    def __init__(self, message: str = "Access token is required"):
        super().__init__(message)
