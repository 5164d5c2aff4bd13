"""
Error taxonomy for the account services.

Services raise these exceptions; the application registers a single
handler (see ``main.create_app``) that turns them into JSON responses
carrying ``status_code``.  Messages are safe to show to clients.
"""

from fastapi import status


class AccountError(Exception):
    """Base class for errors that map directly onto an HTTP response."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    # Key under which the message is returned in the response body.
    body_key: str = "message"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(AccountError):
    """A required field is missing or the body is malformed."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthError(AccountError):
    """Credentials did not match.

    Raised with the same text whether the email is unknown or the
    password is wrong, so callers cannot enumerate accounts.
    """

    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(AccountError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(AccountError):
    status_code = status.HTTP_409_CONFLICT


class ExternalServiceError(AccountError):
    """An upstream service (the mail server) failed.

    The message is generic; the underlying cause is only logged.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    body_key = "error"
