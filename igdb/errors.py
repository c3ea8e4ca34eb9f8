"""Exceptions raised by the IGDB client.

Every error the package raises derives from :class:`IGDBError`, so callers
can catch a single type or one of the sentinel subclasses below.  Services
add context (which operation, which resource) with :meth:`IGDBError.annotate`
and re-raise the same instance, so ``except NoResultsError`` keeps working
no matter how deep the error came from.
"""
from typing import List, Optional


class IGDBError(Exception):
    """Base class for all IGDB client errors."""

    default_message = 'igdb error'

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        self.context: List[str] = []
        super().__init__(self.message)

    def annotate(self, context: str) -> 'IGDBError':
        """Prefix *context* to the error text and return ``self``."""
        self.context.insert(0, context)
        return self

    def __str__(self) -> str:
        return ': '.join(self.context + [self.message])


# ---------------------------------------------------------------------------
# Sentinel errors
# ---------------------------------------------------------------------------

class NegativeIDError(IGDBError):
    """Raised when an IGDB ID below zero is passed to a service."""

    default_message = 'ID cannot be negative'


class EmptyIDsError(IGDBError):
    """Raised when an empty list of IDs is passed to a service."""

    default_message = 'IDs argument cannot be empty'


class InvalidJSONError(IGDBError):
    """Raised when a response body is empty, malformed or the wrong shape."""

    default_message = 'unexpected end of JSON input or invalid JSON'


class OutOfRangeError(IGDBError):
    """Raised when an option value falls outside the range the API accepts."""

    default_message = 'provided option value is out of range'


class NoResultsError(IGDBError):
    """Raised when the API answers with an empty JSON array."""

    default_message = 'results are empty'


class EmptyQueryError(IGDBError):
    """Raised when a search query or filter value is blank."""

    default_message = 'provided option query value is empty'


class EmptyFieldsError(IGDBError):
    """Raised when a field name passed to an option is blank."""

    default_message = 'one or more provided option field values are empty'


# ---------------------------------------------------------------------------
# Transport / server errors
# ---------------------------------------------------------------------------

class RequestError(IGDBError):
    """Raised when the HTTP request itself fails (DNS, timeout, reset...)."""

    default_message = 'request to IGDB failed'


class ServerError(IGDBError):
    """Raised when IGDB answers with a non-2xx status code.

    Attributes:
        status:    HTTP status code returned by the server.
        temporary: ``True`` when repeating the request later may succeed.
    """

    default_message = 'IGDB returned an error status'
    temporary = False

    def __init__(self, status: int, message: Optional[str] = None) -> None:
        self.status = status
        super().__init__(message)

    def __str__(self) -> str:
        return ': '.join(self.context + [f'status {self.status}', self.message])


class BadRequestError(ServerError):
    default_message = 'bad request: check query parameters'


class UnauthorizedError(ServerError):
    default_message = 'authentication failed: check for valid API key in user-key header'


class ForbiddenError(ServerError):
    default_message = 'authentication failed: check for valid API key and plan'


class TooManyRequestsError(ServerError):
    default_message = 'request limit exceeded'
    temporary = True


class InternalServerError(ServerError):
    default_message = 'internal error: report bug'
    temporary = True


_STATUS_ERRORS = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    429: TooManyRequestsError,
}


def error_for_status(status: int, message: Optional[str] = None) -> ServerError:
    """Return the :class:`ServerError` subclass instance matching *status*."""
    if status >= 500:
        return InternalServerError(status, message)
    return _STATUS_ERRORS.get(status, ServerError)(status, message)


class ConfigError(IGDBError):
    """Raised when the client configuration is missing or unusable."""

    default_message = 'invalid IGDB configuration'
