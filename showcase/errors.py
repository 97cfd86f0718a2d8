"""Error taxonomy for the showcase API.

Every error carries the HTTP status it maps to and a user-facing message.
The API layer turns these into ``{"error": <message>}`` responses.
"""


class ShowcaseError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(ShowcaseError):
    """A required field is missing or malformed."""

    status_code = 400


class Unauthenticated(ShowcaseError):
    """No usable bearer credential on the request."""

    status_code = 401


class Forbidden(ShowcaseError):
    """Caller identity does not own the target resource."""

    status_code = 403


class NotFound(ShowcaseError):
    status_code = 404


class DuplicateRecord(InvalidInput):
    """A unique constraint (user email / external id) was violated."""


class StoreUnavailable(ShowcaseError):
    """The database could not complete the operation."""

    status_code = 500
