"""Custom exceptions for securelink."""


class UnqualifiedRule(Exception):
    """Raised when a detail rule cannot carry a token segment.

    The rule is skipped and every other rule of the content type is still
    augmented.
    """


class StorageUnavailable(Exception):
    """Raised when the stored token of an item cannot be read."""


class Unauthorized(Exception):
    """Terminates the request with a 401 response and no content.

    The subclasses exist for logging and tests only: both render the same
    status and message.
    """

    status_code = 401

    def __init__(self, message: str = 'Invalid access', item_id: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.item_id = item_id


class MissingToken(Unauthorized):
    """A protected item was reached without a token."""


class TokenMismatch(Unauthorized):
    """The supplied token differs from the stored one, or none is stored."""
