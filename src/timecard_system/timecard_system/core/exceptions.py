class DomainError(Exception):
    """Base exception for timecard rule violations."""


class ValidationError(DomainError):
    """Invalid user input: holiday dates, edited punch cells, request payloads."""


class NotFoundError(DomainError):
    """A referenced record (e.g. a user holiday id) does not exist."""
