"""
Error taxonomy for the record access layer.

Repositories raise these exceptions; endpoints translate them into
HTTP responses.  ``RecordNotFoundError`` and ``DuplicateRecordError``
subclass ``ValueError`` so callers that only care about "bad input"
can catch them together.
"""


class RecordError(Exception):
    """Base class for record access failures."""


class RecordNotFoundError(RecordError, ValueError):
    """No record matches the requested identity."""


class DuplicateRecordError(RecordError, ValueError):
    """A store uniqueness constraint rejected the write."""


class StoreUnavailableError(RecordError):
    """The backing store could not be reached in time."""
