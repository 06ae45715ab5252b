"""Domain-level exceptions.

All failures are expressed as subclasses of DomainException. The
catalog and cart services catch their own feed and storage errors, so
neither reaches a caller.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class StorageError(DomainException):
    """The durable cart slot could not be read or written."""


class FeedError(DomainException):
    """The catalog feed could not be fetched."""
