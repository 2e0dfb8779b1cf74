"""Domain-level exceptions.

All failures a caller may need to tell apart are expressed as subclasses of
DomainException so the CLI layer can catch them uniformly and display
user-friendly messages.  Not-found is *not* an exception at the repository
boundary: lookups return ``None`` and writes return ``False``.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class ConflictError(DomainException):
    """A uniqueness rule (e.g. category name) would be violated."""


class PersistenceError(DomainException):
    """The store failed; the surrounding transaction has been rolled back."""
