"""Domain-level exceptions.

Store reducers never raise these: they absorb bad input as no-ops.
Value objects and use cases raise them so the CLI layer can catch them
uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
