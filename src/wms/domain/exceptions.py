"""Domain-level exceptions.

All invalid-argument failures are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """An argument was missing or violated a business rule."""


class DuplicateEntityError(ValidationError):
    """An entity with the same identifier already exists."""


class EntityNotFoundError(ValidationError):
    """A requested entity does not exist."""
