"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

Each kind carries the HTTP-equivalent ``status`` and the CLI ``exit_code``
it maps to at the boundary.
"""


class DomainException(Exception):
    """Base class for all domain errors."""

    status = 500
    exit_code = 1


class ValidationError(DomainException):
    """Malformed input, or a business rule or invariant was violated."""

    status = 400
    exit_code = 2


class AuthError(DomainException):
    """Missing or invalid identity, or the caller does not own the entity."""

    status = 401
    exit_code = 3


class NotFoundError(DomainException):
    """A requested entity does not exist."""

    status = 404
    exit_code = 4


class ConflictError(DomainException):
    """A state transition is not allowed from the entity's current state."""

    status = 409
    exit_code = 5
