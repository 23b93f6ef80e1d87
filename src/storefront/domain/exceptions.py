"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display the message verbatim.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidCartError(ValidationError):
    """A cart line carries data that cannot be priced."""


class EmptyCartError(ValidationError):
    """Checkout was attempted with no items in the cart."""


class InvalidTransitionError(ValidationError):
    """A status change was attempted on an order in a terminal state."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
