"""Domain-level exceptions.

Every rule violation raised by the domain or the services is a subclass
of DomainException, so outer layers can catch them in one place.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input failed a precondition (blank name, negative price, ...)."""


class NotFoundError(DomainException):
    """A referenced customer, product or order does not exist."""
