"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidRateTableError(DomainException):
    """Rate table entry violates min_rate <= default_rate <= max_rate"""

    pass


class InvalidProjectionError(DomainException):
    """Projection requested over a negative number of months"""

    pass
