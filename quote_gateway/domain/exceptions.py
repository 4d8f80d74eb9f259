"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidPlanInputError(DomainException):
    """Plan inputs violate the engine contract (e.g. installment count <= 0)"""

    pass
