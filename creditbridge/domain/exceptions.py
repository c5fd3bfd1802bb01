"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ProfileNotFoundError(DomainException):
    """No stored profile for the requested user"""

    pass
