class TravelAdminException(Exception):
    """Base exception for the travel admin API"""

    pass


class UnauthorizedException(TravelAdminException):
    """Raised when JWT validation fails or no tenant can be resolved"""

    pass


class NotFoundException(TravelAdminException):
    """Raised when no record matches the scoped filter"""

    pass


class ValidationException(TravelAdminException):
    """Raised for business logic validation errors"""

    pass


class InvalidIdentifierException(ValidationException):
    """Raised when a record identifier is not a well-formed reference"""

    pass


class StoreException(TravelAdminException):
    """
    Raised when the persistence layer fails.

    Carries a short description of the failed operation ("Failed to create
    bank") alongside the message of the underlying fault.
    """

    def __init__(self, operation: str, message: str):
        super().__init__(message)
        self.operation = operation
        self.message = message
