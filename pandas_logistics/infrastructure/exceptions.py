"""
Custom exceptions for the Infrastructure layer.
"""


class InfrastructureError(Exception):
    """Base class for exceptions in the infrastructure layer."""
    pass


class DatabaseUnavailableError(InfrastructureError):
    """The database did not answer a health probe."""
    pass


class PersistenceError(InfrastructureError):
    """A query or insert failed; the message is the raw driver error."""
    pass


class TrackingBackendError(InfrastructureError):
    """A tracking provider could not complete a lookup."""
    pass


class RequestValidationFailed(Exception):
    """
    Client input was rejected.

    The message is returned to the caller as-is with HTTP 400.
    """

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
