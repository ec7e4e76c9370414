from typing import Optional, Any


class ContactIntakeError(Exception):
    """
    Base exception for the contact intake service.
    """
    def __init__(self, message: str, code: str = "INTERNAL_ERROR", status_code: int = 500, details: Optional[Any] = None):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class InvalidInputError(ContactIntakeError):
    """
    Raised when a submission is missing required fields or has a malformed email.
    """
    def __init__(self, message: str = "Missing or invalid fields", details: Optional[Any] = None):
        super().__init__(message, code="INVALID_INPUT", status_code=400, details=details)


class PersistenceError(ContactIntakeError):
    """
    Raised when the database is unavailable or rejects a write.
    """
    def __init__(self, message: str = "Database error", details: Optional[Any] = None):
        super().__init__(message, code="DATABASE_ERROR", status_code=500, details=details)


class NotFoundError(ContactIntakeError):
    """
    Raised when a requested submission does not exist.
    """
    def __init__(self, message: str = "Not found", details: Optional[Any] = None):
        super().__init__(message, code="NOT_FOUND", status_code=404, details=details)


class NotificationError(ContactIntakeError):
    """
    Raised when the SMS gateway could not be reached.
    The submission workflow absorbs it; it never reaches the client.
    """
    def __init__(self, message: str = "SMS gateway error", details: Optional[Any] = None):
        super().__init__(message, code="NOTIFICATION_FAILED", status_code=502, details=details)


class NotificationTransportError(NotificationError):
    """
    Connection-level failure talking to the SMS gateway.
    """


class NotificationTimeoutError(NotificationError):
    """
    The SMS gateway did not answer within the request timeout.
    """
    def __init__(self, message: str = "SMS request timed out", details: Optional[Any] = None):
        super().__init__(message, details=details)
