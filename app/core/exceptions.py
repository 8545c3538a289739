class NotesApiException(Exception):
    """Base exception for the notes API"""

    pass


class UnauthorizedException(NotesApiException):
    """Raised when the caller cannot be authenticated"""

    pass


class InvalidTokenException(UnauthorizedException):
    """Raised when a token is malformed, badly signed, or expired"""

    pass


class NotFoundException(NotesApiException):
    """Raised when resource not found in the caller's tenant"""

    pass


class ForbiddenException(NotesApiException):
    """Raised when the caller's role does not allow the operation"""

    pass


class TenantMismatchException(ForbiddenException):
    """Raised when an admin targets a tenant other than their own"""

    pass


class QuotaExceededException(NotesApiException):
    """Raised when a FREE tenant has reached its note limit"""

    pass


class ValidationException(NotesApiException):
    """Raised for business logic validation errors"""

    pass
