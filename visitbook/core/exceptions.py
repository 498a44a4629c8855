"""Custom application exceptions."""


class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, status_code: int = 500):
        """Initialize exception with message and status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class ValidationException(AppException):
    """A required value is missing or empty."""

    def __init__(self, message: str = "Bad Request"):
        """Initialize with 400 status code."""
        super().__init__(message, status_code=400)


class FormatException(ValidationException):
    """A value is present but malformed."""

    def __init__(self, message: str = "Bad Request: Malformed value"):
        """Initialize with 400 status code."""
        super().__init__(message)


class NotFoundException(AppException):
    """Resource not found exception."""

    def __init__(self, message: str = "Resource not found"):
        """Initialize with 404 status code."""
        super().__init__(message, status_code=404)


class UnsupportedMediaTypeException(AppException):
    """Request body sent with a content type the endpoint does not accept."""

    def __init__(self, message: str = "Unsupported Media Type"):
        """Initialize with 415 status code."""
        super().__init__(message, status_code=415)


class StorageException(AppException):
    """The record store failed to complete an operation."""

    def __init__(self, message: str = "Internal Server Error"):
        """Initialize with 500 status code."""
        super().__init__(message, status_code=500)
