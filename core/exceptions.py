"""Custom exception classes for the application.

Defines domain-specific exceptions that can be raised throughout the
application and handled consistently by exception handlers.
"""

from typing import Optional, Any, Dict, List


class AppException(Exception):
    """Base exception class for all application exceptions.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code to return.
        details: Optional additional error details.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        """Initialize application exception.

        Args:
            message: Error message.
            status_code: HTTP status code (default: 500).
            details: Optional dictionary with additional error context.
        """
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(AppException):
    """Exception raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: Any):
        """Initialize not found error.

        Args:
            resource: Type of resource (e.g., 'Recipe').
            identifier: ID or identifier that was not found.
        """
        message = f"{resource} with id '{identifier}' not found"
        super().__init__(message, status_code=404, details={"resource": resource, "id": identifier})


class ValidationError(AppException):
    """Exception raised when input validation fails.

    `errors` holds every offending field as `{"field", "message"}` so callers
    can show all problems at once instead of the first one.
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        errors: Optional[List[Dict[str, str]]] = None
    ):
        """Initialize validation error.

        Args:
            message: Validation error message.
            field: Optional field name that failed validation.
            errors: Optional list of field/message pairs.
        """
        details: Dict[str, Any] = {}
        if field:
            details["field"] = field
        if errors:
            details["errors"] = errors
        self.errors = errors or []
        super().__init__(message, status_code=400, details=details)


class NoRecipesAvailableError(AppException):
    """Raised when meal plan generation finds no candidate recipes at all.

    This is a catalog problem rather than bad caller input, so it maps to 500.
    """

    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message or (
                "No approved recipes available in the database. "
                "Please add some recipes first or check your database connection."
            ),
            status_code=500,
            details={"type": "no_recipes_available"},
        )


class AuthenticationError(AppException):
    """Exception raised when a request has no identifiable requester."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, status_code=401)


class DatabaseError(AppException):
    """Exception raised when database operations fail."""

    def __init__(self, message: str, operation: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        """Initialize database error.

        Args:
            message: Database error message.
            operation: Optional operation that failed (e.g., 'create', 'update').
            details: Optional extra context merged into the error details.
        """
        merged = dict(details or {})
        if operation:
            merged["operation"] = operation
        super().__init__(message, status_code=500, details=merged)


class ConfigurationError(AppException):
    """Exception raised when application configuration is invalid."""

    def __init__(self, message: str, config_key: Optional[str] = None):
        """Initialize configuration error.

        Args:
            message: Configuration error message.
            config_key: Optional configuration key that is invalid.
        """
        details = {"config_key": config_key} if config_key else {}
        super().__init__(message, status_code=500, details=details)
