# src/azurerm_plugin/domain/core/exceptions.py
from typing import Any, Dict, List, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ValidationError(DomainException):
    """Raised when local validation fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class ConfigValidationError(ValidationError):
    """Raised when a resource configuration fails field-level validation."""
    def __init__(self, resource_type: str, errors: Dict[str, List[str]]):
        summary = "; ".join(
            f"{field}: {message}"
            for field, messages in errors.items()
            for message in messages
        )
        super().__init__(f"Configuration validation failed for {resource_type}: {summary}", errors)
        self.resource_type = resource_type
        self.errors = errors


class ResourceNotFoundError(DomainException):
    """Raised when a remote object that must exist cannot be found."""
    def __init__(self, message: str, resource_id: Optional[str] = None):
        super().__init__(message)
        self.resource_id = resource_id


class ResourceAlreadyExistsError(DomainException):
    """Raised when creating a resource that already exists remotely."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            f"A resource with the ID {resource_id!r} already exists - to be managed "
            f"via this plugin it needs to be imported into the state. Please see the "
            f"documentation for {resource_type!r} for more information."
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class InvalidResourceIdError(ValidationError):
    """Raised when a resource identifier cannot be parsed or built."""
    pass


class OperationTimeoutError(DomainException):
    """Raised when an operation exhausts its deadline."""
    def __init__(self, operation: str, timeout: float):
        super().__init__(f"{operation} timed out after {timeout:g} seconds")
        self.operation = operation
        self.timeout = timeout


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []
