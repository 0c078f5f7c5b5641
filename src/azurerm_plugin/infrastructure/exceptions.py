from typing import Optional, Any


class InfrastructureError(Exception):
    """Base exception for infrastructure-related errors."""
    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.details = details


class RemoteOperationError(InfrastructureError):
    """Raised when a remote management API call fails for a reason other than not found."""
    def __init__(self, operation: str, resource_id: str, message: str, details: Optional[Any] = None):
        super().__init__(message, details)
        self.operation = operation
        self.resource_id = resource_id


class CredentialsError(InfrastructureError):
    """Raised when there's an issue with credentials."""
    pass


class UnsupportedResourceTypeError(InfrastructureError):
    """Raised when an unknown resource or data source type is requested."""
    pass
