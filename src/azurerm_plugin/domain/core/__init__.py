"""Core domain types and exceptions."""
from .exceptions import (
    DomainException,
    ValidationError,
    ConfigValidationError,
    ResourceNotFoundError,
    ResourceAlreadyExistsError,
    InvalidResourceIdError,
    OperationTimeoutError,
    ConfigurationError,
)
from .common_types import Tags, normalize_location, normalize_location_nilable

__all__ = [
    'DomainException',
    'ValidationError',
    'ConfigValidationError',
    'ResourceNotFoundError',
    'ResourceAlreadyExistsError',
    'InvalidResourceIdError',
    'OperationTimeoutError',
    'ConfigurationError',
    'Tags',
    'normalize_location',
    'normalize_location_nilable',
]
