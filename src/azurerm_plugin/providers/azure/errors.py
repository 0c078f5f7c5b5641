"""Classification and wrapping of Azure management API errors."""
from typing import Optional

from azure.core.exceptions import HttpResponseError, ResourceNotFoundError as AzureResourceNotFoundError

from azurerm_plugin.infrastructure.exceptions import RemoteOperationError


def response_was_not_found(error: Optional[BaseException]) -> bool:
    """Whether a management API error means the remote object does not exist."""
    if isinstance(error, AzureResourceNotFoundError):
        return True
    if isinstance(error, HttpResponseError):
        return error.status_code == 404
    return False


def wrap_error(operation: str, resource_id: str, message: str, error: Exception) -> RemoteOperationError:
    """Add operation and resource context to a management API error."""
    return RemoteOperationError(
        operation=operation,
        resource_id=resource_id,
        message=f"{message}: {error}",
        details=getattr(error, "status_code", None),
    )
