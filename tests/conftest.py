from unittest.mock import Mock

import pytest
from azure.core.exceptions import HttpResponseError, ResourceNotFoundError

SUBSCRIPTION_ID = "00000000-0000-0000-0000-000000000000"


@pytest.fixture
def subscription_id():
    return SUBSCRIPTION_ID


@pytest.fixture
def mock_azure_client():
    """Azure client whose service clients are plain mocks."""
    client = Mock()
    client.subscription_id = SUBSCRIPTION_ID
    return client


@pytest.fixture
def http_error():
    """Factory for management API errors with a given HTTP status."""
    def _make(status_code: int, message: str = "request failed") -> HttpResponseError:
        response = Mock()
        response.status_code = status_code
        response.reason = "Error"
        response.text.return_value = ""
        return HttpResponseError(message=message, response=response)
    return _make


@pytest.fixture
def not_found():
    """Factory for the SDK's typed not-found error."""
    def _make(message: str = "The resource was not found") -> ResourceNotFoundError:
        return ResourceNotFoundError(message=message)
    return _make
