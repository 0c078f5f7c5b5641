"""Tests for Azure error classification."""

import pytest
from azure.core.exceptions import ServiceRequestError

from azurerm_plugin.providers.azure.errors import response_was_not_found, wrap_error


@pytest.mark.unit
class TestAzureErrors:

    def test_typed_not_found(self, not_found):
        assert response_was_not_found(not_found())

    def test_http_404(self, http_error):
        assert response_was_not_found(http_error(404))

    @pytest.mark.parametrize("status", [400, 403, 409, 500])
    def test_other_statuses(self, http_error, status):
        assert not response_was_not_found(http_error(status))

    def test_transport_error(self):
        assert not response_was_not_found(ServiceRequestError("connection reset"))
        assert not response_was_not_found(None)

    def test_wrap_error(self, http_error):
        error = wrap_error("delete", "/subscriptions/sub/resourceGroups/rg", "deleting thing", http_error(409, "conflict"))

        assert error.operation == "delete"
        assert error.resource_id == "/subscriptions/sub/resourceGroups/rg"
        assert error.details == 409
        assert str(error).startswith("deleting thing: ")
