"""Unit tests for the Service Bus Namespace Authorization Rule data source."""

from types import SimpleNamespace
from unittest.mock import ANY

import pytest

from azurerm_plugin.domain.core.exceptions import ConfigValidationError, ResourceNotFoundError
from azurerm_plugin.infrastructure.exceptions import RemoteOperationError
from azurerm_plugin.providers.azure.servicebus import (
    NamespaceAuthorizationRuleDataSource,
    NamespaceAuthorizationRuleModel,
)

RULE_ID = (
    "/subscriptions/00000000-0000-0000-0000-000000000000/resourceGroups/example-rg"
    "/providers/Microsoft.ServiceBus/namespaces/example-namespace/authorizationRules/example-rule"
)


def access_keys():
    return SimpleNamespace(
        primary_key="pk-secret",
        secondary_key="sk-secret",
        primary_connection_string="Endpoint=sb://example/;SharedAccessKey=pk-secret",
        secondary_connection_string="Endpoint=sb://example/;SharedAccessKey=sk-secret",
        alias_primary_connection_string="Endpoint=sb://alias/;SharedAccessKey=pk-secret",
        alias_secondary_connection_string=None,
    )


@pytest.mark.unit
class TestNamespaceAuthorizationRuleDataSource:

    @pytest.fixture(autouse=True)
    def setup(self, mock_azure_client):
        self.namespaces = mock_azure_client.servicebus.namespaces
        self.namespaces.get_authorization_rule.return_value = SimpleNamespace(rights=["Listen", "Send"])
        self.namespaces.list_keys.return_value = access_keys()
        self.data_source = NamespaceAuthorizationRuleDataSource(mock_azure_client)
        self.data = NamespaceAuthorizationRuleModel.from_config({
            "name": "example-rule",
            "namespace_name": "example-namespace",
            "resource_group_name": "example-rg",
        })

    def test_read(self):
        data = self.data_source.read(self.data)

        assert data.id == RULE_ID
        assert data.primary_key == "pk-secret"
        assert data.secondary_key == "sk-secret"
        assert data.primary_connection_string.endswith("pk-secret")
        assert data.primary_connection_string_alias.startswith("Endpoint=sb://alias/")
        assert data.secondary_connection_string_alias is None
        self.namespaces.get_authorization_rule.assert_called_once_with(
            "example-rg", "example-namespace", "example-rule", timeout=ANY
        )
        self.namespaces.list_keys.assert_called_once_with(
            "example-rg", "example-namespace", "example-rule", timeout=ANY
        )

    def test_rights(self):
        data = self.data_source.read(self.data)

        assert data.listen is True
        assert data.send is True
        assert data.manage is False

    def test_rights_from_enum_values(self):
        self.namespaces.get_authorization_rule.return_value = SimpleNamespace(
            rights=[SimpleNamespace(value="Manage"), SimpleNamespace(value="LISTEN")]
        )

        data = self.data_source.read(self.data)

        assert (data.listen, data.send, data.manage) == (True, False, True)

    def test_missing_rule(self, not_found):
        self.namespaces.get_authorization_rule.side_effect = not_found()

        with pytest.raises(ResourceNotFoundError) as exc_info:
            self.data_source.read(self.data)

        assert exc_info.value.resource_id == RULE_ID
        assert "was not found" in str(exc_info.value)
        self.namespaces.list_keys.assert_not_called()

    def test_retrieve_failure(self, http_error):
        self.namespaces.get_authorization_rule.side_effect = http_error(500)

        with pytest.raises(RemoteOperationError, match="retrieving Namespace Authorization Rule"):
            self.data_source.read(self.data)

    def test_list_keys_failure(self, http_error):
        self.namespaces.list_keys.side_effect = http_error(403, "forbidden")

        with pytest.raises(RemoteOperationError, match="listing keys for"):
            self.data_source.read(self.data)

    def test_invalid_namespace_name(self):
        with pytest.raises(ConfigValidationError) as exc_info:
            NamespaceAuthorizationRuleModel.from_config({
                "name": "example-rule",
                "namespace_name": "ns",
                "resource_group_name": "example-rg",
            })
        assert list(exc_info.value.errors) == ["namespace_name"]

    def test_outputs_are_sensitive(self):
        assert set(NamespaceAuthorizationRuleModel.sensitive_field_names()) == {
            "primary_key",
            "primary_connection_string",
            "secondary_key",
            "secondary_connection_string",
            "primary_connection_string_alias",
            "secondary_connection_string_alias",
        }
