"""Service Bus Namespace Authorization Rule data source."""
from typing import ClassVar, Iterable, Optional, Set

from azure.core.exceptions import AzureError

from azurerm_plugin.domain.core.exceptions import ResourceNotFoundError
from azurerm_plugin.domain.ports import DataSourceHandler
from azurerm_plugin.domain.schema import ResourceModel, schema_field
from azurerm_plugin.domain.timeouts import Deadline, ResourceTimeouts
from azurerm_plugin.infrastructure.logging.logger import get_logger
from azurerm_plugin.providers.azure.client import AzureClient
from azurerm_plugin.providers.azure.commonschema import NonEmptyString, ResourceGroupName, ServiceBusNamespaceName
from azurerm_plugin.providers.azure.errors import response_was_not_found, wrap_error
from azurerm_plugin.providers.azure.servicebus.parse import NamespaceAuthorizationRuleId

logger = get_logger(__name__)

TYPE_NAME = "azurerm_servicebus_namespace_authorization_rule"


def _secret(description: str):
    return schema_field(None, computed=True, sensitive=True, description=description)


class NamespaceAuthorizationRuleModel(ResourceModel):
    resource_type: ClassVar[str] = TYPE_NAME

    name: NonEmptyString = schema_field()
    namespace_name: ServiceBusNamespaceName = schema_field()
    resource_group_name: ResourceGroupName = schema_field()

    primary_key: Optional[str] = _secret("Primary access key")
    primary_connection_string: Optional[str] = _secret("Primary connection string")
    secondary_key: Optional[str] = _secret("Secondary access key")
    secondary_connection_string: Optional[str] = _secret("Secondary connection string")
    primary_connection_string_alias: Optional[str] = _secret("Alias primary connection string")
    secondary_connection_string_alias: Optional[str] = _secret("Alias secondary connection string")

    listen: Optional[bool] = schema_field(None, computed=True, description="Rule grants Listen access")
    send: Optional[bool] = schema_field(None, computed=True, description="Rule grants Send access")
    manage: Optional[bool] = schema_field(None, computed=True, description="Rule grants Manage access")


def _rights(rights: Optional[Iterable]) -> Set[str]:
    return {str(getattr(right, "value", right)).lower() for right in rights or []}


class NamespaceAuthorizationRuleDataSource(DataSourceHandler):
    """Keys and connection strings of an existing namespace authorization rule."""

    type_name: ClassVar[str] = TYPE_NAME
    model = NamespaceAuthorizationRuleModel
    default_timeouts: ClassVar[ResourceTimeouts] = ResourceTimeouts()

    def __init__(self, client: AzureClient, timeouts: Optional[ResourceTimeouts] = None):
        self._client = client
        self.timeouts = timeouts or self.default_timeouts

    def read(self, data: NamespaceAuthorizationRuleModel) -> NamespaceAuthorizationRuleModel:
        namespaces = self._client.servicebus.namespaces
        deadline = Deadline.for_read(self.timeouts)

        rule_id = NamespaceAuthorizationRuleId(
            self._client.subscription_id, data.resource_group_name, data.namespace_name, data.name
        )

        try:
            rule = namespaces.get_authorization_rule(
                rule_id.resource_group, rule_id.namespace_name, rule_id.authorization_rule_name,
                timeout=deadline.remaining(),
            )
        except AzureError as e:
            if response_was_not_found(e):
                raise ResourceNotFoundError(f"{rule_id} was not found", rule_id.id) from e
            raise wrap_error("read", rule_id.id, f"retrieving {rule_id}", e) from e

        try:
            keys = namespaces.list_keys(
                rule_id.resource_group, rule_id.namespace_name, rule_id.authorization_rule_name,
                timeout=deadline.remaining(),
            )
        except AzureError as e:
            raise wrap_error("read", rule_id.id, f"listing keys for {rule_id}", e) from e

        data.id = rule_id.id
        data.primary_key = keys.primary_key
        data.primary_connection_string = keys.primary_connection_string
        data.secondary_key = keys.secondary_key
        data.secondary_connection_string = keys.secondary_connection_string
        data.primary_connection_string_alias = keys.alias_primary_connection_string
        data.secondary_connection_string_alias = keys.alias_secondary_connection_string

        rights = _rights(rule.rights)
        data.listen = "listen" in rights
        data.send = "send" in rights
        data.manage = "manage" in rights

        logger.debug("Read Service Bus Namespace Authorization Rule", resource_id=data.id)
        return data
