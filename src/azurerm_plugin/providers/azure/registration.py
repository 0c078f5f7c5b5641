"""Azure handler registration."""
from azurerm_plugin.infrastructure.registry import ResourceRegistry
from azurerm_plugin.providers.azure.resources import ResourceGroupResource
from azurerm_plugin.providers.azure.servicebus import NamespaceAuthorizationRuleDataSource
from azurerm_plugin.providers.azure.servicefabricmesh import SecretValueResource


def register_azure_handlers(registry: ResourceRegistry) -> ResourceRegistry:
    """Register every Azure resource and data source with the registry."""
    registry.register_resource(ResourceGroupResource)
    registry.register_resource(SecretValueResource)
    registry.register_data_source(NamespaceAuthorizationRuleDataSource)
    return registry


def create_registry() -> ResourceRegistry:
    return register_azure_handlers(ResourceRegistry())
