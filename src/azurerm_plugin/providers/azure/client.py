import logging
from typing import Any, Dict, Optional

from azure.core.credentials import TokenCredential
from azure.identity import AzureAuthorityHosts, ClientSecretCredential, DefaultAzureCredential
from azure.mgmt.resource import ResourceManagementClient
from azure.mgmt.servicebus import ServiceBusManagementClient
from azure.mgmt.servicefabricmesh import ServiceFabricMeshManagementClient

from azurerm_plugin.config.schemas import AzureProviderConfig, CloudEnvironment
from azurerm_plugin.infrastructure.exceptions import CredentialsError

logger = logging.getLogger(__name__)

AUTHORITY_HOSTS = {
    CloudEnvironment.PUBLIC: AzureAuthorityHosts.AZURE_PUBLIC_CLOUD,
    CloudEnvironment.USGOVERNMENT: AzureAuthorityHosts.AZURE_GOVERNMENT,
    CloudEnvironment.CHINA: AzureAuthorityHosts.AZURE_CHINA,
}


class AzureClient:
    """
    Centralized Azure management client access.
    Builds the credential once and creates each service client on first use.
    """

    def __init__(self, config: AzureProviderConfig, credential: Optional[TokenCredential] = None):
        """
        Initialize Azure client with configuration.

        Args:
            config: Azure provider configuration
            credential: Optional credential; built from config when omitted

        Raises:
            CredentialsError: If no subscription is configured
        """
        if not config.subscription_id:
            raise CredentialsError(
                "A subscription ID must be configured (provider.subscription_id or ARM_SUBSCRIPTION_ID)"
            )

        self.config = config
        self.subscription_id = config.subscription_id
        self.credential = credential or self._build_credential(config)

        self._resource_client: Optional[ResourceManagementClient] = None
        self._servicebus_client: Optional[ServiceBusManagementClient] = None
        self._servicefabricmesh_client: Optional[ServiceFabricMeshManagementClient] = None

    @staticmethod
    def _build_credential(config: AzureProviderConfig) -> TokenCredential:
        authority = AUTHORITY_HOSTS[config.environment]
        if config.uses_client_secret:
            logger.debug("Authenticating with a client secret for client %s", config.client_id)
            return ClientSecretCredential(
                tenant_id=config.tenant_id,
                client_id=config.client_id,
                client_secret=config.client_secret.get_secret_value(),
                authority=authority,
            )
        logger.debug("Authenticating with the default Azure credential chain")
        return DefaultAzureCredential(authority=authority)

    def _client_kwargs(self) -> Dict[str, Any]:
        endpoint = self.config.resource_manager_endpoint
        return {
            "base_url": endpoint,
            "credential_scopes": [f"{endpoint}/.default"],
            "retry_total": self.config.retry_attempts,
            "connection_timeout": self.config.connection_timeout,
        }

    @property
    def resources(self) -> ResourceManagementClient:
        if self._resource_client is None:
            self._resource_client = ResourceManagementClient(
                self.credential, self.subscription_id, **self._client_kwargs()
            )
        return self._resource_client

    @property
    def servicebus(self) -> ServiceBusManagementClient:
        if self._servicebus_client is None:
            self._servicebus_client = ServiceBusManagementClient(
                self.credential, self.subscription_id, **self._client_kwargs()
            )
        return self._servicebus_client

    @property
    def servicefabricmesh(self) -> ServiceFabricMeshManagementClient:
        if self._servicefabricmesh_client is None:
            self._servicefabricmesh_client = ServiceFabricMeshManagementClient(
                self.credential, self.subscription_id, **self._client_kwargs()
            )
        return self._servicefabricmesh_client

    def close(self) -> None:
        """Close any service clients that were created."""
        for client in (self._resource_client, self._servicebus_client, self._servicefabricmesh_client):
            if client is not None:
                client.close()
