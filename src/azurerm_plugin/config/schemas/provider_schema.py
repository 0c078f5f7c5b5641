"""Azure provider configuration schema."""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, SecretStr, field_validator


class CloudEnvironment(str, Enum):
    """Azure cloud environments."""
    PUBLIC = "public"
    USGOVERNMENT = "usgovernment"
    CHINA = "china"


RESOURCE_MANAGER_ENDPOINTS = {
    CloudEnvironment.PUBLIC: "https://management.azure.com",
    CloudEnvironment.USGOVERNMENT: "https://management.usgovcloudapi.net",
    CloudEnvironment.CHINA: "https://management.chinacloudapi.cn",
}


class AzureProviderConfig(BaseModel):
    """Credentials and client settings for the Azure management APIs."""

    subscription_id: str = Field("", description="Subscription the plugin manages resources in")
    tenant_id: Optional[str] = Field(None, description="Azure AD tenant ID")
    client_id: Optional[str] = Field(None, description="Service principal client ID")
    client_secret: Optional[SecretStr] = Field(None, description="Service principal client secret")
    environment: CloudEnvironment = Field(CloudEnvironment.PUBLIC, description="Azure cloud environment")
    retry_attempts: int = Field(3, description="Maximum retries for one management API call")
    connection_timeout: float = Field(10.0, description="Connection timeout in seconds")

    @field_validator('retry_attempts')
    @classmethod
    def validate_retry_attempts(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Retry attempts must not be negative")
        return v

    @field_validator('connection_timeout')
    @classmethod
    def validate_connection_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Connection timeout must be positive")
        return v

    @property
    def resource_manager_endpoint(self) -> str:
        return RESOURCE_MANAGER_ENDPOINTS[self.environment]

    @property
    def uses_client_secret(self) -> bool:
        return bool(self.tenant_id and self.client_id and self.client_secret)
