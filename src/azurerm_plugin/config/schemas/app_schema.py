"""Main application configuration schema."""
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

from azurerm_plugin.domain.timeouts import ResourceTimeouts
from .logging_schema import LoggingConfig
from .provider_schema import AzureProviderConfig


class TimeoutOverrides(BaseModel):
    """Per-operation timeout overrides, in seconds, for one resource type."""

    create: Optional[float] = None
    read: Optional[float] = None
    update: Optional[float] = None
    delete: Optional[float] = None

    @field_validator('create', 'read', 'update', 'delete')
    @classmethod
    def validate_positive(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and v <= 0:
            raise ValueError("Timeout must be positive")
        return v


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    provider: AzureProviderConfig = Field(default_factory=AzureProviderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    timeouts: Dict[str, TimeoutOverrides] = Field(
        default_factory=dict,
        description="Timeout overrides keyed by resource type name",
    )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        return cls.model_validate(data)

    def timeouts_for(self, type_name: str, defaults: ResourceTimeouts) -> ResourceTimeouts:
        """Resolve the timeouts for a resource type from its defaults and any overrides."""
        overrides = self.timeouts.get(type_name)
        if overrides is None:
            return defaults
        return defaults.merged(overrides.model_dump())
