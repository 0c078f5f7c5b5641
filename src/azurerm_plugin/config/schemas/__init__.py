"""Configuration schemas."""
from .app_schema import AppConfig, TimeoutOverrides
from .logging_schema import LoggingConfig, LogDestination, LogFileConfig
from .provider_schema import AzureProviderConfig, CloudEnvironment, RESOURCE_MANAGER_ENDPOINTS

__all__ = [
    'AppConfig',
    'TimeoutOverrides',
    'LoggingConfig',
    'LogDestination',
    'LogFileConfig',
    'AzureProviderConfig',
    'CloudEnvironment',
    'RESOURCE_MANAGER_ENDPOINTS',
]
