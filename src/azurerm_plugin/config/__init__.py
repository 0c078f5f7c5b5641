"""Configuration package with clean public API."""

from .schemas import (
    AppConfig,
    AzureProviderConfig,
    CloudEnvironment,
    LoggingConfig,
    LogDestination,
    TimeoutOverrides,
)
from .manager import ConfigurationManager
from .env_expansion import expand_env_vars

__all__ = [
    'AppConfig',
    'AzureProviderConfig',
    'CloudEnvironment',
    'LoggingConfig',
    'LogDestination',
    'TimeoutOverrides',
    'ConfigurationManager',
    'expand_env_vars',
]
