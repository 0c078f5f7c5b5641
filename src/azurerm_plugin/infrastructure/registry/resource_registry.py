"""Resource Registry - maps resource type names to their handler classes.

New resource types are added by registering their handler classes; the CLI
and any other caller dispatch through the registry instead of naming
handlers directly.
"""

import threading
from typing import Any, Dict, List, Optional, Type, Union

from azurerm_plugin.config.schemas import AppConfig
from azurerm_plugin.domain.ports import DataSourceHandler, ResourceHandler
from azurerm_plugin.infrastructure.exceptions import UnsupportedResourceTypeError
from azurerm_plugin.infrastructure.logging.logger import get_logger

HandlerClass = Union[Type[ResourceHandler], Type[DataSourceHandler]]

RESOURCE = "resource"
DATA_SOURCE = "data_source"


class ResourceRegistration:
    """Container for resource registration information."""

    def __init__(self, type_name: str, kind: str, handler_class: HandlerClass):
        self.type_name = type_name
        self.kind = kind
        self.handler_class = handler_class

    def describe(self) -> Dict[str, Any]:
        """Summary of the registration, including its schema."""
        handler_class = self.handler_class
        return {
            "type": self.type_name,
            "kind": self.kind,
            "deprecation_message": getattr(handler_class, "deprecation_message", None),
            "timeouts": handler_class.default_timeouts.model_dump(),
            "schema": handler_class.model.model_json_schema(),
        }


class ResourceRegistry:
    """
    Registry for resource and data-source handlers.

    Resources and data sources live in separate namespaces, so one type name
    may be registered as both.
    """

    def __init__(self):
        """Initialize resource registry."""
        self._registrations: Dict[str, Dict[str, ResourceRegistration]] = {RESOURCE: {}, DATA_SOURCE: {}}
        self._logger = get_logger(__name__)
        self._registration_lock = threading.RLock()

    def _register(self, kind: str, handler_class: HandlerClass) -> None:
        type_name = handler_class.type_name
        with self._registration_lock:
            if type_name in self._registrations[kind]:
                raise ValueError(f"{kind} type '{type_name}' is already registered")
            self._registrations[kind][type_name] = ResourceRegistration(type_name, kind, handler_class)
        self._logger.debug("Registered handler", kind=kind, type_name=type_name)

    def register_resource(self, handler_class: Type[ResourceHandler]) -> None:
        self._register(RESOURCE, handler_class)

    def register_data_source(self, handler_class: Type[DataSourceHandler]) -> None:
        self._register(DATA_SOURCE, handler_class)

    def get_registration(self, kind: str, type_name: str) -> ResourceRegistration:
        """
        Look up a registration.

        Raises:
            UnsupportedResourceTypeError: If no handler is registered under that name
        """
        registration = self._registrations[kind].get(type_name)
        if registration is None:
            available = ", ".join(sorted(self._registrations[kind])) or "none"
            raise UnsupportedResourceTypeError(
                f"Unsupported {kind.replace('_', ' ')} type '{type_name}'. Available: {available}"
            )
        return registration

    def list_registrations(self, kind: Optional[str] = None) -> List[ResourceRegistration]:
        kinds = [kind] if kind else [RESOURCE, DATA_SOURCE]
        return [
            registration
            for k in kinds
            for _, registration in sorted(self._registrations[k].items())
        ]

    def create_resource_handler(self, type_name: str, client: Any, app_config: AppConfig) -> ResourceHandler:
        return self._create_handler(RESOURCE, type_name, client, app_config)

    def create_data_source_handler(self, type_name: str, client: Any, app_config: AppConfig) -> DataSourceHandler:
        return self._create_handler(DATA_SOURCE, type_name, client, app_config)

    def _create_handler(self, kind: str, type_name: str, client: Any, app_config: AppConfig):
        handler_class = self.get_registration(kind, type_name).handler_class
        timeouts = app_config.timeouts_for(type_name, handler_class.default_timeouts)
        return handler_class(client, timeouts=timeouts)
