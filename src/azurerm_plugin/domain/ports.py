"""Domain ports for resource and data-source handlers."""

from abc import ABC, abstractmethod
from typing import ClassVar, Optional, Type

from azurerm_plugin.domain.core.exceptions import ResourceNotFoundError
from azurerm_plugin.domain.schema import ResourceModel
from azurerm_plugin.domain.timeouts import ResourceTimeouts


class ResourceHandler(ABC):
    """Create/read/update/delete capability set for one resource type."""

    type_name: ClassVar[str]
    model: ClassVar[Type[ResourceModel]]
    default_timeouts: ClassVar[ResourceTimeouts] = ResourceTimeouts()
    deprecation_message: ClassVar[Optional[str]] = None

    @abstractmethod
    def create(self, data: ResourceModel) -> ResourceModel:
        """Create the remote resource and refresh ``data`` from it."""

    @abstractmethod
    def read(self, data: ResourceModel) -> ResourceModel:
        """Refresh ``data``; clears ``data.id`` if the remote resource is gone."""

    @abstractmethod
    def update(self, data: ResourceModel) -> ResourceModel:
        """Apply ``data`` to the existing remote resource and refresh it."""

    @abstractmethod
    def delete(self, data: ResourceModel) -> None:
        """Delete the remote resource; an already absent resource is not an error."""

    @abstractmethod
    def validate_id(self, resource_id: str) -> None:
        """Raise InvalidResourceIdError if ``resource_id`` is not an ID of this type."""

    def import_state(self, resource_id: str) -> ResourceModel:
        """Read an existing remote resource into fresh state."""
        self.validate_id(resource_id)
        data = self.read(self.model.empty(resource_id))
        if not data.exists:
            raise ResourceNotFoundError(
                f"Cannot import non-existent remote object {resource_id!r}", resource_id
            )
        return data


class DataSourceHandler(ABC):
    """Read-only projection of a remote object."""

    type_name: ClassVar[str]
    model: ClassVar[Type[ResourceModel]]
    default_timeouts: ClassVar[ResourceTimeouts] = ResourceTimeouts()

    @abstractmethod
    def read(self, data: ResourceModel) -> ResourceModel:
        """Populate ``data``; raises ResourceNotFoundError if the object is absent."""
