"""Resource Group resource."""
from typing import ClassVar, Optional

from azure.core.exceptions import AzureError
from azure.mgmt.resource.resources.models import ResourceGroup, ResourceGroupPatchable

from azurerm_plugin.domain.core.common_types import Tags, normalize_location_nilable
from azurerm_plugin.domain.core.exceptions import OperationTimeoutError, ResourceAlreadyExistsError
from azurerm_plugin.domain.ports import ResourceHandler
from azurerm_plugin.domain.resource_id import ResourceGroupId
from azurerm_plugin.domain.schema import ResourceModel, schema_field
from azurerm_plugin.domain.timeouts import MINUTE, Deadline, ResourceTimeouts
from azurerm_plugin.infrastructure.logging.logger import get_logger
from azurerm_plugin.providers.azure.client import AzureClient
from azurerm_plugin.providers.azure.commonschema import Location, ResourceGroupName, TagsMap
from azurerm_plugin.providers.azure.errors import response_was_not_found, wrap_error

logger = get_logger(__name__)

TYPE_NAME = "azurerm_resource_group"


class ResourceGroupModel(ResourceModel):
    resource_type: ClassVar[str] = TYPE_NAME

    name: ResourceGroupName = schema_field(force_new=True, case_insensitive=True)
    location: Location = schema_field(force_new=True)
    managed_by: Optional[str] = schema_field(None, force_new=True, description="ID of the resource that manages this group")
    tags: TagsMap = schema_field(default_factory=dict)


class ResourceGroupResource(ResourceHandler):
    """A resource group in the configured subscription."""

    type_name: ClassVar[str] = TYPE_NAME
    model = ResourceGroupModel
    default_timeouts: ClassVar[ResourceTimeouts] = ResourceTimeouts(
        create=90 * MINUTE, read=5 * MINUTE, update=90 * MINUTE, delete=90 * MINUTE,
    )

    def __init__(self, client: AzureClient, timeouts: Optional[ResourceTimeouts] = None):
        self._client = client
        self.timeouts = timeouts or self.default_timeouts

    @property
    def _groups(self):
        return self._client.resources.resource_groups

    def validate_id(self, resource_id: str) -> None:
        ResourceGroupId.parse(resource_id)

    def create(self, data: ResourceGroupModel) -> ResourceGroupModel:
        deadline = Deadline.for_create_update(self.timeouts, is_new=True)
        group_id = ResourceGroupId(self._client.subscription_id, data.name)

        existing = None
        try:
            existing = self._groups.get(group_id.resource_group, timeout=deadline.remaining())
        except AzureError as e:
            if not response_was_not_found(e):
                raise wrap_error("create", group_id.id, f"checking for presence of existing {group_id}", e) from e

        if existing is not None and existing.id:
            raise ResourceAlreadyExistsError(self.type_name, existing.id)

        parameters = ResourceGroup(
            location=data.location,
            managed_by=data.managed_by,
            tags=Tags.expand(data.tags).to_azure_format(),
        )
        try:
            self._groups.create_or_update(group_id.resource_group, parameters, timeout=deadline.remaining())
        except AzureError as e:
            raise wrap_error("create", group_id.id, f"creating {group_id}", e) from e

        data.id = group_id.id
        logger.info("Created Resource Group", resource_id=data.id)

        return self.read(data)

    def update(self, data: ResourceGroupModel) -> ResourceGroupModel:
        deadline = Deadline.for_create_update(self.timeouts, is_new=False)
        group_id = ResourceGroupId.parse(data.id)

        parameters = ResourceGroupPatchable(tags=Tags.expand(data.tags).to_azure_format())
        try:
            self._groups.update(group_id.resource_group, parameters, timeout=deadline.remaining())
        except AzureError as e:
            raise wrap_error("update", group_id.id, f"updating {group_id}", e) from e

        return self.read(data)

    def read(self, data: ResourceGroupModel) -> ResourceGroupModel:
        deadline = Deadline.for_read(self.timeouts)
        group_id = ResourceGroupId.parse(data.id)

        try:
            resp = self._groups.get(group_id.resource_group, timeout=deadline.remaining())
        except AzureError as e:
            if response_was_not_found(e):
                logger.info("Unable to find Resource Group - removing from state", resource_id=data.id)
                data.clear()
                return data
            raise wrap_error("read", group_id.id, f"retrieving {group_id}", e) from e

        data.name = resp.name or group_id.resource_group
        data.location = normalize_location_nilable(resp.location)
        data.managed_by = resp.managed_by
        data.tags = Tags.flatten(resp.tags).to_dict()
        return data

    def delete(self, data: ResourceGroupModel) -> None:
        deadline = Deadline.for_delete(self.timeouts)
        group_id = ResourceGroupId.parse(data.id)

        try:
            poller = self._groups.begin_delete(group_id.resource_group, timeout=deadline.remaining())
            poller.result(timeout=deadline.remaining())
        except AzureError as e:
            if response_was_not_found(e):
                logger.info("Resource Group was already deleted", resource_id=data.id)
                return
            raise wrap_error("delete", group_id.id, f"deleting {group_id}", e) from e

        if not poller.done():
            raise OperationTimeoutError(f"waiting for the deletion of {group_id}", deadline.timeout)
