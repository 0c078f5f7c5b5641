"""Service Fabric Mesh Secret Value resource."""
from typing import ClassVar, Optional

from azure.core.exceptions import AzureError
from azure.mgmt.servicefabricmesh.models import SecretValueResourceDescription

from azurerm_plugin.domain.core.common_types import Tags, normalize_location_nilable
from azurerm_plugin.domain.core.exceptions import ResourceAlreadyExistsError
from azurerm_plugin.domain.ports import ResourceHandler
from azurerm_plugin.domain.schema import ResourceModel, schema_field
from azurerm_plugin.domain.timeouts import Deadline, ResourceTimeouts
from azurerm_plugin.infrastructure.logging.logger import get_logger
from azurerm_plugin.providers.azure.client import AzureClient
from azurerm_plugin.providers.azure.commonschema import Location, NonEmptyString, ResourceIdString, TagsMap
from azurerm_plugin.providers.azure.errors import response_was_not_found, wrap_error
from azurerm_plugin.providers.azure.servicefabricmesh.parse import SecretId, SecretValueId

logger = get_logger(__name__)

TYPE_NAME = "azurerm_service_fabric_mesh_secret_value"

DEPRECATION_MESSAGE = (
    f"Service Fabric Mesh is retired. The {TYPE_NAME!r} resource is deprecated "
    "and will be removed in a future release of this plugin."
)


class SecretValueModel(ResourceModel):
    resource_type: ClassVar[str] = TYPE_NAME

    # Service Fabric Mesh returns names with inconsistent casing.
    name: NonEmptyString = schema_field(force_new=True, case_insensitive=True)
    service_fabric_mesh_secret_id: ResourceIdString = schema_field(force_new=True, case_insensitive=True)
    location: Location = schema_field(force_new=True)
    value: NonEmptyString = schema_field(force_new=True, sensitive=True)
    tags: TagsMap = schema_field(default_factory=dict)


class SecretValueResource(ResourceHandler):
    """A value stored under a Service Fabric Mesh Secret."""

    type_name: ClassVar[str] = TYPE_NAME
    model = SecretValueModel
    default_timeouts: ClassVar[ResourceTimeouts] = ResourceTimeouts()
    deprecation_message: ClassVar[Optional[str]] = DEPRECATION_MESSAGE

    def __init__(self, client: AzureClient, timeouts: Optional[ResourceTimeouts] = None):
        self._client = client
        self.timeouts = timeouts or self.default_timeouts
        logger.warning(self.deprecation_message)

    @property
    def _secrets(self):
        return self._client.servicefabricmesh.secret

    @property
    def _values(self):
        return self._client.servicefabricmesh.secret_value

    def validate_id(self, resource_id: str) -> None:
        SecretValueId.parse(resource_id)

    def create(self, data: SecretValueModel) -> SecretValueModel:
        return self._create_update(data, is_new=True)

    def update(self, data: SecretValueModel) -> SecretValueModel:
        return self._create_update(data, is_new=False)

    def _create_update(self, data: SecretValueModel, is_new: bool) -> SecretValueModel:
        deadline = Deadline.for_create_update(self.timeouts, is_new)

        secret_id = SecretId.parse(data.service_fabric_mesh_secret_id)
        value_id = SecretValueId(secret_id.subscription_id, secret_id.resource_group, secret_id.name, data.name)

        if is_new:
            existing = None
            try:
                existing = self._values.get(
                    value_id.resource_group, value_id.secret_name, value_id.value_name,
                    timeout=deadline.remaining(),
                )
            except AzureError as e:
                if not response_was_not_found(e):
                    raise wrap_error(
                        "create", value_id.id,
                        "checking for presence of existing Service Fabric Mesh Secret Value", e,
                    ) from e

            if existing is not None and existing.id:
                raise ResourceAlreadyExistsError(self.type_name, existing.id)

        parameters = SecretValueResourceDescription(
            location=data.location,
            tags=Tags.expand(data.tags).to_azure_format(),
            value=data.value,
        )

        try:
            self._values.create(
                value_id.resource_group, value_id.secret_name, value_id.value_name, parameters,
                timeout=deadline.remaining(),
            )
        except AzureError as e:
            verb = "creating" if is_new else "updating"
            raise wrap_error("create" if is_new else "update", value_id.id, f"{verb} {value_id}", e) from e

        data.id = value_id.id
        logger.info("Stored Service Fabric Mesh Secret Value", resource_id=data.id)

        return self.read(data)

    def read(self, data: SecretValueModel) -> SecretValueModel:
        deadline = Deadline.for_read(self.timeouts)

        value_id = SecretValueId.parse(data.id)

        try:
            secret = self._secrets.get(value_id.resource_group, value_id.secret_name, timeout=deadline.remaining())
        except AzureError as e:
            if response_was_not_found(e):
                logger.info("Unable to find Service Fabric Mesh Secret - removing from state", resource_id=data.id)
                data.clear()
                return data
            raise wrap_error("read", data.id, "reading Service Fabric Mesh Secret", e) from e

        try:
            resp = self._values.get(
                value_id.resource_group, value_id.secret_name, value_id.value_name,
                timeout=deadline.remaining(),
            )
        except AzureError as e:
            if response_was_not_found(e):
                logger.info("Unable to find Service Fabric Mesh Secret Value - removing from state", resource_id=data.id)
                data.clear()
                return data
            raise wrap_error("read", data.id, "reading Service Fabric Mesh Secret Value", e) from e

        # The value itself is never returned by the service and stays as configured.
        data.name = value_id.value_name
        data.service_fabric_mesh_secret_id = secret.id or value_id.secret_id.id
        data.location = normalize_location_nilable(resp.location)
        data.tags = Tags.flatten(resp.tags).to_dict()
        return data

    def delete(self, data: SecretValueModel) -> None:
        deadline = Deadline.for_delete(self.timeouts)

        value_id = SecretValueId.parse(data.id)

        try:
            self._values.delete(
                value_id.resource_group, value_id.secret_name, value_id.value_name,
                timeout=deadline.remaining(),
            )
        except AzureError as e:
            if not response_was_not_found(e):
                raise wrap_error(
                    "delete", data.id,
                    f"deleting Service Fabric Mesh Secret Value {value_id.value_name!r} "
                    f"(Resource Group {value_id.resource_group!r} / Secret {value_id.secret_name!r})",
                    e,
                ) from e
            logger.info("Service Fabric Mesh Secret Value was already deleted", resource_id=data.id)
