"""Service Fabric Mesh resource IDs."""
from dataclasses import dataclass

from azurerm_plugin.domain.core.exceptions import InvalidResourceIdError
from azurerm_plugin.domain.resource_id import check_segments, parse_resource_id

PROVIDER = "Microsoft.ServiceFabricMesh"


@dataclass(frozen=True)
class SecretId:
    subscription_id: str
    resource_group: str
    name: str

    def __post_init__(self):
        check_segments((self.subscription_id, self.resource_group, self.name))

    def __str__(self) -> str:
        return f"Secret: (Name {self.name!r} / Resource Group {self.resource_group!r})"

    @property
    def id(self) -> str:
        return (
            f"/subscriptions/{self.subscription_id}/resourceGroups/{self.resource_group}"
            f"/providers/{PROVIDER}/secrets/{self.name}"
        )

    @classmethod
    def parse(cls, input_id: str) -> "SecretId":
        try:
            parsed = parse_resource_id(input_id)
            if not parsed.resource_group:
                raise InvalidResourceIdError("ID was missing the `resourceGroups` element")
            name = parsed.pop_segment("secrets")
            parsed.validate_no_empty_segments(input_id)
        except InvalidResourceIdError as e:
            raise InvalidResourceIdError(f"parsing {input_id!r} as a Secret ID: {e}") from e
        return cls(parsed.subscription_id, parsed.resource_group, name)


@dataclass(frozen=True)
class SecretValueId:
    subscription_id: str
    resource_group: str
    secret_name: str
    value_name: str

    def __post_init__(self):
        check_segments((self.subscription_id, self.resource_group, self.secret_name, self.value_name))

    def __str__(self) -> str:
        return (
            f"Secret Value: (Value Name {self.value_name!r} / Secret Name {self.secret_name!r}"
            f" / Resource Group {self.resource_group!r})"
        )

    @property
    def id(self) -> str:
        return (
            f"/subscriptions/{self.subscription_id}/resourceGroups/{self.resource_group}"
            f"/providers/{PROVIDER}/secrets/{self.secret_name}/values/{self.value_name}"
        )

    @property
    def secret_id(self) -> SecretId:
        return SecretId(self.subscription_id, self.resource_group, self.secret_name)

    @classmethod
    def parse(cls, input_id: str) -> "SecretValueId":
        try:
            parsed = parse_resource_id(input_id)
            if not parsed.resource_group:
                raise InvalidResourceIdError("ID was missing the `resourceGroups` element")
            secret_name = parsed.pop_segment("secrets")
            value_name = parsed.pop_segment("values")
            parsed.validate_no_empty_segments(input_id)
        except InvalidResourceIdError as e:
            raise InvalidResourceIdError(f"parsing {input_id!r} as a Secret Value ID: {e}") from e
        return cls(parsed.subscription_id, parsed.resource_group, secret_name, value_name)
