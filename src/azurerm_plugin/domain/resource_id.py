"""
Support for parsing and formatting Azure Resource Manager resource IDs.

An ARM resource ID is a slash separated path of key/value pairs:

    /subscriptions/{sub}/resourceGroups/{rg}/providers/{namespace}/{type}/{name}[/{type}/{name}...]

:func:`parse_resource_id` splits any such ID into its components. The typed
IDs built on top of it (one per resource type, next to the service that owns
it) check that exactly the expected segments are present, so that
``T.parse(t.id) == t`` for every typed ID ``t``.
"""
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional

from azurerm_plugin.domain.core.exceptions import InvalidResourceIdError


@dataclass
class ParsedResourceId:
    """Components of a parsed ARM resource ID."""
    subscription_id: str
    resource_group: str = ""
    provider: str = ""
    path: Dict[str, str] = field(default_factory=dict)

    def pop_segment(self, key: str) -> str:
        """Remove and return the value stored under ``key``."""
        value = self.path.pop(key, None)
        if not value:
            raise InvalidResourceIdError(f"ID was missing the `{key}` element")
        return value

    def validate_no_empty_segments(self, source: str) -> None:
        """Fail if any segments were left over after the expected ones were popped."""
        if self.path:
            raise InvalidResourceIdError(
                f"ID contained more segments than required: {source!r}, {self.path!r}"
            )


def parse_resource_id(resource_id: str) -> ParsedResourceId:
    """Parse an ARM resource ID into subscription, resource group, provider and path."""
    if not resource_id or not resource_id.startswith("/"):
        raise InvalidResourceIdError(f"Cannot parse Azure ID: {resource_id!r}")

    components = resource_id.strip("/").split("/")

    # We should have an even number of key-value pairs.
    if len(components) % 2 != 0:
        raise InvalidResourceIdError(f"the number of path segments is not divisible by 2 in {resource_id!r}")

    component_map: Dict[str, str] = {}
    for i in range(0, len(components), 2):
        key, value = components[i], components[i + 1]
        # Check key/value for empty strings.
        if not key or not value:
            raise InvalidResourceIdError(f"Key/Value cannot be empty strings. Key: {key!r}, Value: {value!r}")
        component_map[key] = value

    subscription_id = component_map.pop("subscriptions", "")
    if not subscription_id:
        raise InvalidResourceIdError(f"No subscription ID found in: {resource_id!r}")

    parsed = ParsedResourceId(subscription_id=subscription_id)

    # Some Azure APIs return the resource group key in lower case.
    for key in ("resourceGroups", "resourcegroups"):
        if key in component_map:
            parsed.resource_group = component_map.pop(key)
            break

    parsed.provider = component_map.pop("providers", "")
    parsed.path = component_map
    return parsed


def check_segments(segments: Iterable[Optional[str]]) -> None:
    """Reject segments that would not survive a round trip through the ID string."""
    for segment in segments:
        if not segment:
            raise InvalidResourceIdError("resource ID segments cannot be empty")
        if "/" in segment:
            raise InvalidResourceIdError(f"resource ID segment {segment!r} cannot contain '/'")


@dataclass(frozen=True)
class ResourceGroupId:
    subscription_id: str
    resource_group: str

    def __post_init__(self):
        check_segments((self.subscription_id, self.resource_group))

    def __str__(self) -> str:
        return f"Resource Group (Subscription {self.subscription_id!r} / Name {self.resource_group!r})"

    @property
    def id(self) -> str:
        return f"/subscriptions/{self.subscription_id}/resourceGroups/{self.resource_group}"

    @classmethod
    def parse(cls, input_id: str) -> "ResourceGroupId":
        try:
            parsed = parse_resource_id(input_id)
            if not parsed.resource_group:
                raise InvalidResourceIdError("ID was missing the `resourceGroups` element")
            if parsed.provider or parsed.path:
                raise InvalidResourceIdError(f"ID contained more segments than required: {input_id!r}")
        except InvalidResourceIdError as e:
            raise InvalidResourceIdError(f"parsing {input_id!r} as a Resource Group ID: {e}") from e
        return cls(parsed.subscription_id, parsed.resource_group)
