"""Service Bus resource IDs."""
from dataclasses import dataclass

from azurerm_plugin.domain.core.exceptions import InvalidResourceIdError
from azurerm_plugin.domain.resource_id import check_segments, parse_resource_id

PROVIDER = "Microsoft.ServiceBus"


@dataclass(frozen=True)
class NamespaceAuthorizationRuleId:
    subscription_id: str
    resource_group: str
    namespace_name: str
    authorization_rule_name: str

    def __post_init__(self):
        check_segments((self.subscription_id, self.resource_group, self.namespace_name, self.authorization_rule_name))

    def __str__(self) -> str:
        return (
            f"Namespace Authorization Rule: (Authorization Rule Name {self.authorization_rule_name!r}"
            f" / Namespace Name {self.namespace_name!r} / Resource Group {self.resource_group!r})"
        )

    @property
    def id(self) -> str:
        return (
            f"/subscriptions/{self.subscription_id}/resourceGroups/{self.resource_group}"
            f"/providers/{PROVIDER}/namespaces/{self.namespace_name}"
            f"/authorizationRules/{self.authorization_rule_name}"
        )

    @classmethod
    def parse(cls, input_id: str) -> "NamespaceAuthorizationRuleId":
        try:
            parsed = parse_resource_id(input_id)
            if not parsed.resource_group:
                raise InvalidResourceIdError("ID was missing the `resourceGroups` element")
            namespace_name = parsed.pop_segment("namespaces")
            rule_name = parsed.pop_segment("authorizationRules")
            parsed.validate_no_empty_segments(input_id)
        except InvalidResourceIdError as e:
            raise InvalidResourceIdError(f"parsing {input_id!r} as a Namespace Authorization Rule ID: {e}") from e
        return cls(parsed.subscription_id, parsed.resource_group, namespace_name, rule_name)
