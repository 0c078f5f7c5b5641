"""Service Bus data sources."""
from .parse import NamespaceAuthorizationRuleId
from .namespace_authorization_rule_data_source import (
    NamespaceAuthorizationRuleDataSource,
    NamespaceAuthorizationRuleModel,
)

__all__ = [
    'NamespaceAuthorizationRuleId',
    'NamespaceAuthorizationRuleDataSource',
    'NamespaceAuthorizationRuleModel',
]
