"""Azure Resource Manager core resources."""
from .resource_group_resource import ResourceGroupModel, ResourceGroupResource

__all__ = ['ResourceGroupModel', 'ResourceGroupResource']
