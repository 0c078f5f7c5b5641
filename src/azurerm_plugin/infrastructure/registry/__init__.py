"""Registry of resource and data-source handlers."""
from .resource_registry import DATA_SOURCE, RESOURCE, ResourceRegistration, ResourceRegistry

__all__ = ['DATA_SOURCE', 'RESOURCE', 'ResourceRegistration', 'ResourceRegistry']
