"""Service Fabric Mesh resources."""
from .parse import SecretId, SecretValueId
from .secret_value_resource import SecretValueModel, SecretValueResource

__all__ = ['SecretId', 'SecretValueId', 'SecretValueModel', 'SecretValueResource']
