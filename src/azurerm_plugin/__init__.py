"""Azure Resource Plugin - Root Package.

This package exposes declarative, typed schemas for Azure resources and maps
create/read/update/delete operations onto the Azure management SDKs.

Key Components:
    - domain: Identifiers, validators, typed resource models and timeouts
    - providers: Azure SDK client and the per-service resource handlers
    - infrastructure: Logging and the resource registry
    - config: Configuration schemas and loading
    - cli: Command line interface
"""

__version__ = "0.1.0"
