"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing to the registered resource and data-source handlers
- Output formatting
"""
import argparse
import json
import sys
from typing import Any, Callable, Dict, List, Optional

import yaml

from azurerm_plugin import __version__
from azurerm_plugin.cli.formatters import format_output
from azurerm_plugin.config import AppConfig, ConfigurationManager
from azurerm_plugin.domain.core.exceptions import DomainException, ResourceNotFoundError, ValidationError
from azurerm_plugin.infrastructure.exceptions import InfrastructureError
from azurerm_plugin.infrastructure.logging.logger import get_logger, setup_logging
from azurerm_plugin.infrastructure.registry import DATA_SOURCE, RESOURCE, ResourceRegistry
from azurerm_plugin.providers.azure.client import AzureClient
from azurerm_plugin.providers.azure.registration import create_registry

ClientFactory = Callable[[AppConfig], Any]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments with resource-action structure."""

    parser = argparse.ArgumentParser(
        prog="azurerm-plugin",
        description="Azure Resource Plugin - manage Azure resources from typed configuration",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s resources list
  %(prog)s resources create azurerm_resource_group --file rg.json
  %(prog)s resources read azurerm_resource_group --id /subscriptions/.../resourceGroups/example
  %(prog)s data-sources read azurerm_servicebus_namespace_authorization_rule --file rule.yaml
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Override the configured logging level')
    parser.add_argument('--format', choices=['json', 'yaml', 'table'],
                        default='json', help='Output format')
    parser.add_argument('--output', help='Output file (default: stdout)')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='kind', help='Available handler kinds')

    # Resources
    resources_parser = subparsers.add_parser('resources', help='Manage resources')
    resources_subparsers = resources_parser.add_subparsers(dest='action', help='Resource actions')

    resources_subparsers.add_parser('list', help='List resource types')

    resources_schema = resources_subparsers.add_parser('schema', help='Show the schema of a resource type')
    resources_schema.add_argument('type_name', help='Resource type name')

    resources_create = resources_subparsers.add_parser('create', help='Create a resource')
    resources_create.add_argument('type_name', help='Resource type name')
    resources_create.add_argument('--file', required=True, help="Resource configuration file ('-' for stdin)")

    resources_read = resources_subparsers.add_parser('read', help='Refresh a resource from Azure')
    resources_read.add_argument('type_name', help='Resource type name')
    resources_read.add_argument('--id', required=True, help='Resource ID')
    resources_read.add_argument('--state', help='Previously stored state, for fields Azure does not return')

    resources_update = resources_subparsers.add_parser('update', help='Update a resource in place')
    resources_update.add_argument('type_name', help='Resource type name')
    resources_update.add_argument('--id', required=True, help='Resource ID')
    resources_update.add_argument('--file', required=True, help="Resource configuration file ('-' for stdin)")
    resources_update.add_argument('--state', help='Previously stored state, for fields Azure does not return')

    resources_delete = resources_subparsers.add_parser('delete', help='Delete a resource')
    resources_delete.add_argument('type_name', help='Resource type name')
    resources_delete.add_argument('--id', required=True, help='Resource ID')

    resources_import = resources_subparsers.add_parser('import', help='Import an existing resource into state')
    resources_import.add_argument('type_name', help='Resource type name')
    resources_import.add_argument('--id', required=True, help='Resource ID')

    # Data sources
    data_sources_parser = subparsers.add_parser('data-sources', help='Read data sources')
    data_sources_subparsers = data_sources_parser.add_subparsers(dest='action', help='Data source actions')

    data_sources_subparsers.add_parser('list', help='List data source types')

    data_sources_schema = data_sources_subparsers.add_parser('schema', help='Show the schema of a data source type')
    data_sources_schema.add_argument('type_name', help='Data source type name')

    data_sources_read = data_sources_subparsers.add_parser('read', help='Read a data source')
    data_sources_read.add_argument('type_name', help='Data source type name')
    data_sources_read.add_argument('--file', required=True, help="Data source configuration file ('-' for stdin)")

    return parser.parse_args(argv)


def load_document(path: str) -> Dict[str, Any]:
    """Load a JSON or YAML mapping from a file, or from stdin when path is '-'."""
    try:
        if path == '-':
            text = sys.stdin.read()
        else:
            with open(path, encoding='utf-8') as f:
                text = f.read()
    except OSError as e:
        raise ValidationError(f"Cannot read {path}: {e}") from e

    try:
        if path.endswith(('.yml', '.yaml')):
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValidationError(f"Cannot parse {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValidationError(f"{path} must contain a mapping of field names to values")
    return data


def _kind(args: argparse.Namespace) -> str:
    return RESOURCE if args.kind == 'resources' else DATA_SOURCE


def execute_command(args: argparse.Namespace, app_config: AppConfig, registry: ResourceRegistry,
                    client_factory: ClientFactory) -> Dict[str, Any]:
    """Run the requested action and return its result."""
    kind = _kind(args)

    if args.action == 'list':
        return {"registrations": [
            {
                "type": registration.type_name,
                "kind": registration.kind,
                "deprecation_message": getattr(registration.handler_class, "deprecation_message", None),
            }
            for registration in registry.list_registrations(kind)
        ]}

    if args.action == 'schema':
        return registry.get_registration(kind, args.type_name).describe()

    # Unknown types fail before any client is built
    registry.get_registration(kind, args.type_name)
    client = client_factory(app_config)

    if kind == DATA_SOURCE:
        handler = registry.create_data_source_handler(args.type_name, client, app_config)
        data = handler.model.from_config(load_document(args.file))
        return handler.read(data).to_state()

    handler = registry.create_resource_handler(args.type_name, client, app_config)
    model = handler.model

    if args.action == 'create':
        data = model.from_config(load_document(args.file))
        return handler.create(data).to_state()

    handler.validate_id(args.id)

    if args.action == 'read':
        state = load_document(args.state) if args.state else {}
        data = model.from_state({**state, "id": args.id})
        return handler.read(data).to_state()

    if args.action == 'update':
        desired = model.from_config(load_document(args.file))
        desired.id = args.id
        stored = load_document(args.state) if args.state else {}
        prior = handler.read(model.from_state({**stored, "id": args.id}))
        if not prior.exists:
            raise ResourceNotFoundError(f"Cannot update {args.id!r}: it no longer exists", args.id)
        replaced = desired.replacement_fields(prior)
        if replaced:
            raise ValidationError(
                f"Changing {', '.join(replaced)} requires replacing {args.id!r}; delete and create it instead",
                replaced,
            )
        return handler.update(desired).to_state()

    if args.action == 'delete':
        handler.delete(model.empty(args.id))
        return {"id": args.id, "deleted": True}

    if args.action == 'import':
        return handler.import_state(args.id).to_state()

    raise ValidationError(f"Unknown action: {args.action}")


def _sensitive_fields(args: argparse.Namespace, registry: ResourceRegistry) -> List[str]:
    if getattr(args, 'type_name', None) is None or args.action == 'schema':
        return []
    return registry.get_registration(_kind(args), args.type_name).handler_class.model.sensitive_field_names()


def main(argv: Optional[List[str]] = None, client_factory: Optional[ClientFactory] = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    args = parse_args(argv)

    if not args.kind or not args.action:
        print("Error: No action specified. Use --help for usage information.", file=sys.stderr)
        return 2

    try:
        app_config = ConfigurationManager(args.config).app_config
    except DomainException as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.log_level:
        app_config.logging.level = args.log_level
    setup_logging(app_config.logging)
    logger = get_logger(__name__)

    registry = create_registry()
    client_factory = client_factory or (lambda config: AzureClient(config.provider))

    try:
        result = execute_command(args, app_config, registry, client_factory)
        formatted_output = format_output(result, args.format, _sensitive_fields(args, registry))
    except (DomainException, InfrastructureError) as e:
        logger.error("Command failed", kind=args.kind, action=args.action, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(formatted_output)
    else:
        print(formatted_output)
    return 0


def run() -> None:
    """Console script entry point."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    run()
