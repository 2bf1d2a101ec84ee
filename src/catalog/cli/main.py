"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Routing of (resource, action) pairs to bus messages
- Output formatting and exit codes
"""
import argparse
import os
import sys
import uuid
from typing import Any, Callable, Dict, List, Optional, Tuple

from catalog import __version__
from catalog.application.dto.base import BaseResponse
from catalog.application.item import (
    AddItemCommand,
    ArchiveItemCommand,
    GetAllItemsQuery,
    GetItemQuery,
    UnarchiveItemCommand,
)
from catalog.application.product import (
    AddProductCommand,
    ArchiveProductCommand,
    GetAllProductsQuery,
    GetProductQuery,
    UnarchiveProductCommand,
)
from catalog.cli.formatters import format_output
from catalog.infrastructure.error import ErrorResponse
from catalog.infrastructure.exceptions import ConfigurationError
from catalog.infrastructure.logging import get_logger
from catalog.infrastructure.persistence.exceptions import PersistenceError

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

RESOURCES = ("items", "products")


def build_parser() -> argparse.ArgumentParser:
    """Build the resource-action argument parser."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) or "catalog",
        description="Catalog service - manage items and products",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s items add Apple weight           # Create an item
  %(prog)s products add Milk 2              # Measure type by id
  %(prog)s items archive <id>               # Archive an item
  %(prog)s --format table products list     # Display as table
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Override the configured logging level')
    parser.add_argument('--format', choices=['json', 'yaml', 'table'],
                        default='json', help='Output format')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='resource', help='Available resources')

    for resource in RESOURCES:
        singular = resource[:-1]
        resource_parser = subparsers.add_parser(resource, help=f'Manage {resource}')
        actions = resource_parser.add_subparsers(dest='action', help=f'{singular.capitalize()} actions')

        add = actions.add_parser('add', help=f'Create a {singular}')
        add.add_argument('name', help=f'{singular.capitalize()} name')
        add.add_argument('measure_type', help='Measure type name (weight, liquid) or id (1, 2)')

        for action, verb in (('archive', 'Archive'), ('unarchive', 'Unarchive'), ('show', 'Show')):
            action_parser = actions.add_parser(action, help=f'{verb} a {singular}')
            action_parser.add_argument('entry_id', type=uuid.UUID, help=f'{singular.capitalize()} ID')

        actions.add_parser('list', help=f'List all {resource}')

    return parser


COMMANDS: Dict[Tuple[str, str], Callable[[argparse.Namespace], Any]] = {
    ('items', 'add'): lambda a: AddItemCommand(name=a.name, measure_type=a.measure_type),
    ('items', 'archive'): lambda a: ArchiveItemCommand(item_id=a.entry_id),
    ('items', 'unarchive'): lambda a: UnarchiveItemCommand(item_id=a.entry_id),
    ('products', 'add'): lambda a: AddProductCommand(name=a.name, measure_type=a.measure_type),
    ('products', 'archive'): lambda a: ArchiveProductCommand(product_id=a.entry_id),
    ('products', 'unarchive'): lambda a: UnarchiveProductCommand(product_id=a.entry_id),
}

QUERIES: Dict[Tuple[str, str], Callable[[argparse.Namespace], Any]] = {
    ('items', 'show'): lambda a: GetItemQuery(item_id=a.entry_id),
    ('items', 'list'): lambda a: GetAllItemsQuery(),
    ('products', 'show'): lambda a: GetProductQuery(product_id=a.entry_id),
    ('products', 'list'): lambda a: GetAllProductsQuery(),
}


def execute_command(args: argparse.Namespace, app) -> BaseResponse:
    """Translate parsed arguments into a bus message and dispatch it."""
    key = (args.resource, args.action)
    if key in COMMANDS:
        return app.get_command_bus().execute_sync(COMMANDS[key](args))
    return app.get_query_bus().execute_sync(QUERIES[key](args))


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point; returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Validate required arguments
    if not args.resource:
        parser.print_usage(sys.stderr)
        print("Error: No resource specified. Use --help for usage information.", file=sys.stderr)
        return EXIT_USAGE

    if not args.action:
        print(f"Error: No action specified for {args.resource}. Use --help for usage information.",
              file=sys.stderr)
        return EXIT_USAGE

    logger = get_logger(__name__)

    # Initialize application
    from catalog.bootstrap import Application
    app = Application(args.config, log_level=args.log_level)
    try:
        app.initialize()
    except (ConfigurationError, PersistenceError) as e:
        print(format_output(ErrorResponse.from_exception(e).to_dict(), args.format))
        return EXIT_FAILURE

    try:
        response = execute_command(args, app)
    except PersistenceError as e:
        logger.error("Storage error", error=str(e))
        print(format_output(ErrorResponse.from_exception(e).to_dict(), args.format))
        return EXIT_FAILURE
    finally:
        app.shutdown()

    if not response.success:
        print(format_output(ErrorResponse.from_response(response).to_dict(), args.format))
        return EXIT_FAILURE

    print(format_output(response.to_dict(), args.format))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
