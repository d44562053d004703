"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Integration with the configuration, logging and family registry
"""
import os
import sys
import argparse
from typing import Any, Dict, List, Optional

from patternplayground._package import __version__
from patternplayground.cli.formatters import format_output
from patternplayground.config.manager import ConfigurationManager
from patternplayground.config.schemas import AppConfig
from patternplayground.domain.alert import AlertViewType
from patternplayground.domain.base.exceptions import DomainException
from patternplayground.infrastructure.logging.logger import get_logger, setup_logging

FORMAT_CHOICES = ['text', 'json', 'yaml', 'table']


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments with resource-action structure."""

    # Main parser with global options
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "pattern-playground",
        description="Pattern Playground - design pattern demonstrations on a toy maze",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s maze create                       # Build the maze with the default family
  %(prog)s maze create --family enchanted    # Use the enchanted factory family
  %(prog)s maze build --builder counting     # Count rooms and doors only
  %(prog)s --format table maze create        # Display rooms as a table
  %(prog)s families list                     # List registered families
  %(prog)s alerts show confirm               # Show a confirmation alert
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Set logging level')
    parser.add_argument('--format', choices=FORMAT_CHOICES, default='text', help='Output format')
    parser.add_argument('--output', help='Output file (default: stdout)')
    parser.add_argument('--quiet', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    # Resource subparsers
    subparsers = parser.add_subparsers(dest='resource', help='Available resources')

    # Maze resource
    maze_parser = subparsers.add_parser('maze', help='Create mazes')
    maze_subparsers = maze_parser.add_subparsers(dest='action', help='Maze actions')

    maze_create = maze_subparsers.add_parser('create', help='Create a maze through a factory family')
    maze_create.add_argument('--family', help='Factory family name (see: families list)')

    maze_build = maze_subparsers.add_parser('build', help='Create a maze through a builder')
    maze_build.add_argument('--builder', help='Builder name (see: families list)')

    # Families resource
    families_parser = subparsers.add_parser('families', help='Inspect construction families')
    families_subparsers = families_parser.add_subparsers(dest='action', help='Family actions')
    families_subparsers.add_parser('list', help='List registered factories and builders')

    # Alerts resource
    alerts_parser = subparsers.add_parser('alerts', help='Alert view factory method example')
    alerts_subparsers = alerts_parser.add_subparsers(dest='action', help='Alert actions')
    alerts_show = alerts_subparsers.add_parser('show', help='Show an alert view')
    alerts_show.add_argument('alert_type', choices=[t.value for t in AlertViewType],
                             help='Alert style')

    # Shapes resource
    shapes_parser = subparsers.add_parser('shapes', help='Text shape adapter example')
    shapes_subparsers = shapes_parser.add_subparsers(dest='action', help='Shape actions')
    shapes_bbox = shapes_subparsers.add_parser('bbox', help='Bounding box of an adapted text view')
    shapes_bbox.add_argument('--x', type=float, default=10.0, help='Origin x')
    shapes_bbox.add_argument('--y', type=float, default=10.0, help='Origin y')
    shapes_bbox.add_argument('--width', type=float, default=10.0, help='Extent width')
    shapes_bbox.add_argument('--height', type=float, default=10.0, help='Extent height')
    shapes_bbox.add_argument('--text', default='', help='Text content of the view')

    return parser.parse_args(argv)


def execute_command(args: argparse.Namespace, config: AppConfig) -> Dict[str, Any]:
    """Execute the appropriate command handler."""
    handler_key = (args.resource, args.action)

    # Imported here so that logging is configured before the registry is built
    from patternplayground.infrastructure.patterns.process_state import get_process_state
    from patternplayground.interface.command_handlers import COMMAND_HANDLERS

    if handler_key not in COMMAND_HANDLERS:
        raise ValueError(f"Unknown command: {args.resource} {args.action}")

    handler_class = COMMAND_HANDLERS[handler_key]
    handler = handler_class(state=get_process_state(), config=config)
    return handler.handle(args)


def load_config(args: argparse.Namespace) -> AppConfig:
    """Load configuration and apply command line overrides."""
    config_manager = ConfigurationManager(args.config)
    if args.log_level:
        config_manager.update_config({"logging": {"level": args.log_level}})
    return config_manager.get_app_config()


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    try:
        args = parse_args(argv)

        # Validate required arguments
        if not args.resource:
            print("Error: No resource specified. Use --help for usage information.")
            sys.exit(1)

        if not args.action:
            print(f"Error: No action specified for {args.resource}. Use --help for usage information.")
            sys.exit(1)

        try:
            config = load_config(args)
        except DomainException as e:
            print(f"Error: {e}")
            sys.exit(1)

        setup_logging(config.logging)
        logger = get_logger(__name__)

        # Execute command
        try:
            result = execute_command(args, config)
            formatted_output = format_output(result, args.format)

            if args.output:
                try:
                    with open(args.output, 'w', encoding='utf-8') as f:
                        f.write(formatted_output)
                except OSError as e:
                    logger.error("Failed to write output", output=args.output, error=str(e))
                    print(f"Error: Cannot write output to {args.output}: {e}")
                    sys.exit(1)
                if not args.quiet:
                    print(f"Output written to {args.output}")
            else:
                print(formatted_output)

        except DomainException as e:
            logger.error("Domain error", error=str(e))
            if not args.quiet:
                print(f"Error: {e}")
            sys.exit(1)

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        sys.exit(130)


if __name__ == "__main__":
    main()
