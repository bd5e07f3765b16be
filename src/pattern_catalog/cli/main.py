"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Output formatting and error reporting
"""
import argparse
import os
import sys
import traceback
from typing import Any, Callable, Dict, List, Optional, Tuple

from pattern_catalog._package import DESCRIPTION, __version__
from pattern_catalog.application.dto import DemoResult
from pattern_catalog.cli.formatters import format_output, format_text_output
from pattern_catalog.config.schemas import OUTPUT_FORMATS
from pattern_catalog.domain.base.exceptions import DomainException
from pattern_catalog.domain.catalog.value_objects import PatternCategory
from pattern_catalog.infrastructure.logging.logger import get_logger

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with resource-action structure."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) or "pattern-catalog",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s patterns list                          # List all patterns
  %(prog)s patterns list --category structural    # List structural patterns
  %(prog)s patterns show factory-method           # Show one pattern
  %(prog)s patterns run observer state            # Run two demos
  %(prog)s patterns run --all                     # Run every demo
  %(prog)s --format json patterns run singleton   # Demo output as JSON
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path')
    parser.add_argument('--log-level', type=str.upper, choices=LOG_LEVELS,
                        help='Set logging level')
    parser.add_argument('--format', choices=OUTPUT_FORMATS,
                        help='Output format (default: from configuration)')
    parser.add_argument('--output', help='Output file (default: stdout)')
    parser.add_argument('--quiet', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', action='store_true', help='Enable verbose output')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    # Resource subparsers
    subparsers = parser.add_subparsers(dest='resource', help='Available resources')

    categories = [c.value for c in PatternCategory]

    # Patterns resource
    patterns_parser = subparsers.add_parser('patterns', help='Browse and run pattern demos')
    patterns_subparsers = patterns_parser.add_subparsers(dest='action', help='Pattern actions')

    # Patterns list
    patterns_list = patterns_subparsers.add_parser('list', help='List catalog patterns')
    patterns_list.add_argument('--category', choices=categories, help='Filter by category')

    # Patterns show
    patterns_show = patterns_subparsers.add_parser('show', help='Show pattern details')
    patterns_show.add_argument('slug', help='Pattern slug, e.g. factory-method')

    # Patterns run
    patterns_run = patterns_subparsers.add_parser('run', help='Run pattern demos')
    patterns_run.add_argument('slugs', nargs='*', help='Pattern slugs to run')
    patterns_run.add_argument('--all', action='store_true', help='Run every demo')
    patterns_run.add_argument('--category', choices=categories,
                              help='Only run demos of this category (requires --all)')

    # Config resource
    config_parser = subparsers.add_parser('config', help='Configuration management')
    config_subparsers = config_parser.add_subparsers(dest='action', help='Config actions')
    config_subparsers.add_parser('show', help='Show effective configuration')

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)


def _command_handlers() -> Dict[Tuple[str, str], Callable[..., Dict[str, Any]]]:
    # Import command handlers here to avoid circular imports
    from pattern_catalog.interface import (
        handle_list_patterns,
        handle_run_patterns,
        handle_show_config,
        handle_show_pattern,
    )

    return {
        ('patterns', 'list'): handle_list_patterns,
        ('patterns', 'show'): handle_show_pattern,
        ('patterns', 'run'): handle_run_patterns,
        ('config', 'show'): handle_show_config,
    }


def execute_command(args: argparse.Namespace, app: Any) -> Dict[str, Any]:
    """Execute the appropriate command handler."""
    handler_key = (args.resource, args.action)
    handlers = _command_handlers()

    if handler_key not in handlers:
        raise ValueError(f"Unknown command: {args.resource} {args.action}")

    return handlers[handler_key](args, app)


def render(result: Dict[str, Any], output_format: str, app: Any) -> str:
    """Render a handler result in the requested output format."""
    if output_format != "text":
        return format_output(result, output_format)
    if "results" in result:
        results = [DemoResult.model_validate(item) for item in result["results"]]
        return app.catalog_service.render_transcript(results)
    return format_text_output(result)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    try:
        args = parse_args(argv)
        logger = get_logger(__name__)

        # Validate required arguments
        if not args.resource:
            print("Error: No resource specified. Use --help for usage information.",
                  file=sys.stderr)
            return 1

        if not args.action:
            print(f"Error: No action specified for {args.resource}. "
                  "Use --help for usage information.", file=sys.stderr)
            return 1

        try:
            from pattern_catalog.bootstrap import create_application

            app = create_application(args.config, log_level=args.log_level)

            result = execute_command(args, app)

            output_format = args.format or app.config.catalog.default_format
            formatted_output = render(result, output_format, app)

            if args.output:
                with open(args.output, 'w', encoding='utf-8') as f:
                    f.write(formatted_output + "\n")
                if not args.quiet:
                    print(f"Output written to {args.output}")
            else:
                print(formatted_output)
            return 0

        except DomainException as e:
            logger.error(f"Domain error: {e}")
            if not args.quiet:
                print(f"Error: {e}", file=sys.stderr)
            return 1
        except Exception as e:
            logger.error(f"Unexpected error: {e}")
            if args.verbose:
                traceback.print_exc()
            if not args.quiet:
                print(f"Unexpected error: {e}", file=sys.stderr)
            return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        return 130


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
