"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Integration with the catalog service
"""
import argparse
import os
import sys
import traceback
from typing import Any, Dict, List, Optional

from pattern_catalog._version import __version__
from pattern_catalog.application.catalog_service import CatalogService
from pattern_catalog.application.registration import register_all_demos
from pattern_catalog.cli.formatters import format_output
from pattern_catalog.config import DemoConfig, LoggingConfig, OutputConfig, get_config_manager
from pattern_catalog.domain.exceptions import DomainException
from pattern_catalog.domain.value_objects import DemoCategory
from pattern_catalog.infrastructure.exceptions import InfrastructureError
from pattern_catalog.infrastructure.logging.logger import get_logger, setup_logging

FORMAT_CHOICES = ["json", "yaml", "table", "list"]
CATEGORY_CHOICES = [c.value for c in DemoCategory]


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with global options and commands."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) or "pattern-catalog",
        description="Pattern Catalog - runnable Gang-of-Four design pattern demos",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                           # List all demos
  %(prog)s list --category behavioral     # List behavioral demos
  %(prog)s show observer                  # Show a demo and its notes
  %(prog)s run builder state              # Run two demos
  %(prog)s --format json run-all          # Run everything, JSON results
        """,
    )

    # Global options
    parser.add_argument("--config", help="Configuration file path (JSON or YAML)")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Set logging level",
    )
    parser.add_argument("--format", choices=FORMAT_CHOICES, help="Output format")
    parser.add_argument("--quiet", action="store_true", help="Suppress error messages")
    parser.add_argument("--verbose", action="store_true", help="Print tracebacks on errors")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    list_parser = subparsers.add_parser("list", help="List demos")
    list_parser.add_argument("--category", choices=CATEGORY_CHOICES, help="Filter by category")

    show_parser = subparsers.add_parser("show", help="Show demo details and notes")
    show_parser.add_argument("name", help="Demo name")

    run_parser = subparsers.add_parser("run", help="Run one or more demos")
    run_parser.add_argument("names", nargs="+", help="Demo names")

    run_all_parser = subparsers.add_parser("run-all", help="Run every demo")
    run_all_parser.add_argument("--category", choices=CATEGORY_CHOICES, help="Filter by category")

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)


def _category(args: argparse.Namespace) -> Optional[DemoCategory]:
    category = getattr(args, "category", None)
    return DemoCategory(category) if category else None


def execute_command(
    args: argparse.Namespace, service: CatalogService, output_config: OutputConfig
) -> Dict[str, Any]:
    """Execute the command and return its result data."""
    if args.command == "list":
        demos = service.list_demos(_category(args))
        return {"demos": [d.model_dump(mode="json", exclude={"notes"}) for d in demos]}

    if args.command == "show":
        exclude = None if output_config.show_notes else {"notes"}
        return {"demo": service.describe(args.name).model_dump(mode="json", exclude=exclude)}

    if args.command == "run":
        # Resolve every name first so a typo fails before anything runs
        for name in args.names:
            service.describe(name)
        results = [service.run_demo(name) for name in args.names]
        return {"results": [r.model_dump(mode="json") for r in results]}

    if args.command == "run-all":
        results = service.run_all(_category(args))
        return {"results": [r.model_dump(mode="json") for r in results]}

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    if not args.command:
        print("Error: No command specified. Use --help for usage information.", file=sys.stderr)
        return 1

    logger = get_logger(__name__)

    try:
        config_manager = get_config_manager(args.config)
        logging_config = config_manager.get_typed(LoggingConfig)
        if args.log_level:
            logging_config = logging_config.model_copy(update={"level": args.log_level})
        setup_logging(logging_config)

        output_config = config_manager.get_typed(OutputConfig)
        output_format = args.format or output_config.format.value

        service = CatalogService(register_all_demos(), config_manager.get_typed(DemoConfig))
        result = execute_command(args, service, output_config)
        print(format_output(result, output_format))

    except (DomainException, InfrastructureError) as e:
        logger.error(f"Command failed: {e}")
        if args.verbose:
            traceback.print_exc()
        if not args.quiet:
            print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        return 130
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        if args.verbose:
            traceback.print_exc()
        if not args.quiet:
            print(f"Unexpected error: {e}", file=sys.stderr)
        return 1

    if any(not r.get("success", True) for r in result.get("results", [])):
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
