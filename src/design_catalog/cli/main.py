"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Integration with the catalog service
"""
import argparse
import sys
from typing import List, Optional

from design_catalog import __version__
from design_catalog.application.catalog_service import CatalogService, RunReport, bootstrap_catalog
from design_catalog.cli.formatters import format_output
from design_catalog.config import AppConfig, ConfigurationManager
from design_catalog.domain.base.catalog import Category
from design_catalog.domain.core.exceptions import ConfigurationError, DomainException, ExampleNotFoundError
from design_catalog.infrastructure.adapters.output import BufferedOutput, ConsoleOutput
from design_catalog.infrastructure.logging.logger import get_logger, setup_logging

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG_ERROR = 2

FORMATS = ["json", "yaml", "table", "list"]
CATEGORIES = [c.value for c in Category]


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its subcommands."""
    parser = argparse.ArgumentParser(
        prog="design-catalog",
        description="Runnable catalog of OOP, SOLID and design pattern demonstrations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                              # List every demonstration
  %(prog)s list --category solid             # List the SOLID demonstrations
  %(prog)s show structural.proxy             # Describe one demonstration
  %(prog)s run oop.encapsulation             # Run one demonstration
  %(prog)s run --all --category creational   # Run a whole category
        """,
    )

    # Global options
    parser.add_argument("--config", help="Configuration file path (JSON or YAML)")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Set logging level")
    parser.add_argument("--format", choices=FORMATS, help="Output format for listings")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    list_parser = subparsers.add_parser("list", help="List demonstrations")
    list_parser.add_argument("--category", choices=CATEGORIES, help="Only list one category")

    show_parser = subparsers.add_parser("show", help="Show one demonstration")
    show_parser.add_argument("key", help="Demonstration key, e.g. oop.encapsulation")

    run_parser = subparsers.add_parser("run", help="Run demonstrations")
    run_parser.add_argument("keys", nargs="*", help="Demonstration keys to run, in order")
    run_parser.add_argument("--all", action="store_true", help="Run every enabled demonstration")
    run_parser.add_argument("--category", choices=CATEGORIES, help="With --all, only run one category")
    run_parser.add_argument("--capture", action="store_true",
                            help="Collect demonstration output and print it with the run report")

    return parser


def load_configuration(args: argparse.Namespace) -> AppConfig:
    """Load configuration and set up logging from it."""
    app_config = ConfigurationManager(args.config).app_config
    logging_config = app_config.logging
    if args.log_level:
        logging_config = logging_config.model_copy(update={"level": args.log_level})
    setup_logging(logging_config)
    return app_config


def _run_command(args: argparse.Namespace, app_config: AppConfig) -> int:
    output_format = args.format or app_config.output.format
    registry = bootstrap_catalog()

    if args.command == "list":
        service = CatalogService(registry, app_config.catalog)
        print(format_output(service.list_examples(args.category), output_format))
        return EXIT_OK

    if args.command == "show":
        service = CatalogService(registry, app_config.catalog)
        print(format_output(service.describe(args.key), output_format))
        return EXIT_OK

    # run
    if not args.all and not args.keys:
        print("Error: Specify one or more example keys, or --all.")
        return EXIT_FAILURE

    buffer = BufferedOutput() if args.capture else None
    service = CatalogService(registry, app_config.catalog, buffer if buffer is not None else ConsoleOutput())
    report: RunReport
    if args.all:
        report = service.run_all(args.category)
    else:
        report = service.run_examples(args.keys)

    if buffer is not None:
        result = report.model_dump()
        result["output"] = buffer.lines
        print(format_output(result, output_format))

    return EXIT_OK if report.succeeded else EXIT_FAILURE


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        print("Error: No command specified. Use --help for usage information.")
        return EXIT_FAILURE

    try:
        app_config = load_configuration(args)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    logger = get_logger(__name__)

    try:
        return _run_command(args, app_config)
    except ExampleNotFoundError as e:
        logger.warning("Unknown example", key=e.key)
        print(f"Error: {e}")
        return EXIT_FAILURE
    except DomainException as e:
        logger.error("Domain error", error=str(e))
        print(f"Error: {e}")
        return EXIT_FAILURE
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
