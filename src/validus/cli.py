"""Command Line Interface for the validation engine.

This module provides a CLI for validating JSON data against a JSON rule
configuration (see validus.config for the document format).

The CLI supports the following commands:
    - validate: Validate a data object against a rule configuration

JSON input can be provided either as a direct string or as a file path prefixed
with '@'. An optional message catalog translates the error messages.

Exit codes:
    0: all attributes are valid
    1: at least one attribute is invalid
    2: the rules, data or catalog could not be loaded

Example Usage:
    python -m validus validate --rules @rules.json --data @data.json
    python -m validus validate --rules '{"age": [{"rule": "number", "min": 0}]}' --data '{"age": -1}'
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import load_catalog, load_json_document, load_rules
from .core.exceptions import ConfigurationError
from .factory import ValidatorFactory
from .reporter import ValidationReporter
from .translation import MessageCatalogTranslator

logger = logging.getLogger(__name__)

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_CONFIGURATION_ERROR = 2

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_HANDLER_NAME = "validus-cli"


def setup_logging(level: str) -> None:
    """Send package logging to stderr with timestamp, logger name and level."""
    package_logger = logging.getLogger("validus")
    package_logger.setLevel(level.upper())
    for handler in list(package_logger.handlers):
        if handler.get_name() == LOG_HANDLER_NAME:
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(LOG_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        argparse.ArgumentParser: Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(prog="validus", description="Attribute rule validation")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for diagnostic output on stderr",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    validate = subparsers.add_parser("validate", help="Validate data against a rule configuration")
    validate.add_argument("--rules", required=True, help="JSON string or @filename with the rules")
    validate.add_argument("--data", required=True, help="JSON string or @filename with the data")
    validate.add_argument("--messages", help="JSON string or @filename with a message catalog")
    validate.add_argument(
        "--format", choices=["text", "json"], default="text", help="Output format"
    )

    return parser


def run_validate(args: argparse.Namespace) -> int:
    """Execute the validate command and print the report.

    Returns:
        int: Process exit code.
    """
    try:
        rules = load_rules(args.rules)
        data = load_json_document(args.data)
        if not isinstance(data, dict):
            raise ValueError("Data must be a JSON object")
        translator = MessageCatalogTranslator(load_catalog(args.messages)) if args.messages else None
        validator = ValidatorFactory(translator).create(rules)
    except (ConfigurationError, ValueError) as e:
        logger.error(f"Failed to set up validation: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONFIGURATION_ERROR

    result_set = validator.validate(data)

    if args.format == "json":
        print(ValidationReporter.to_json(result_set))
    else:
        print(ValidationReporter.format_result(result_set))

    return EXIT_VALID if result_set.is_valid() else EXIT_INVALID


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI application."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_CONFIGURATION_ERROR

    setup_logging(args.log_level)

    if args.command == "validate":
        return run_validate(args)
    return EXIT_CONFIGURATION_ERROR


if __name__ == "__main__":
    sys.exit(main())
