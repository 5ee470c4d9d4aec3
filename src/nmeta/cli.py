"""Command line helper for inspecting client metadata headers."""

import argparse
import json
import logging
import sys

from nmeta.adapters.config import AppConfig
from nmeta.application.services import HeaderParser
from nmeta.domain.errors import HeaderValidationError
from nmeta.domain.models import ClientMetadata, HeaderConfiguration

logger = logging.getLogger(__name__)


def load_configuration(config_file: str | None) -> HeaderConfiguration:
    """Load header configuration from the environment, optionally overridden by a TOML file."""
    if config_file:
        return AppConfig(config_file=config_file).to_header_configuration()
    return AppConfig().to_header_configuration()


def format_metadata(metadata: ClientMetadata) -> str:
    """Render metadata as aligned ``key: value`` lines."""
    fields = metadata.to_dict()
    width = max(len(key) for key in fields)
    lines = []
    for key, value in fields.items():
        lines.append(f"{key.ljust(width)}  {'-' if value is None else value}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nmeta",
        description="Client metadata header helper",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Parse and validate a header
  nmeta parse "ios;local;1.0.0;10.1;iphone-x"

  # Same, as JSON
  nmeta parse "android;production;2.3.1;14;pixel-8" --json

  # Normalise a header
  nmeta format "web;staging;ignored"

  # Show the effective configuration
  nmeta config --config nmeta.toml
        """,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    parse_parser = subparsers.add_parser("parse", help="Parse and validate a header")
    parse_parser.add_argument("header", help="Raw header value")
    parse_parser.add_argument("--json", action="store_true", help="Output as JSON")
    parse_parser.add_argument("--config", dest="config_file", help="TOML configuration file")

    format_parser = subparsers.add_parser("format", help="Print the normalised header string")
    format_parser.add_argument("header", help="Raw header value")
    format_parser.add_argument("--config", dest="config_file", help="TOML configuration file")

    config_parser = subparsers.add_parser("config", help="Show the effective configuration")
    config_parser.add_argument("--config", dest="config_file", help="TOML configuration file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = load_configuration(args.config_file)
    except (FileNotFoundError, ValueError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1
    logger.debug(f"Using configuration {config!r}")

    if args.command == "config":
        print(json.dumps(config.model_dump(), indent=2))
        return 0

    header_parser = HeaderParser(config)
    try:
        metadata = header_parser.parse(args.header)
    except HeaderValidationError as e:
        print(e.message, file=sys.stderr)
        return 1

    if args.command == "format":
        print(metadata.to_header_string())
    elif args.json:
        print(json.dumps(metadata.to_dict(), indent=2))
    else:
        print(format_metadata(metadata))
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
