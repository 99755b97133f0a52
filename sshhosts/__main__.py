"""
Entry point for sshhosts.

Usage:
    python -m sshhosts                       # ~/.ssh/config.d/* and ~/.ssh/config
    python -m sshhosts /path/to/ssh_config --json
    python -m sshhosts --help
"""

import argparse
import json
import sys

from . import __version__
from .config.loader import ConfigError, ConfigLoader
from .config.schema import HostRecord
from .logging import LogConfig, get_logger, setup_logging


logger = get_logger("main")


def print_hosts(hosts: list[HostRecord], as_json: bool = False) -> None:
    """Print host records as ssh_config text or JSON."""
    if as_json:
        print(json.dumps([host.to_dict() for host in hosts], indent=2))
        return

    print("\n".join(host.to_ssh_config() for host in hosts), end="")


def validate_config(loader: ConfigLoader, hosts: list[HostRecord]) -> int:
    """Print validation warnings and a short summary."""
    warnings = loader.validate(hosts)

    if warnings:
        print(f"Configuration warnings ({len(warnings)}):")
        for warning in warnings:
            print(f"  - {warning}")

    print("\nConfiguration summary:")
    print(f"  Host blocks: {len(hosts)}")
    print(f"  Patterns: {sum(len(host.patterns) for host in hosts)}")

    print("\nConfiguration is valid!")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="sshhosts",
        description="List the Host blocks of OpenSSH client configuration files",
    )

    parser.add_argument(
        "paths",
        nargs="*",
        metavar="PATH",
        help="Configuration files (default: ~/.ssh/config.d/* then ~/.ssh/config)",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print host records as JSON",
    )

    parser.add_argument(
        "--validate",
        action="store_true",
        help="Validate configuration and exit",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging (INFO level)",
    )

    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        help="Enable debug logging (DEBUG level)",
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Quiet mode (only errors)",
    )

    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Write logs to file",
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    args = parser.parse_args(argv)

    log_config = LogConfig()

    if args.debug:
        log_config.console_level = "debug"
    elif args.verbose:
        log_config.console_level = "info"
    elif args.quiet:
        log_config.console_level = "error"

    if args.no_color:
        log_config.console_colors = False

    if args.log_file:
        log_config.file_path = args.log_file

    setup_logging(log_config)

    loader = ConfigLoader()
    try:
        hosts = loader.load_files(args.paths)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    logger.info(f"Loaded {len(hosts)} host block(s)")

    if args.validate:
        return validate_config(loader, hosts)

    print_hosts(hosts, as_json=args.json)
    return 0


if __name__ == "__main__":
    sys.exit(main())
