#!/usr/bin/env python3
"""
Entry point for the dialer installation profile.

Validates an install request and prints the resulting plan, or lists the
steps the profile knows about.
"""

import argparse
import logging
import platform
import sys
from typing import List, Optional

from common.core_utils import setup_logging
from dialer.config_loader import DEFAULT_CONFIG_FILE, load_dialer_settings
from dialer.config_models import SUPPORTED_ENSURE, SUPPORTED_OPERATING_SYSTEM, InstallRequest
from dialer.exceptions import DialerError
from dialer.planner import InstallPlanner
from dialer.renderers import RENDERERS, render_plan
from dialer.validator import validate_request

logger = logging.getLogger("dialer")


def detect_operating_system(platform_name: Optional[str] = None) -> str:
    """Operating system fact for the local machine."""
    platform_name = platform_name or sys.platform
    if platform_name.startswith("win"):
        return SUPPORTED_OPERATING_SYSTEM
    return platform.system()


def _add_request_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--operating-system",
        dest="operating_system",
        help="Operating system fact of the target (default: detected locally)",
    )
    parser.add_argument("--product", default="", help="Product to install: ODS or CCS")
    parser.add_argument(
        "--ensure", default=SUPPORTED_ENSURE, help="Desired state (only 'installed' is supported)"
    )
    parser.add_argument("--version", dest="version", help="Product version to install")
    parser.add_argument(
        "--ccs-server-name",
        dest="ccs_server_name",
        help="SQL Server instance for the CCS database (required for CCS)",
    )


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        args: Command-line arguments. If None, sys.argv[1:] is used.

    Returns:
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        description="Dialer installation profile: validate requests and build install plans"
    )

    # General options
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG_FILE, help="Path to the YAML configuration file"
    )
    parser.add_argument("--log-file", dest="log_file", help="Also write logs to this file")
    parser.add_argument("--log-prefix", dest="log_prefix", help="Prefix for log messages")
    parser.add_argument("--iso-path", dest="iso_path", help="Path of the installation ISO")
    parser.add_argument("--media-drive", dest="media_drive", help="Drive letter the ISO is mounted on")
    parser.add_argument("--ccs-database", dest="ccs_database", help="Name of the CCS database")
    parser.add_argument("--connection-file", dest="connection_file", help="Path of the CCS connection file")

    # Subcommands
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    subparsers.add_parser("list", help="List available plan steps")

    validate_parser = subparsers.add_parser("validate", help="Validate an install request")
    _add_request_arguments(validate_parser)

    plan_parser = subparsers.add_parser("plan", help="Validate a request and print its plan")
    _add_request_arguments(plan_parser)
    plan_parser.add_argument(
        "--format",
        dest="output_format",
        choices=sorted(RENDERERS),
        default="yaml",
        help="Output format (default: yaml)",
    )

    return parser.parse_args(args)


def request_from_args(parsed_args: argparse.Namespace) -> InstallRequest:
    operating_system = parsed_args.operating_system
    if operating_system is None:
        operating_system = detect_operating_system()
    return InstallRequest(
        operating_system=operating_system,
        product=parsed_args.product,
        ensure=parsed_args.ensure,
        version=parsed_args.version,
        ccs_server_name=parsed_args.ccs_server_name,
    )


def main(args: Optional[List[str]] = None) -> int:
    """
    Main entry point for the dialer profile.

    Args:
        args: Command-line arguments. If None, sys.argv[1:] is used.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    parsed_args = parse_args(args)

    settings = load_dialer_settings(parsed_args, parsed_args.config)
    setup_logging(
        log_level=logging.DEBUG if parsed_args.verbose else logging.INFO,
        log_file=parsed_args.log_file,
        log_prefix=settings.log_prefix,
        symbols=settings.symbols,
    )

    try:
        planner = InstallPlanner(settings, logger)

        if parsed_args.command == "list":
            for name, step_class in planner.get_available_steps().items():
                print(f"{name}: {step_class.get_description()}")
            return 0

        elif parsed_args.command == "validate":
            request = validate_request(request_from_args(parsed_args), logger)
            logger.info(f"Install request for {request.product} {request.version} is valid")
            return 0

        elif parsed_args.command == "plan":
            plan = planner.plan(request_from_args(parsed_args))
            sys.stdout.write(render_plan(plan, parsed_args.output_format))
            return 0

        else:
            logger.error("No command specified. Use --help for usage information.")
            return 1

    except DialerError as e:
        logger.error(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
