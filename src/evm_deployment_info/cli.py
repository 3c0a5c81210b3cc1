"""Command-line interface for evm-deployment-info."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .exceptions import DeploymentInfoError
from .parsers import load_networks
from .paths import get_deployments_dir, validate_hardhat_project
from .reconcile import reconcile
from .render import OutputFormat, render_audit, render_listing, write_output
from .store import DeploymentStore
from .types import ReconciliationResult
from .update import UpdateSettings, check_for_update, upgrade_command

logger = logging.getLogger(__name__)


def _configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _store(args: argparse.Namespace) -> DeploymentStore:
    return DeploymentStore(get_deployments_dir(args.root, args.deployments_dir))


def _reconcile_project(args: argparse.Namespace) -> ReconciliationResult:
    config_path = validate_hardhat_project(args.root, args.config)
    networks = load_networks(config_path)
    logger.info("Found %d networks in %s", len(networks), config_path)
    return reconcile(networks, _store(args))


def cmd_count(args: argparse.Namespace) -> int:
    validate_hardhat_project(args.root, args.config)
    count = _store(args).count()
    print(f"Found {count} deployment(s)")
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    result = _reconcile_project(args)
    content = render_listing(result, OutputFormat(args.format), aggregated=args.aggregate)
    write_output(content, args.output)
    return 0


def cmd_audit(args: argparse.Namespace) -> int:
    result = _reconcile_project(args)
    content = render_audit(result, OutputFormat(args.format))
    write_output(content, args.output)
    return 0


def cmd_check_update(args: argparse.Namespace) -> int:
    status = check_for_update(UpdateSettings.from_env(__version__))
    if status.update_available:
        print(f"A new version is available: {status.latest} (installed: {status.current})")
        print(f"Run '{upgrade_command()}' to update.")
    else:
        print(f"evm-deployment-info {status.current} is up to date.")
    return 0


def _add_output_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-f",
        "--format",
        choices=[fmt.value for fmt in OutputFormat],
        default=OutputFormat.TABLE.value,
        help="Output format (default: table)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write output to this file instead of stdout",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="evm-deployment-info",
        description="A CLI tool for analyzing hardhat deployments",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-r",
        "--root",
        type=Path,
        default=Path("."),
        help="Root directory of the hardhat project (default: .)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Config file name inside the root (default: hardhat.config.ts)",
    )
    parser.add_argument(
        "--deployments-dir",
        default=None,
        help="Deployment store directory, relative to the root (default: ignition/deployments)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug)",
    )

    subparsers = parser.add_subparsers(dest="command")

    count_parser = subparsers.add_parser("count", help="Count the number of deployments")
    count_parser.set_defaults(handler=cmd_count)

    list_parser = subparsers.add_parser(
        "list", help="List deployed addresses and networks without deployments"
    )
    list_parser.add_argument(
        "-a",
        "--aggregate",
        action="store_true",
        help="Group networks by ecosystem (e.g. polygonMainnet, polygonAmoy -> Polygon)",
    )
    _add_output_options(list_parser)
    list_parser.set_defaults(handler=cmd_list)

    audit_parser = subparsers.add_parser(
        "audit", help="Find config networks without deployments and deployments without config"
    )
    _add_output_options(audit_parser)
    audit_parser.set_defaults(handler=cmd_audit)

    update_parser = subparsers.add_parser(
        "check-update", help="Check whether a newer release is available"
    )
    update_parser.set_defaults(handler=cmd_check_update)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the command line.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:])

    Returns:
        Process exit code: 0 on success, 1 on any error
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.command is None:
        print("No command provided. Use --help to see available commands.")
        return 0

    try:
        return args.handler(args)
    except DeploymentInfoError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
