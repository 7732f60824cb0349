# Copyright 2026 MeshCheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the MeshCheck command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from yachalk import chalk

from meshcheck.classification.capabilities import classify
from meshcheck.cli.messages import message_for
from meshcheck.config import CONFIG_FILE_NAME, ConfigError, MeshCheckConfig, load_config
from meshcheck.inventory.snapshot import SnapshotError, load_snapshot
from meshcheck.log_config import set_global_log_level
from meshcheck.validation.checks import check_destination_rules
from meshcheck.validation.findings import Finding, Severity

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the MeshCheck CLI."""
    parser = argparse.ArgumentParser(
        prog="meshcheck",
        description="MeshCheck - service mesh routing configuration checker",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Validate destination rules against the inventory",
        description="Resolve destination rule hosts and check subset labels against workloads.",
    )
    check_parser.add_argument("snapshot", help="Path to the inventory snapshot YAML file")
    check_parser.add_argument(
        "--config",
        default=None,
        help=f"Path to the configuration file (default: {CONFIG_FILE_NAME} in the current directory, if present)",
    )

    # classify subcommand
    classify_parser = subparsers.add_parser(
        "classify",
        help="List the traffic-management capabilities of virtual services",
        description="Report timeouts, fault injection, traffic shifting and request routing per virtual service.",
    )
    classify_parser.add_argument("snapshot", help="Path to the inventory snapshot YAML file")

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        set_global_log_level(logging.DEBUG)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "check":
        return _cmd_check(args)
    if args.command == "classify":
        return _cmd_classify(args)
    return 0


def _load_run_config(config_arg: str | None) -> MeshCheckConfig:
    """Load the explicit config file, else the default one if present, else defaults."""
    if config_arg is not None:
        return load_config(Path(config_arg))
    default_path = Path.cwd() / CONFIG_FILE_NAME
    if default_path.exists():
        return load_config(default_path)
    return MeshCheckConfig()


def _format_finding(namespace: str, name: str, finding: Finding) -> str:
    if finding.severity is Severity.ERROR:
        tag = chalk.red("Error")
    else:
        tag = chalk.yellow("Warning")
    return f"{tag}: {namespace}/{name} {finding.path}: {message_for(finding)} [{finding.code}]"


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    try:
        config = _load_run_config(args.config)
        snapshot = load_snapshot(Path(args.snapshot))
    except (ConfigError, SnapshotError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if not snapshot.destination_rules:
        print("No destination rules found in the snapshot.")
        return 0

    print(f"Checking {len(snapshot.destination_rules)} destination rule(s)...")
    results = check_destination_rules(snapshot.destination_rules, snapshot.context_for, config.identity_domain)

    has_errors = False
    has_warnings = False
    for rule, result in results:
        for finding in result.findings:
            line = _format_finding(rule.namespace, rule.name, finding)
            if finding.severity is Severity.ERROR:
                print(line, file=sys.stderr)
            else:
                print(line)
        has_errors = has_errors or not result.valid
        has_warnings = has_warnings or bool(result.warnings)

    if has_errors or (config.fail_on_warnings and has_warnings):
        return 1

    print("No issues found." if not has_warnings else "No errors found.")
    return 0


def _cmd_classify(args: argparse.Namespace) -> int:
    """Handle the classify subcommand."""
    try:
        snapshot = load_snapshot(Path(args.snapshot))
    except SnapshotError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if not snapshot.virtual_services:
        print("No virtual services found in the snapshot.")
        return 0

    for vs in snapshot.virtual_services:
        capabilities = classify(vs)
        flags = [
            ("timeout", capabilities.has_timeout),
            ("fault-injection", capabilities.has_fault_injection),
            ("http-traffic-shifting", capabilities.has_http_traffic_shifting),
            ("tcp-traffic-shifting", capabilities.has_tcp_traffic_shifting),
            ("request-routing", capabilities.has_request_routing),
        ]
        enabled = [label for label, present in flags if present]
        print(f"{vs.namespace}/{vs.name}: {', '.join(enabled) if enabled else 'none'}")
    return 0
