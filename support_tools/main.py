"""
Main entry point — the support-cli command dispatcher.

Maps sub-commands onto the health checker and log scanner:

    support-cli health-check [--url URL ...] [--timeout MS]
    support-cli parse-logs <file> [--error] [--cache]
    support-cli track-incident <id>

Usage:
    python -m support_tools
    support-cli --help
"""

from __future__ import annotations

import argparse
from typing import List, Optional

from support_tools import __version__, notifier
from support_tools.config import load_config
from support_tools.health_checker import run_health_check
from support_tools.log_parser import (
    analyze_cache_performance,
    parse_origin_errors,
    read_log_file,
)
from support_tools.models import SupportSettings

_EXAMPLES = """
Examples:
    $ support-cli health-check
    $ support-cli health-check --url https://api.example.com/health --timeout 2000
    $ support-cli parse-logs server.log
    $ support-cli parse-logs server.log --error
    $ support-cli parse-logs cdn.log --cache
    $ support-cli track-incident 12345
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="support-cli",
        description="CLI tool for support engineers",
        epilog=_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", help="Path to the YAML config file")

    commands = parser.add_subparsers(dest="command", metavar="<command>")
    commands.required = True

    health = commands.add_parser("health-check", help="Check the health status of the system")
    health.add_argument(
        "--url",
        dest="urls",
        action="append",
        default=[],
        help="Endpoint to probe (repeatable; defaults to configured endpoints)",
    )
    health.add_argument("--timeout", type=int, help="Per-probe timeout in milliseconds")
    health.set_defaults(handler=_cmd_health_check)

    logs = commands.add_parser("parse-logs", help="Parse logs from the specified file")
    logs.add_argument("file", help="Log file to scan")
    logs.add_argument("-e", "--error", action="store_true", help="Show only error logs")
    logs.add_argument("-c", "--cache", action="store_true", help="Summarise cache hit/miss ratio")
    logs.set_defaults(handler=_cmd_parse_logs)

    track = commands.add_parser("track-incident", help="Track the status of an incident by ID")
    track.add_argument("id", help="Incident identifier")
    track.set_defaults(handler=_cmd_track_incident)

    return parser


# ─── Command handlers ─────────────────────────────────────────


def _cmd_health_check(args: argparse.Namespace, settings: SupportSettings) -> int:
    urls = args.urls or settings.endpoints
    if not urls:
        notifier.print_system_ok()
        return 0

    timeout_ms = args.timeout if args.timeout is not None else settings.health_timeout_ms
    if settings.log_level == "DEBUG":
        notifier.print_debug(f"Probing {len(urls)} endpoint(s) with {timeout_ms}ms timeout")

    results = run_health_check(urls, timeout_ms)
    for result in results:
        notifier.print_probe_result(result)
    notifier.print_probe_summary(results)
    return 0 if all(r.healthy for r in results) else 1


def _cmd_parse_logs(args: argparse.Namespace, settings: SupportSettings) -> int:
    notifier.print_parsing_start(args.file, args.error)
    try:
        content = read_log_file(args.file)
    except FileNotFoundError:
        notifier.print_error(f"Log file not found: {args.file}")
        return 1

    if args.error:
        lines = parse_origin_errors(content)
    else:
        lines = [line for line in content.splitlines() if line.strip()]

    if settings.log_level == "DEBUG":
        notifier.print_debug(f"{len(lines)} line(s) selected from {args.file}")

    if lines:
        for line in lines:
            notifier.print_log_line(line)
    else:
        notifier.print_no_matches()

    if args.cache:
        notifier.print_cache_summary(analyze_cache_performance(content.splitlines()))
    return 0


def _cmd_track_incident(args: argparse.Namespace, settings: SupportSettings) -> int:
    notifier.print_tracking(args.id)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, load config and dispatch to the chosen command."""
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = load_config(args.config)
    return args.handler(args, settings)


if __name__ == "__main__":
    raise SystemExit(main())
