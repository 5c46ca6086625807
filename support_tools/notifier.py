"""
Console Notifier — clean, structured console output for support-cli.

Formats probe results, log matches and cache statistics into
timestamped console lines, with ANSI colors for readability.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List

from support_tools.models import CachePerformance, ProbeResult

# ANSI color codes for terminal styling
_RESET = "\033[0m"
_BOLD = "\033[1m"
_DIM = "\033[2m"
_RED = "\033[91m"
_GREEN = "\033[92m"
_YELLOW = "\033[93m"
_GRAY = "\033[90m"


def _timestamp() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")


def _hit_rate_color(hit_rate: float) -> str:
    """Pick a color based on cache efficiency."""
    if hit_rate >= 0.9:
        return _GREEN
    elif hit_rate >= 0.7:
        return _YELLOW
    else:
        return _RED


def print_system_ok() -> None:
    """Print the static system status."""
    print(f"{_GREEN}System health: OK{_RESET}")


def print_probe_result(result: ProbeResult) -> None:
    """Print one health probe on a single line."""
    if result.healthy:
        tag = f"{_GREEN}HEALTHY{_RESET}"
    else:
        tag = f"{_RED}UNHEALTHY{_RESET}"

    status = result.status if result.status is not None else "---"
    line = (
        f"  {_GRAY}[{_timestamp()}]{_RESET} {tag} "
        f"{_BOLD}{result.url}{_RESET}  "
        f"status={status}  {result.response_time:.0f}ms"
    )
    if result.error:
        line += f"  {_DIM}({result.error}){_RESET}"
    print(line)


def print_probe_summary(results: List[ProbeResult]) -> None:
    """Print the healthy/total tally after a batch of probes."""
    healthy = sum(1 for r in results if r.healthy)
    color = _GREEN if healthy == len(results) else _RED
    print(f"\n  {_BOLD}{color}{healthy}/{len(results)} endpoints healthy{_RESET}\n")


def print_parsing_start(path: str, errors_only: bool) -> None:
    """Announce which log file is being scanned."""
    kind = "error" if errors_only else "all"
    print(f"Parsing {kind} logs from {path}...")


def print_log_line(line: str) -> None:
    print(f"  {line}")


def print_no_matches() -> None:
    print(f"  {_DIM}No matching lines.{_RESET}")


def print_cache_summary(perf: CachePerformance) -> None:
    """Print cache hit/miss counts and the hit rate."""
    color = _hit_rate_color(perf.hit_rate)
    print(
        f"\n  {_BOLD}Cache:{_RESET} {perf.hit_count} hits, {perf.miss_count} misses"
        f"  hit rate {color}{perf.hit_rate:.2%}{_RESET}"
    )


def print_tracking(incident_id: str) -> None:
    print(f"Tracking incident with ID: {incident_id}")


def print_debug(message: str) -> None:
    """Print a dim diagnostic line (debug level only)."""
    print(f"  {_DIM}[{_timestamp()}] {message}{_RESET}")


def print_error(message: str) -> None:
    """Print an error message."""
    print(f"  {_GRAY}[{_timestamp()}]{_RESET} {_RED}ERROR{_RESET} {message}")
