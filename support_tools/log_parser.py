"""
Log scanner for common CDN / origin patterns.

Works on log text already loaded in memory, extracting:
  - Origin error lines (HTTP 503 responses)
  - Cache hit / miss counts and the resulting hit rate

Lines that match nothing are simply skipped; there are no failure modes.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, List

from support_tools.models import CachePerformance

_ORIGIN_ERROR_TOKEN = " 503 "
_ORIGIN_ERROR_RE = re.compile(r"\b503\b")

_CACHE_HIT = "HIT"
_CACHE_MISS = "MISS"


def _is_origin_error(line: str) -> bool:
    return _ORIGIN_ERROR_TOKEN in line or _ORIGIN_ERROR_RE.search(line) is not None


# ─── Public API ───────────────────────────────────────────────


def parse_origin_errors(log_content: str) -> List[str]:
    """
    Extract the lines reporting a 503 status code.

    Args:
        log_content: Raw log text, one entry per line.

    Returns:
        Matching lines in their original order.
    """
    if not log_content:
        return []
    return [line for line in log_content.split("\n") if _is_origin_error(line)]


def analyze_cache_performance(log_lines: Iterable[str]) -> CachePerformance:
    """
    Tally cache hits and misses.

    A line containing "HIT" counts as a hit even if it also contains
    "MISS"; lines with neither are ignored.
    """
    hit_count = 0
    miss_count = 0
    for line in log_lines:
        if _CACHE_HIT in line:
            hit_count += 1
        elif _CACHE_MISS in line:
            miss_count += 1

    total = hit_count + miss_count
    hit_rate = hit_count / total if total > 0 else 0.0
    return CachePerformance(hit_rate=hit_rate, hit_count=hit_count, miss_count=miss_count)


def read_log_file(path: str | Path) -> str:
    """Read a log file as UTF-8 text, replacing undecodable bytes."""
    with open(path, "r", encoding="utf-8", errors="replace") as fh:
        return fh.read()
