"""
Async API health checker.

Probes a list of HTTP endpoints concurrently. Each probe races a GET
request against a timeout; whichever finishes first decides the outcome
and the other is cancelled. Failures are captured per URL in the returned
ProbeResult objects and never raised to the caller.
"""

from __future__ import annotations

import asyncio
import time
from typing import Iterable, List, Optional

import aiohttp

from support_tools.models import ProbeResult

DEFAULT_TIMEOUT_MS = 5000

TIMEOUT_ERROR = "Timeout"


def _elapsed_ms(start: float) -> float:
    return (time.monotonic() - start) * 1000


def _is_success(status: int) -> bool:
    return 200 <= status <= 299


def _describe(exc: BaseException) -> str:
    """Human-readable error text, falling back to the exception type."""
    message = str(exc)
    return message if message else type(exc).__name__


async def _fetch_status(session: aiohttp.ClientSession, url: str) -> int:
    # Only the status line and headers are awaited; the body is discarded.
    async with session.get(url) as resp:
        return resp.status


async def _probe(session: aiohttp.ClientSession, url: str, timeout_ms: float) -> ProbeResult:
    start = time.monotonic()
    try:
        status = await asyncio.wait_for(_fetch_status(session, url), timeout=timeout_ms / 1000)
    except asyncio.TimeoutError:
        return ProbeResult(
            url=url,
            status=None,
            response_time=_elapsed_ms(start),
            healthy=False,
            error=TIMEOUT_ERROR,
        )
    except Exception as exc:
        return ProbeResult(
            url=url,
            status=None,
            response_time=_elapsed_ms(start),
            healthy=False,
            error=_describe(exc),
        )

    return ProbeResult(
        url=url,
        status=status,
        response_time=_elapsed_ms(start),
        healthy=_is_success(status),
    )


# ─── Public API ───────────────────────────────────────────────


async def check_api_health(
    urls: Iterable[str],
    timeout_ms: float = DEFAULT_TIMEOUT_MS,
    session: Optional[aiohttp.ClientSession] = None,
) -> List[ProbeResult]:
    """
    Probe every URL concurrently and wait for all of them.

    Args:
        urls: Endpoints to GET. A bare string is rejected.
        timeout_ms: Per-probe timeout in milliseconds.
        session: Optional caller-owned session. When omitted, one is
            created for this batch and closed afterwards.

    Returns:
        One ProbeResult per URL, in input order.

    Raises:
        TypeError: If `urls` is a string or not iterable.
    """
    if isinstance(urls, (str, bytes)):
        raise TypeError("urls must be a sequence of URL strings, not a single string")
    try:
        targets = list(urls)
    except TypeError:
        raise TypeError(f"urls must be iterable, got {type(urls).__name__}") from None

    if not targets:
        return []

    if session is not None:
        return list(await asyncio.gather(*(_probe(session, url, timeout_ms) for url in targets)))

    # No connection cap: every probe is dispatched at once, regardless of count
    connector = aiohttp.TCPConnector(limit=0)
    async with aiohttp.ClientSession(connector=connector) as own_session:
        return list(
            await asyncio.gather(*(_probe(own_session, url, timeout_ms) for url in targets))
        )


def run_health_check(
    urls: Iterable[str],
    timeout_ms: float = DEFAULT_TIMEOUT_MS,
) -> List[ProbeResult]:
    """Sync entry point for callers outside an event loop."""
    return asyncio.run(check_api_health(urls, timeout_ms))
