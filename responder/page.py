"""
Responder Page Module
---------------------

Builds the values rendered into the landing page:
- host identity of the machine/container serving the request
- current server time as an ISO-8601 instant (YYYY-MM-DDTHH:mm:ss.sssZ, UTC)

Both values come from small injectable capabilities so callers (and tests)
can pin them:
  - get_hostname() -> str
  - clock() -> datetime

Public API:
  - system_hostname
  - utc_now
  - resolve_hostname
  - format_iso_instant
  - build_page_context

This module is intentionally decoupled from Flask.
"""

from __future__ import annotations

import socket
import sys
from dataclasses import dataclass
from datetime import datetime
from typing import Callable

import pytz

HOSTNAME_PLACEHOLDER = "unknown-host"

HostnameProvider = Callable[[], str]
Clock = Callable[[], datetime]


@dataclass(frozen=True)
class PageContext:
    hostname: str
    server_time: str


def system_hostname() -> str:
    return socket.gethostname()


def utc_now() -> datetime:
    return datetime.now(pytz.utc)


def resolve_hostname(get_hostname: HostnameProvider = system_hostname) -> str:
    """
    Return the host identity, or HOSTNAME_PLACEHOLDER if the lookup fails
    or comes back empty. Never raises for lookup errors.
    """
    try:
        hostname = get_hostname()
    except OSError as e:
        print(f"[WARN] Could not resolve hostname: {e}", file=sys.stderr)
        return HOSTNAME_PLACEHOLDER

    hostname = (hostname or "").strip()
    if not hostname:
        print("[WARN] Hostname lookup returned an empty value", file=sys.stderr)
        return HOSTNAME_PLACEHOLDER
    return hostname


def format_iso_instant(moment: datetime) -> str:
    """
    Format a datetime as YYYY-MM-DDTHH:mm:ss.sssZ.
    Naive datetimes are taken to be UTC already; aware ones are converted.
    Sub-millisecond precision is truncated, not rounded.
    """
    if moment.tzinfo is None:
        moment = pytz.utc.localize(moment)
    else:
        moment = moment.astimezone(pytz.utc)
    millis = moment.microsecond // 1000
    return f"{moment.year:04d}-{moment.strftime('%m-%dT%H:%M:%S')}.{millis:03d}Z"


def build_page_context(
    get_hostname: HostnameProvider = system_hostname,
    clock: Clock = utc_now,
) -> PageContext:
    """Resolve both per-request values once and bundle them for the template."""
    return PageContext(
        hostname=resolve_hostname(get_hostname),
        server_time=format_iso_instant(clock()),
    )
