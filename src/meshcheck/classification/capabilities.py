# Copyright 2026 MeshCheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Traffic-management capabilities expressed by a virtual service.

Every predicate accepts ``None`` and answers False, so classification is
total over "no object" as well.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from meshcheck.model.routing import RouteRule, VirtualService

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class CapabilitySet:
    """Which traffic-management capabilities a routing object expresses."""

    has_timeout: bool = False
    has_fault_injection: bool = False
    has_http_traffic_shifting: bool = False
    has_tcp_traffic_shifting: bool = False
    has_request_routing: bool = False


def classify(vs: VirtualService | None) -> CapabilitySet:
    """Return the :class:`CapabilitySet` of ``vs``."""
    return CapabilitySet(
        has_timeout=has_request_timeout(vs),
        has_fault_injection=has_fault_injection(vs),
        has_http_traffic_shifting=has_traffic_shifting(vs),
        has_tcp_traffic_shifting=has_tcp_traffic_shifting(vs),
        has_request_routing=has_request_routing(vs),
    )


def has_request_timeout(vs: VirtualService | None) -> bool:
    """Return True if any rule carries a non-zero timeout."""
    return any(rule.timeout and not _is_zero_duration(rule.timeout) for rule in _all_rules(vs))


def has_fault_injection(vs: VirtualService | None) -> bool:
    """Return True if any rule injects a non-empty delay or abort."""
    return any(
        rule.fault is not None and bool(rule.fault.delay or rule.fault.abort)
        for rule in _all_rules(vs)
    )


def has_traffic_shifting(vs: VirtualService | None) -> bool:
    """Return True if any HTTP rule splits traffic across several destinations."""
    if vs is None:
        return False
    return any(_shifts_traffic(rule) for rule in vs.http)


def has_tcp_traffic_shifting(vs: VirtualService | None) -> bool:
    """Return True if any TCP rule splits traffic across several destinations."""
    if vs is None:
        return False
    return any(_shifts_traffic(rule) for rule in vs.tcp)


def has_request_routing(vs: VirtualService | None) -> bool:
    """Return True if any HTTP, TCP or TLS rule routes to a destination.

    Rules that only set options such as a timeout do not count.
    """
    return any(rule.route for rule in _all_rules(vs))


def parse_duration(value: str) -> float | None:
    """Parse a duration such as ``0.5s``, ``100ms`` or ``1h30m`` into seconds.

    Returns None if the value is not a valid duration.
    """
    text = value.strip()
    if text in ("0", "+0", "-0"):
        return 0.0
    if not _DURATION_RE.fullmatch(text):
        return None
    sign = -1.0 if text.startswith("-") else 1.0
    total = 0.0
    for amount, unit in _DURATION_PART_RE.findall(text):
        total += float(amount) * _UNIT_SECONDS[unit]
    return sign * total


# ################
# Implementation
# ################

_UNIT_SECONDS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}

_DURATION_PART_RE = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|ms|s|m|h)")
_DURATION_RE = re.compile(r"[-+]?(?:(?:\d+(?:\.\d*)?|\.\d+)(?:ns|us|µs|ms|s|m|h))+")


def _all_rules(vs: VirtualService | None) -> Iterable[RouteRule]:
    if vs is None:
        return ()
    return (*vs.http, *vs.tcp, *vs.tls)


def _is_zero_duration(value: str) -> bool:
    # Unparsable values are kept as "set"; only an explicit zero disables a timeout.
    seconds = parse_duration(value)
    return seconds is not None and seconds == 0.0


def _shifts_traffic(rule: RouteRule) -> bool:
    if len(rule.route) <= 1:
        return False
    return all(dest.weight != 100 for dest in rule.route)
