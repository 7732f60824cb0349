# Copyright 2026 MeshCheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Capability classification of virtual services."""

from meshcheck.classification.capabilities import (
    CapabilitySet,
    classify,
    has_fault_injection,
    has_request_routing,
    has_request_timeout,
    has_tcp_traffic_shifting,
    has_traffic_shifting,
    parse_duration,
)

__all__ = [
    "CapabilitySet",
    "classify",
    "has_fault_injection",
    "has_request_routing",
    "has_request_timeout",
    "has_tcp_traffic_shifting",
    "has_traffic_shifting",
    "parse_duration",
]
