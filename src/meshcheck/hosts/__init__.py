# Copyright 2026 MeshCheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Host reference parsing and matching."""

from meshcheck.hosts.normalizer import (
    DEFAULT_IDENTITY_DOMAIN,
    HostKind,
    ParsedHost,
    host_matches,
    labels_match,
    parse_host,
)

__all__ = [
    "DEFAULT_IDENTITY_DOMAIN",
    "HostKind",
    "ParsedHost",
    "host_matches",
    "labels_match",
    "parse_host",
]
