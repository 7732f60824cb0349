# Copyright 2026 MeshCheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Destination rule checks (host resolution, subset labels)."""

from meshcheck.validation.checks import check_destination_rule, check_destination_rules
from meshcheck.validation.findings import (
    CODE_HOST_UNRESOLVED,
    CODE_NAMESPACE_NOT_FOUND,
    CODE_SUBSET_NO_LABELS,
    CODE_SUBSET_UNMATCHED,
    Finding,
    Severity,
    ValidationResult,
    report,
)
from meshcheck.validation.resolution import HostMatch, MatchKind, host_findings, resolve
from meshcheck.validation.subsets import check_subsets

__all__ = [
    "CODE_HOST_UNRESOLVED",
    "CODE_NAMESPACE_NOT_FOUND",
    "CODE_SUBSET_NO_LABELS",
    "CODE_SUBSET_UNMATCHED",
    "Finding",
    "HostMatch",
    "MatchKind",
    "Severity",
    "ValidationResult",
    "check_destination_rule",
    "check_destination_rules",
    "check_subsets",
    "host_findings",
    "report",
    "resolve",
]
