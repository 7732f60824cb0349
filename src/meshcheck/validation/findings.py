# Copyright 2026 MeshCheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Path-addressed validation findings and their aggregation."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, field

# ###############
# Public Interface
# ###############

HOST_PATH = "spec/host"

# Stable finding codes. Rendering them into text is left to the consumer.
CODE_HOST_UNRESOLVED = "destinationrules.nodest.matchingregistry"
CODE_NAMESPACE_NOT_FOUND = "destinationrules.nodest.namespacenotfound"
CODE_SUBSET_UNMATCHED = "destinationrules.nodest.subsetlabels"
CODE_SUBSET_NO_LABELS = "destinationrules.nodest.subsetnolabels"


class Severity(enum.Enum):
    """How a finding affects the validity of the checked object."""

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Finding:
    """A single configuration-consistency finding.

    Attributes:
        severity: ERROR findings invalidate the object; WARNING findings are advisory.
        code: Stable identifier of the diagnostic category.
        path: Pointer into the object, e.g. ``spec/host`` or ``spec/subsets[1]``.
    """

    severity: Severity
    code: str
    path: str


@dataclass(frozen=True)
class ValidationResult:
    """Ordered findings for one routing object.

    Attributes:
        findings: Host finding first (if any), then subset findings in
            subset declaration order.
    """

    findings: tuple[Finding, ...] = field(default_factory=tuple)

    @property
    def valid(self) -> bool:
        """Return True if no finding has ERROR severity."""
        return not any(f.severity is Severity.ERROR for f in self.findings)

    @property
    def errors(self) -> list[Finding]:
        return [f for f in self.findings if f.severity is Severity.ERROR]

    @property
    def warnings(self) -> list[Finding]:
        return [f for f in self.findings if f.severity is Severity.WARNING]


def subset_path(index: int) -> str:
    """Return the finding path of the subset at ``index``."""
    return f"spec/subsets[{index}]"


def report(host_findings: Iterable[Finding], subset_findings: Iterable[Finding]) -> ValidationResult:
    """Aggregate host and subset findings into a :class:`ValidationResult`."""
    return ValidationResult(findings=(*host_findings, *subset_findings))
