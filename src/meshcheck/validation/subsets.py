# Copyright 2026 MeshCheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Subset label checks against the live workload inventory."""

from __future__ import annotations

from meshcheck.inventory.view import InventoryView
from meshcheck.log_config import get_logger
from meshcheck.model.inventory import ResolutionContext
from meshcheck.model.routing import DestinationRule
from meshcheck.validation.findings import (
    CODE_SUBSET_NO_LABELS,
    CODE_SUBSET_UNMATCHED,
    Finding,
    Severity,
    subset_path,
)

logger = get_logger(__name__)

# ###############
# Public Interface
# ###############


def check_subsets(rule: DestinationRule, context: ResolutionContext) -> list[Finding]:
    """Check every subset of ``rule`` against the workloads of ``context``.

    Only meaningful once the rule's host resolved to a local service; the
    caller decides when to run it.

    For each subset, in declaration order:

    - a subset without labels yields a WARNING (it selects every workload);
    - a subset whose labels no workload carries yields an ERROR.

    All subsets are checked, so one failing subset does not hide the next.

    Raises:
        TypeError: If ``context`` is None.
    """
    view = InventoryView(context)
    findings: list[Finding] = []

    for index, subset in enumerate(rule.subsets):
        path = subset_path(index)
        if not subset.labels:
            findings.append(Finding(severity=Severity.WARNING, code=CODE_SUBSET_NO_LABELS, path=path))
            continue

        matching = view.workloads_matching(subset.labels)
        logger.debug(
            "Subset '%s' of %s/%s matches %d workload(s)", subset.name, rule.namespace, rule.name, len(matching)
        )
        if not matching:
            findings.append(Finding(severity=Severity.ERROR, code=CODE_SUBSET_UNMATCHED, path=path))

    return findings
