# Copyright 2026 MeshCheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Message catalog rendering finding codes as human-readable text."""

from meshcheck.validation.findings import (
    CODE_HOST_UNRESOLVED,
    CODE_NAMESPACE_NOT_FOUND,
    CODE_SUBSET_NO_LABELS,
    CODE_SUBSET_UNMATCHED,
    Finding,
)

# ###############
# Public Interface
# ###############

MESSAGES: dict[str, str] = {
    CODE_HOST_UNRESOLVED: (
        "This host has no matching entry in the service registry (service, workload or service entries)"
    ),
    CODE_NAMESPACE_NOT_FOUND: "This host references a namespace that is not known to the mesh",
    CODE_SUBSET_UNMATCHED: "This subset's labels are not found in any matching host",
    CODE_SUBSET_NO_LABELS: "This subset has no labels",
}


def message_for(finding: Finding) -> str:
    """Return the text for ``finding``, falling back to its code."""
    return MESSAGES.get(finding.code, finding.code)
