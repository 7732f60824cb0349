# Copyright 2026 MeshCheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Destination rule validation.

These checks operate on parsed routing objects and a caller-supplied inventory
snapshot. They never mutate their inputs and keep no state between calls, so
batches may be validated concurrently.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from meshcheck.hosts.normalizer import DEFAULT_IDENTITY_DOMAIN
from meshcheck.model.inventory import ResolutionContext
from meshcheck.model.routing import DestinationRule
from meshcheck.validation.findings import Finding, ValidationResult, report
from meshcheck.validation.resolution import MatchKind, host_findings, resolve
from meshcheck.validation.subsets import check_subsets

# ###############
# Public Interface
# ###############


def check_destination_rule(
    rule: DestinationRule,
    context: ResolutionContext,
    identity_domain: str = DEFAULT_IDENTITY_DOMAIN,
) -> ValidationResult:
    """Validate one destination rule against an inventory snapshot.

    Checks performed:

    1. **Host resolution** (error): the rule's host must denote a local
       service, a registry-exported service in a visible namespace, a
       mesh-wide wildcard, a service-entry host or an external registry host.
       A host qualified to a namespace absent from the known namespaces is
       reported with its own code.

    2. **Subset labels** (error / warning): when the host resolved to a local
       service, each subset's labels must be carried by at least one
       workload. Subsets without labels are reported as warnings.

    Args:
        rule: The destination rule to validate.
        context: Inventory snapshot for the rule's namespace.
        identity_domain: Cluster-local service domain used to qualify hosts.

    Returns:
        A :class:`ValidationResult` with the host finding (if any) followed by
        subset findings in declaration order.
    """
    match = resolve(rule, context, identity_domain)

    subset_findings: list[Finding] = []
    if match.kind is MatchKind.LOCAL_SERVICE:
        subset_findings = check_subsets(rule, context)

    return report(host_findings(match), subset_findings)


def check_destination_rules(
    rules: Iterable[DestinationRule],
    context_for: Callable[[str], ResolutionContext],
    identity_domain: str = DEFAULT_IDENTITY_DOMAIN,
) -> list[tuple[DestinationRule, ValidationResult]]:
    """Validate a batch of destination rules.

    Args:
        rules: Rules to validate.
        context_for: Returns the resolution context for a namespace.
        identity_domain: Cluster-local service domain used to qualify hosts.

    Returns:
        ``(rule, result)`` pairs in input order. Rules sharing a namespace
        and name are each reported.
    """
    contexts: dict[str, ResolutionContext] = {}
    results: list[tuple[DestinationRule, ValidationResult]] = []
    for rule in rules:
        if rule.namespace not in contexts:
            contexts[rule.namespace] = context_for(rule.namespace)
        results.append((rule, check_destination_rule(rule, contexts[rule.namespace], identity_domain)))
    return results
