# Copyright 2026 MeshCheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Host resolution for destination rules.

A destination rule's host is resolved by trying a fixed sequence of
strategies, each answering "does this host denote a reachable destination?"
from one source of truth. The first strategy that succeeds determines the
:class:`HostMatch`:

1. a service of that name in the rule's own namespace,
2. a registry entry for a host qualified to another, visible namespace,
3. a mesh-wide wildcard,
4. a service-entry host (exact or wildcard),
5. an external registry entry.

Strategies 3-5 do not consult the local service inventory, so rules that only
reference external destinations resolve even when no services are supplied.
"""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass, field

from meshcheck.hosts.normalizer import DEFAULT_IDENTITY_DOMAIN, HostKind, ParsedHost, parse_host
from meshcheck.inventory.view import InventoryView
from meshcheck.log_config import get_logger
from meshcheck.model.inventory import ResolutionContext, Service
from meshcheck.model.routing import DestinationRule
from meshcheck.validation.findings import (
    CODE_HOST_UNRESOLVED,
    CODE_NAMESPACE_NOT_FOUND,
    HOST_PATH,
    Finding,
    Severity,
)

logger = get_logger(__name__)

# ###############
# Public Interface
# ###############


class MatchKind(enum.Enum):
    """The source of truth through which a host resolved."""

    LOCAL_SERVICE = "local-service"
    NAMESPACE_QUALIFIED = "namespace-qualified"
    MESH_WIDE_WILDCARD = "mesh-wide-wildcard"
    SERVICE_ENTRY_MATCH = "service-entry"
    EXTERNAL_REGISTRY = "external-registry"
    UNRESOLVED = "unresolved"


@dataclass(frozen=True)
class HostMatch:
    """Outcome of resolving a host reference.

    Attributes:
        kind: How the host resolved, or ``UNRESOLVED``.
        host: The parsed host reference.
        destination: Identity of the matched destination (fqdn, registry
            hostname or service-entry host pattern); None when unresolved.
        service: The matched service for ``LOCAL_SERVICE`` matches. Not part
            of the hash, since services carry label mappings.
        code: Finding code describing why an ``UNRESOLVED`` host failed.
    """

    kind: MatchKind
    host: ParsedHost
    destination: str | None = None
    service: Service | None = field(default=None, hash=False)
    code: str | None = None

    @property
    def resolved(self) -> bool:
        return self.kind is not MatchKind.UNRESOLVED


Strategy = Callable[[ParsedHost, InventoryView], HostMatch | None]


def resolve(
    rule: DestinationRule,
    context: ResolutionContext,
    identity_domain: str = DEFAULT_IDENTITY_DOMAIN,
) -> HostMatch:
    """Resolve the host of ``rule`` against ``context``.

    Args:
        rule: The destination rule whose ``host`` is resolved.
        context: Inventory snapshot for the rule's namespace.
        identity_domain: Cluster-local service domain used to qualify hosts.

    Returns:
        The :class:`HostMatch` of the first succeeding strategy, or an
        ``UNRESOLVED`` match carrying the finding code to report.
    """
    view = InventoryView(context)
    parsed = parse_host(rule.host, context.namespace, identity_domain)

    for strategy in STRATEGIES:
        match = strategy(parsed, view)
        if match is not None:
            logger.debug("Host '%s' of %s/%s resolved as %s", rule.host, rule.namespace, rule.name, match.kind.value)
            return match

    code = CODE_NAMESPACE_NOT_FOUND if _namespace_unknown(parsed, view) else CODE_HOST_UNRESOLVED
    logger.debug("Host '%s' of %s/%s is unresolved (%s)", rule.host, rule.namespace, rule.name, code)
    return HostMatch(kind=MatchKind.UNRESOLVED, host=parsed, code=code)


def host_findings(match: HostMatch) -> list[Finding]:
    """Return the findings for a host match: one error if it is unresolved."""
    if match.resolved:
        return []
    return [Finding(severity=Severity.ERROR, code=match.code or CODE_HOST_UNRESOLVED, path=HOST_PATH)]


def match_local_service(host: ParsedHost, view: InventoryView) -> HostMatch | None:
    """Match a short or own-namespace host against the local services."""
    if not host.is_local_to(view.namespace) or host.service is None:
        return None
    service = view.find_service(host.service, view.namespace)
    if service is None:
        return None
    return HostMatch(kind=MatchKind.LOCAL_SERVICE, host=host, destination=host.fqdn, service=service)


def match_namespace_qualified(host: ParsedHost, view: InventoryView) -> HostMatch | None:
    """Match a host qualified to another namespace through the registry.

    Services physically present in the other namespace are never consulted:
    cross-namespace destinations must be exported through the registry.
    """
    if host.kind is not HostKind.NAMESPACE_QUALIFIED or host.namespace in (None, view.namespace):
        return None
    if not view.namespace_visible(host.namespace):
        return None
    registered = view.registered_host((host.fqdn,))
    if registered is None:
        return None
    return HostMatch(kind=MatchKind.NAMESPACE_QUALIFIED, host=host, destination=registered)


def match_wildcard(host: ParsedHost, view: InventoryView) -> HostMatch | None:
    """Accept mesh-wide wildcard hosts unconditionally."""
    if host.kind is not HostKind.WILDCARD:
        return None
    return HostMatch(kind=MatchKind.MESH_WIDE_WILDCARD, host=host, destination=host.raw)


def match_service_entry(host: ParsedHost, view: InventoryView) -> HostMatch | None:
    """Match the host against service-entry hosts, which may be wildcards."""
    pattern = view.service_entry_host(host.identities)
    if pattern is None:
        return None
    return HostMatch(kind=MatchKind.SERVICE_ENTRY_MATCH, host=host, destination=pattern)


def match_external_registry(host: ParsedHost, view: InventoryView) -> HostMatch | None:
    """Match the host against the external registry."""
    if _namespace_unknown(host, view):
        return None
    registered = view.registered_host(host.identities)
    if registered is None:
        return None
    return HostMatch(kind=MatchKind.EXTERNAL_REGISTRY, host=host, destination=registered)


# Evaluated in order; the first strategy returning a match wins.
STRATEGIES: tuple[Strategy, ...] = (
    match_local_service,
    match_namespace_qualified,
    match_wildcard,
    match_service_entry,
    match_external_registry,
)


# ################
# Implementation
# ################


def _namespace_unknown(host: ParsedHost, view: InventoryView) -> bool:
    """Return True if the host names a foreign namespace the caller cannot see."""
    return (
        host.kind is HostKind.NAMESPACE_QUALIFIED
        and host.namespace is not None
        and host.namespace != view.namespace
        and not view.namespace_visible(host.namespace)
    )
