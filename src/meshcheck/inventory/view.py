# Copyright 2026 MeshCheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Read-only lookups over a resolution context."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from meshcheck.hosts.normalizer import host_matches, labels_match
from meshcheck.model.inventory import ResolutionContext, Service, Workload

# ###############
# Public Interface
# ###############


class InventoryView:
    """Answers the inventory questions asked during host resolution.

    The view indexes services by ``(namespace, name)`` once and never
    modifies the wrapped context.
    """

    def __init__(self, context: ResolutionContext) -> None:
        if context is None:
            raise TypeError("InventoryView requires a ResolutionContext, got None")
        self._context = context
        self._services: dict[tuple[str, str], Service] = {}
        for service in context.services:
            # First declaration wins for duplicated (namespace, name) pairs.
            self._services.setdefault((service.namespace, service.name), service)

    @property
    def namespace(self) -> str:
        return self._context.namespace

    @property
    def workloads(self) -> tuple[Workload, ...]:
        return self._context.workloads

    def find_service(self, name: str, namespace: str) -> Service | None:
        """Return the service called ``name`` in ``namespace``, if any."""
        return self._services.get((namespace, name))

    def namespace_visible(self, namespace: str) -> bool:
        """Return True unless known namespaces were supplied and exclude ``namespace``."""
        known = self._context.known_namespaces
        return not known or namespace in known

    def registered_host(self, identities: Iterable[str]) -> str | None:
        """Return the first identity present in the external registry."""
        for identity in identities:
            if identity in self._context.external_hosts:
                return identity
        return None

    def service_entry_host(self, identities: Iterable[str]) -> str | None:
        """Return the service-entry host (possibly a wildcard) matching any identity."""
        candidates = list(identities)
        for pattern in sorted(self._context.service_entry_hosts):
            if any(host_matches(pattern, identity) for identity in candidates):
                return pattern
        return None

    def workloads_matching(self, selector: Mapping[str, str]) -> list[Workload]:
        """Return workloads carrying every label of ``selector``, in inventory order."""
        return [w for w in self._context.workloads if labels_match(selector, w.labels)]
