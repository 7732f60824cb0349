# Copyright 2026 MeshCheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Inventory records and the per-check resolution context."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class Service(BaseModel):
    """A service known to the cluster, identified by name and namespace."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    namespace: str
    labels: dict[str, str] = _Field(default_factory=dict)
    selector: dict[str, str] = _Field(default_factory=dict)


class Workload(BaseModel):
    """A running workload and the labels it carries."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    namespace: str
    labels: dict[str, str] = _Field(default_factory=dict)


class RegistryService(BaseModel):
    """A registry-status entry exposing a hostname visible mesh-wide."""

    model_config = ConfigDict(extra="forbid")

    hostname: str


class ResolutionContext(BaseModel):
    """Immutable inventory snapshot against which one routing object is checked.

    Attributes:
        namespace: Namespace of the object under validation.
        known_namespaces: Namespaces visible to the caller. Empty means no
            cross-namespace visibility check is possible.
        services: Services the object's host may resolve to.
        workloads: Workloads considered for subset matching, in order.
        external_hosts: Hostnames reachable through mesh registration
            (multi-cluster or registry-imported services).
        service_entry_hosts: Hostnames, possibly wildcarded, declared by
            service entries.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    namespace: str
    known_namespaces: frozenset[str] = frozenset()
    services: tuple[Service, ...] = ()
    workloads: tuple[Workload, ...] = ()
    external_hosts: frozenset[str] = frozenset()
    service_entry_hosts: frozenset[str] = frozenset()


def registry_hostnames(entries: list[RegistryService]) -> frozenset[str]:
    """Return the hostnames exposed by a list of registry-status entries."""
    return frozenset(entry.hostname for entry in entries)
