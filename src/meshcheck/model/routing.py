# Copyright 2026 MeshCheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Routing objects: destination rules, virtual services and service entries."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class Subset(BaseModel):
    """A named label selector partitioning a destination's workload pool."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str
    labels: dict[str, str] = _Field(default_factory=dict)
    traffic_policy: dict[str, Any] | None = _Field(default=None, alias="trafficPolicy")


class DestinationRule(BaseModel):
    """A routing policy object declaring subsets for one destination host."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    name: str
    namespace: str
    host: str = _Field(min_length=1)
    subsets: list[Subset] = _Field(default_factory=list)
    traffic_policy: dict[str, Any] | None = _Field(default=None, alias="trafficPolicy")


class Destination(BaseModel):
    """The target of a route: a host, optionally narrowed to a subset and port."""

    model_config = ConfigDict(extra="forbid")

    host: str
    subset: str | None = None
    port: dict[str, Any] | None = None


class RouteDestination(BaseModel):
    """One weighted entry of a route's destination list."""

    model_config = ConfigDict(extra="forbid")

    destination: Destination
    weight: int | None = None


class FaultInjection(BaseModel):
    """Fault injection spec of a route rule (delay and/or abort)."""

    model_config = ConfigDict(extra="forbid")

    delay: dict[str, Any] | None = None
    abort: dict[str, Any] | None = None


class RouteRule(BaseModel):
    """A single HTTP, TCP or TLS route rule."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    match: list[dict[str, Any]] = _Field(default_factory=list)
    route: list[RouteDestination] = _Field(default_factory=list)
    timeout: str | None = None
    fault: FaultInjection | None = None


class VirtualService(BaseModel):
    """A routing object holding per-protocol lists of route rules."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    namespace: str
    hosts: list[str] = _Field(default_factory=list)
    http: list[RouteRule] = _Field(default_factory=list)
    tcp: list[RouteRule] = _Field(default_factory=list)
    tls: list[RouteRule] = _Field(default_factory=list)


class ServiceEntry(BaseModel):
    """Declares hosts reachable through explicit mesh registration."""

    model_config = ConfigDict(extra="forbid")

    name: str
    namespace: str
    hosts: list[str] = _Field(default_factory=list)


def service_entry_hostnames(entries: list[ServiceEntry]) -> frozenset[str]:
    """Flatten the hosts of all service entries into one set."""
    return frozenset(host for entry in entries for host in entry.hosts)
