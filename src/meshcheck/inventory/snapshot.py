# Copyright 2026 MeshCheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Inventory snapshot files: cluster inventory plus routing objects in one YAML document."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from meshcheck.log_config import get_logger
from meshcheck.model.inventory import RegistryService, ResolutionContext, Service, Workload, registry_hostnames
from meshcheck.model.routing import DestinationRule, ServiceEntry, VirtualService, service_entry_hostnames

logger = get_logger(__name__)

# ###############
# Public Interface
# ###############


class SnapshotError(Exception):
    """Raised when a snapshot file cannot be read or is invalid."""


class Snapshot(BaseModel):
    """A materialized view of a cluster's mesh inventory and routing objects."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    namespaces: list[str] = Field(default_factory=list)
    services: list[Service] = Field(default_factory=list)
    workloads: list[Workload] = Field(default_factory=list)
    registry_services: list[RegistryService] = Field(alias="registryServices", default_factory=list)
    service_entries: list[ServiceEntry] = Field(alias="serviceEntries", default_factory=list)
    destination_rules: list[DestinationRule] = Field(alias="destinationRules", default_factory=list)
    virtual_services: list[VirtualService] = Field(alias="virtualServices", default_factory=list)

    def context_for(self, namespace: str) -> ResolutionContext:
        """Build the resolution context for objects living in ``namespace``.

        Services are passed whole since resolution compares namespaces
        itself; workloads are limited to ``namespace``.
        """
        return ResolutionContext(
            namespace=namespace,
            known_namespaces=frozenset(self.namespaces),
            services=tuple(self.services),
            workloads=tuple(w for w in self.workloads if w.namespace == namespace),
            external_hosts=registry_hostnames(self.registry_services),
            service_entry_hosts=service_entry_hostnames(self.service_entries),
        )


def load_snapshot(path: Path) -> Snapshot:
    """Load and validate a snapshot file.

    An empty file is treated as an empty snapshot.

    Args:
        path: Path to the YAML snapshot.

    Returns:
        A validated Snapshot instance.

    Raises:
        SnapshotError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SnapshotError(f"Cannot read snapshot '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise SnapshotError(f"Invalid YAML in snapshot '{path}': {exc}") from exc

    if data is None:
        data = {}

    try:
        snapshot = Snapshot.model_validate(data)
    except ValidationError as exc:
        raise SnapshotError(f"Invalid snapshot '{path}': {exc}") from exc

    logger.info(
        "Loaded snapshot %s: %d service(s), %d workload(s), %d destination rule(s), %d virtual service(s)",
        path,
        len(snapshot.services),
        len(snapshot.workloads),
        len(snapshot.destination_rules),
        len(snapshot.virtual_services),
    )
    return snapshot
