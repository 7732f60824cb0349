# Copyright 2026 MeshCheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Object model for MeshCheck (routing objects and inventory records)."""

from meshcheck.model.inventory import (
    RegistryService,
    ResolutionContext,
    Service,
    Workload,
    registry_hostnames,
)
from meshcheck.model.routing import (
    Destination,
    DestinationRule,
    FaultInjection,
    RouteDestination,
    RouteRule,
    ServiceEntry,
    Subset,
    VirtualService,
    service_entry_hostnames,
)

__all__ = [
    # Inventory
    "RegistryService",
    "ResolutionContext",
    "Service",
    "Workload",
    "registry_hostnames",
    # Routing objects
    "Destination",
    "DestinationRule",
    "FaultInjection",
    "RouteDestination",
    "RouteRule",
    "ServiceEntry",
    "Subset",
    "VirtualService",
    "service_entry_hostnames",
]
