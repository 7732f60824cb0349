# Copyright 2026 MeshCheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Inventory access: snapshot files and read-only lookups."""

from meshcheck.inventory.snapshot import Snapshot, SnapshotError, load_snapshot
from meshcheck.inventory.view import InventoryView

__all__ = [
    "InventoryView",
    "Snapshot",
    "SnapshotError",
    "load_snapshot",
]
