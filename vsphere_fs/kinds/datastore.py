"""Datastore: free and total capacity, plus the VMs stored on it."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from vsphere_fs.fetch.relations import Relation
from vsphere_fs.registry.kinds import KindRegistry
from vsphere_fs.types import Entity, EntityKind
from vsphere_fs.utils.units import decimal_size, text

KIND = EntityKind.DATASTORE

PROPERTIES = ("name", "summary.type", "summary.capacity", "summary.freeSpace")

GROUPS = (("vms", Relation("vm")),)


def render(entity: Entity, values: Mapping[str, Any]) -> str:
    fs_type = text(values.get("summary.type"))
    free = decimal_size(values.get("summary.freeSpace"))
    capacity = decimal_size(values.get("summary.capacity"))
    return f"(datastore): {fs_type}, {free} free of {capacity}"


def register(registry: KindRegistry) -> None:
    registry.register(KIND, PROPERTIES, render, groups=GROUPS)
