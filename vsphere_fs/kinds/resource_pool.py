"""ResourcePool: nested pools and the VMs placed in this pool."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from vsphere_fs.fetch.relations import Relation
from vsphere_fs.registry.kinds import KindRegistry
from vsphere_fs.types import Entity, EntityKind
from vsphere_fs.utils.units import text

KIND = EntityKind.RESOURCE_POOL

PROPERTIES = ("name", "runtime.overallStatus")

GROUPS = (
    ("pools", Relation("resourcePool")),
    ("vms", Relation("vm")),
)


def render(entity: Entity, values: Mapping[str, Any]) -> str:
    return f"(resource pool): status {text(values.get('runtime.overallStatus'))}"


def register(registry: KindRegistry) -> None:
    registry.register(KIND, PROPERTIES, render, groups=GROUPS)
