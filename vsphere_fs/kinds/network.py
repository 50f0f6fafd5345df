"""Network and DistributedVirtualPortgroup: accessibility and attached VMs."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from vsphere_fs.fetch.relations import Relation
from vsphere_fs.registry.kinds import KindRegistry
from vsphere_fs.types import Entity, EntityKind, is_absent
from vsphere_fs.utils.units import PLACEHOLDER

KINDS = (EntityKind.NETWORK, EntityKind.DISTRIBUTED_VIRTUAL_PORTGROUP)

PROPERTIES = ("name", "summary.accessible")

GROUPS = (("vms", Relation("vm")),)


def render(entity: Entity, values: Mapping[str, Any]) -> str:
    accessible = values.get("summary.accessible")
    if is_absent(accessible):
        state = PLACEHOLDER
    else:
        state = "accessible" if accessible else "inaccessible"
    return f"(network): {state}"


def register(registry: KindRegistry) -> None:
    for kind in KINDS:
        registry.register(kind, PROPERTIES, render, groups=GROUPS)
