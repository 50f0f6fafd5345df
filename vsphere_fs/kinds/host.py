"""
HostSystem: one ESX host.

Summary line:
    (host): cpu <packages>*<cores>*<GHz> GHz, memory <GB> GB

CPU frequency is ``cpuMhz / 1000`` and memory ``memorySize / 10**9``, both
with two decimals. Children are the ``vms`` and ``datastores`` groups.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from vsphere_fs.fetch.relations import Relation
from vsphere_fs.registry.kinds import KindRegistry
from vsphere_fs.types import Entity, EntityKind
from vsphere_fs.utils.units import scaled, text

KIND = EntityKind.HOST_SYSTEM

PROPERTIES = (
    "name",
    "summary.hardware.memorySize",
    "summary.hardware.cpuModel",
    "summary.hardware.cpuMhz",
    "summary.hardware.numCpuPkgs",
    "summary.hardware.numCpuCores",
    "summary.hardware.numCpuThreads",
)

GROUPS = (
    ("vms", Relation("vm")),
    ("datastores", Relation("datastore")),
)


def render(entity: Entity, values: Mapping[str, Any]) -> str:
    packages = text(values.get("summary.hardware.numCpuPkgs"))
    cores = text(values.get("summary.hardware.numCpuCores"))
    ghz = scaled(values.get("summary.hardware.cpuMhz"), 1000)
    memory = scaled(values.get("summary.hardware.memorySize"), 10**9)
    return f"(host): cpu {packages}*{cores}*{ghz} GHz, memory {memory} GB"


def register(registry: KindRegistry) -> None:
    registry.register(KIND, PROPERTIES, render, groups=GROUPS)
