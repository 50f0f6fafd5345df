"""VirtualMachine: a leaf; no children, no groups."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from vsphere_fs.registry.kinds import KindRegistry
from vsphere_fs.types import Entity, EntityKind
from vsphere_fs.utils.units import text

KIND = EntityKind.VIRTUAL_MACHINE

PROPERTIES = (
    "name",
    "runtime.powerState",
    "summary.config.numCpu",
    "summary.config.memorySizeMB",
    "guest.ipAddress",
)


def render(entity: Entity, values: Mapping[str, Any]) -> str:
    """
    (vm): poweredOn, 2 vCPU, 4096 MB, 10.0.0.5

    The guest IP is only known while VMware Tools runs; otherwise ``-``.
    """
    power = text(values.get("runtime.powerState"))
    cpus = text(values.get("summary.config.numCpu"))
    memory = text(values.get("summary.config.memorySizeMB"))
    address = text(values.get("guest.ipAddress"))
    return f"(vm): {power}, {cpus} vCPU, {memory} MB, {address}"


def register(registry: KindRegistry) -> None:
    registry.register(KIND, PROPERTIES, render)
