"""
ComputeResource and ClusterComputeResource.

Both share one descriptor shape: the root ``resourcePool`` as a real child,
plus ``hosts`` and ``datastores`` groups. ``summary.totalCpu`` is reported
in MHz and ``summary.totalMemory`` in bytes.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from vsphere_fs.fetch.relations import NamedReferences, Relation
from vsphere_fs.registry.kinds import KindRegistry
from vsphere_fs.types import Entity, EntityKind
from vsphere_fs.utils.units import scaled, text

KINDS = (EntityKind.COMPUTE_RESOURCE, EntityKind.CLUSTER_COMPUTE_RESOURCE)

PROPERTIES = (
    "name",
    "summary.numHosts",
    "summary.totalCpu",
    "summary.totalMemory",
)

ROOT_POOL = NamedReferences((("resourcePool", "resourcePool"),))

GROUPS = (
    ("hosts", Relation("host")),
    ("datastores", Relation("datastore")),
)


def render(entity: Entity, values: Mapping[str, Any]) -> str:
    hosts = text(values.get("summary.numHosts"))
    ghz = scaled(values.get("summary.totalCpu"), 1000)
    memory = scaled(values.get("summary.totalMemory"), 10**9)
    return f"(cluster): hosts {hosts}, cpu {ghz} GHz, memory {memory} GB"


def register(registry: KindRegistry) -> None:
    for kind in KINDS:
        registry.register(kind, PROPERTIES, render, ROOT_POOL, groups=GROUPS)
