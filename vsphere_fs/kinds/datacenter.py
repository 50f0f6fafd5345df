"""
Datacenter: exposes its four root folders as real children.

    vm        -> vmFolder
    host      -> hostFolder
    datastore -> datastoreFolder
    network   -> networkFolder
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from vsphere_fs.fetch.relations import NamedReferences
from vsphere_fs.registry.kinds import KindRegistry
from vsphere_fs.types import Entity, EntityKind
from vsphere_fs.utils.units import text

KIND = EntityKind.DATACENTER

PROPERTIES = ("name", "overallStatus")

ROOT_FOLDERS = NamedReferences(
    (
        ("vm", "vmFolder"),
        ("host", "hostFolder"),
        ("datastore", "datastoreFolder"),
        ("network", "networkFolder"),
    )
)


def render(entity: Entity, values: Mapping[str, Any]) -> str:
    return f"(datacenter): status {text(values.get('overallStatus'))}"


def register(registry: KindRegistry) -> None:
    registry.register(KIND, PROPERTIES, render, ROOT_FOLDERS)
