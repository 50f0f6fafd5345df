"""Folder: inventory container whose children are listed in ``childEntity``."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from vsphere_fs.fetch.relations import Relation
from vsphere_fs.registry.kinds import KindRegistry
from vsphere_fs.types import Entity, EntityKind

KIND = EntityKind.FOLDER

PROPERTIES = ("name", "childType")


def render(entity: Entity, values: Mapping[str, Any]) -> str:
    return "(folder)"


def register(registry: KindRegistry) -> None:
    registry.register(KIND, PROPERTIES, render, Relation("childEntity"))
