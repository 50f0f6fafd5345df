"""
In-Memory Inventory Session

Serves an inventory snapshot held in memory. Used for offline browsing of
a saved inventory and as the session behind the test suite.

Snapshot format (JSON):
    {
        "root": "group-d1",
        "objects": {
            "group-d1": {
                "kind": "Folder",
                "properties": {"name": "Datacenters", "childEntity": [{"ref": "datacenter-2"}]}
            },
            "host-10": {
                "kind": "HostSystem",
                "properties": {"name": "esx01", "summary": {"hardware": {"cpuMhz": 2400}}}
            }
        }
    }

Property keys may be dotted paths or nested objects. A reference to another
object is written {"ref": "<moref>"}.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from vsphere_fs.errors import SessionError
from vsphere_fs.session.base import InventorySession
from vsphere_fs.types import ABSENT, Entity, kind_tag

logger = logging.getLogger(__name__)


class MemorySession(InventorySession):
    """
    Inventory session over a dict of objects.

    Every retrieve() call is recorded in ``calls`` as
    (kind, morefs, paths) so batching can be observed.
    """

    def __init__(self, root: str | None = None) -> None:
        self._root = root
        self._objects: dict[str, dict[str, Any]] = {}
        self.calls: list[tuple[str, tuple[str, ...], tuple[str, ...]]] = []

    # === Construction ===

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MemorySession":
        """Build a session from a parsed snapshot document."""
        objects = data.get("objects")
        if not isinstance(objects, Mapping):
            raise SessionError("Snapshot must contain an 'objects' mapping")

        session = cls(root=data.get("root"))
        for moref, spec in objects.items():
            if not isinstance(spec, Mapping) or "kind" not in spec:
                raise SessionError(f"Snapshot object '{moref}' has no kind")
            session.add(moref, spec["kind"], spec.get("properties") or {})

        if session._root is None or session._root not in session._objects:
            raise SessionError(f"Snapshot root '{session._root}' is not a known object")
        return session

    @classmethod
    def from_file(cls, path: str | Path) -> "MemorySession":
        """
        Load a snapshot from a JSON file.

        Raises:
            SessionError: If the file is missing, unreadable or not a valid snapshot
        """
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise SessionError(f"Snapshot not found: {path}") from e
        except json.JSONDecodeError as e:
            raise SessionError(f"Snapshot {path} is not valid JSON: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise SessionError(f"Cannot read snapshot {path}: {e}") from e

        if not isinstance(data, Mapping):
            raise SessionError(f"Snapshot {path} must be a JSON object")
        session = cls.from_dict(data)
        logger.debug(f"Loaded snapshot {path} with {len(session._objects)} objects")
        return session

    def add(
        self,
        moref: str,
        kind: str,
        properties: Mapping[str, Any] | None = None,
    ) -> Entity:
        """Add (or replace) one object and return its handle."""
        self._objects[moref] = {"kind": kind_tag(kind), "properties": dict(properties or {})}
        if self._root is None:
            self._root = moref
        return Entity(kind=kind, moref=moref)

    def update(self, moref: str, **properties: Any) -> None:
        """Overwrite top-level properties of an existing object."""
        self._objects[moref]["properties"].update(properties)

    def entity(self, moref: str) -> Entity:
        """Handle for a known object."""
        try:
            return Entity(kind=self._objects[moref]["kind"], moref=moref)
        except KeyError:
            raise SessionError(f"Unknown object: {moref}") from None

    # === InventorySession ===

    async def connect(self) -> None:
        logger.debug("Memory session ready")

    async def close(self) -> None:
        logger.debug("Memory session closed")

    async def root(self) -> Entity:
        if self._root is None:
            raise SessionError("Memory session has no objects")
        return self.entity(self._root)

    async def retrieve(
        self,
        kind: str,
        entities: Sequence[Entity],
        paths: Sequence[str],
    ) -> dict[Entity, dict[str, Any]]:
        self.calls.append((kind, tuple(e.moref for e in entities), tuple(paths)))

        result: dict[Entity, dict[str, Any]] = {}
        for entity in entities:
            obj = self._objects.get(entity.moref)
            if obj is None or obj["kind"] != entity.kind:
                # Deleted (or never existed): nothing to report for it
                result[entity] = {path: ABSENT for path in paths}
                continue
            result[entity] = {
                path: self._decode(self._lookup(obj["properties"], path)) for path in paths
            }
        return result

    # === Value handling ===

    @staticmethod
    def _lookup(properties: Mapping[str, Any], path: str) -> Any:
        if path in properties:
            return properties[path]

        value: Any = properties
        for part in path.split("."):
            if not isinstance(value, Mapping) or part not in value:
                return ABSENT
            value = value[part]
        return value

    def _decode(self, value: Any) -> Any:
        if value is None:
            return ABSENT
        if isinstance(value, Mapping) and set(value) == {"ref"}:
            return self.entity(value["ref"])
        if isinstance(value, list):
            return [self._decode(item) for item in value]
        return value
