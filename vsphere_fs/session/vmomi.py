"""
pyVmomi Inventory Session

Live session against vCenter or ESXi. Property reads go through the
PropertyCollector: one RetrievePropertiesEx call (plus continuation pages)
per retrieve() batch.

Blocking pyVmomi calls run in worker threads so independent kind batches
can overlap.
"""

from __future__ import annotations

import asyncio
import logging
import ssl
from collections.abc import Sequence
from typing import Any

from pyVim.connect import Disconnect, SmartConnect
from pyVmomi import vim, vmodl
from pyVmomi.VmomiSupport import ManagedObject

from vsphere_fs.errors import SessionError
from vsphere_fs.session.base import InventorySession
from vsphere_fs.types import ABSENT, Entity

logger = logging.getLogger(__name__)


class VmomiSession(InventorySession):
    """
    Inventory session backed by pyVmomi.

    Usage:
        async with VmomiSession("vcenter.local", "admin", "secret") as session:
            root = await session.root()
            values = await session.retrieve("HostSystem", hosts, ["name"])
    """

    def __init__(
        self,
        host: str,
        user: str,
        password: str,
        *,
        port: int = 443,
        verify_ssl: bool = True,
        page_size: int = 500,
    ) -> None:
        self.host = host
        self.user = user
        self._password = password
        self.port = port
        self.verify_ssl = verify_ssl
        self.page_size = page_size

        self._si: Any = None
        self._content: Any = None
        # Managed objects seen in this session, keyed by their handle
        self._objects: dict[Entity, Any] = {}

    @property
    def is_connected(self) -> bool:
        return self._content is not None

    async def connect(self) -> None:
        """Log in and retrieve the service content."""
        if self.is_connected:
            return

        context = None if self.verify_ssl else ssl._create_unverified_context()
        try:
            self._si = await asyncio.to_thread(
                SmartConnect,
                host=self.host,
                user=self.user,
                pwd=self._password,
                port=self.port,
                sslContext=context,
            )
            self._content = await asyncio.to_thread(self._si.RetrieveContent)
        except vim.fault.InvalidLogin as e:
            raise SessionError(f"Login failed for {self.user}@{self.host}: {e.msg}") from e
        except (OSError, vmodl.MethodFault) as e:
            raise SessionError(f"Cannot connect to {self.host}:{self.port}: {e}") from e

        logger.info(f"Connected to {self.host}:{self.port} as {self.user}")

    async def close(self) -> None:
        """Log out and forget every managed object seen."""
        if self._si is not None:
            await asyncio.to_thread(Disconnect, self._si)
            logger.info(f"Disconnected from {self.host}")
        self._si = None
        self._content = None
        self._objects.clear()

    async def root(self) -> Entity:
        content = self._require_content()
        return self._to_entity(content.rootFolder)

    async def retrieve(
        self,
        kind: str,
        entities: Sequence[Entity],
        paths: Sequence[str],
    ) -> dict[Entity, dict[str, Any]]:
        content = self._require_content()
        if not entities or not paths:
            return {entity: {} for entity in entities}
        return await asyncio.to_thread(
            self._retrieve_blocking, content, list(entities), list(paths)
        )

    # -------------------------------------------------------------------------
    # PropertyCollector
    # -------------------------------------------------------------------------

    def _retrieve_blocking(
        self,
        content: Any,
        entities: list[Entity],
        paths: list[str],
    ) -> dict[Entity, dict[str, Any]]:
        objects = [self._managed_object(entity) for entity in entities]

        filter_spec = vim.PropertyCollector.FilterSpec(
            objectSet=[vim.PropertyCollector.ObjectSpec(obj=obj, skip=False) for obj in objects],
            propSet=[
                vim.PropertyCollector.PropertySpec(
                    type=type(objects[0]),
                    pathSet=paths,
                    all=False,
                )
            ],
        )
        options = vim.PropertyCollector.RetrieveOptions(maxObjects=self.page_size)

        collector = content.propertyCollector
        result = collector.RetrievePropertiesEx(specSet=[filter_spec], options=options)

        object_contents: list[Any] = []
        while result is not None:
            object_contents.extend(result.objects or [])
            if not result.token:
                break
            result = collector.ContinueRetrievePropertiesEx(token=result.token)

        values: dict[Entity, dict[str, Any]] = {}
        for oc in object_contents:
            entity = self._to_entity(oc.obj)
            props = {prop.name: self._convert(prop.val) for prop in (oc.propSet or [])}
            for missing in oc.missingSet or []:
                props[missing.path] = ABSENT
            values[entity] = props

        logger.debug(
            f"PropertyCollector returned {len(object_contents)} of {len(entities)} objects"
        )
        return values

    def _require_content(self) -> Any:
        if self._content is None:
            raise SessionError("Session is not connected; call connect() first")
        return self._content

    def _to_entity(self, obj: Any) -> Entity:
        entity = Entity(kind=obj._wsdlName, moref=obj._moId)
        self._objects.setdefault(entity, obj)
        return entity

    def _managed_object(self, entity: Entity) -> Any:
        obj = self._objects.get(entity)
        if obj is not None:
            return obj

        mo_type = getattr(vim, entity.kind, None)
        if mo_type is None:
            raise SessionError(f"Unknown managed object type: {entity.kind}")
        obj = mo_type(entity.moref, self._si._stub if self._si is not None else None)
        self._objects[entity] = obj
        return obj

    def _convert(self, value: Any) -> Any:
        """Map pyVmomi values onto handles and ABSENT."""
        if value is None:
            return ABSENT
        if isinstance(value, ManagedObject):
            return self._to_entity(value)
        if isinstance(value, list):
            return [self._convert(item) for item in value]
        return value
