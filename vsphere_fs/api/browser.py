"""
InventoryBrowser - Primary Entry Point

Composes a session, the kind registry, the property fetcher, the navigator
and the lister behind one object.

Session selection (first match wins):
    - an explicit ``session`` argument
    - ``config.snapshot_path``: MemorySession loaded from the JSON snapshot
    - ``config.host``: live VmomiSession

Example:
    >>> async with InventoryBrowser(config=NavConfig(snapshot_path="inv.json")) as browser:
    ...     for line in await browser.ls("Datacenters/dc1/host"):
    ...         print(line.name, line.text)

    # Or with sync API
    >>> browser = InventoryBrowser()
    >>> lines = browser.ls_sync("Datacenters")
    >>> browser.close_sync()
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from vsphere_fs.errors import SessionError
from vsphere_fs.fetch.fetcher import PropertyFetcher
from vsphere_fs.navigation import Lister, Navigator
from vsphere_fs.types import ListingLine, Node

if TYPE_CHECKING:
    from vsphere_fs.config.settings import NavConfig
    from vsphere_fs.registry.kinds import KindRegistry
    from vsphere_fs.session.base import InventorySession

logger = logging.getLogger(__name__)

ROOT_NAME = "/"


class InventoryBrowser:
    """
    Filesystem-style browsing of a vSphere inventory.

    Args:
        session: Session to use. Built from ``config`` when omitted.
        config: Optional configuration. Uses defaults if not provided.
        registry: Kind registry. Uses the built-in kinds if not provided.
    """

    def __init__(
        self,
        session: "InventorySession | None" = None,
        config: "NavConfig | None" = None,
        registry: "KindRegistry | None" = None,
    ) -> None:
        # Lazy import to avoid circular imports
        if config is None:
            from vsphere_fs.config import NavConfig
            config = NavConfig()
        if registry is None:
            from vsphere_fs.kinds import default_registry
            registry = default_registry()

        self._config = config
        self._registry = registry
        self._session = session
        self._owns_session = session is None
        self._connected = False

        self._fetcher: PropertyFetcher | None = None
        self._navigator: Navigator | None = None
        self._lister: Lister | None = None

    async def _ensure_connected(self) -> None:
        """Create and connect the session on first use."""
        if self._connected:
            return

        if self._session is None:
            self._session = self._create_session()
        await self._session.connect()

        self._fetcher = PropertyFetcher(self._session, self._config.fetch_concurrency)
        self._navigator = Navigator(self._registry, self._fetcher)
        self._lister = Lister(self._registry, self._fetcher)
        self._connected = True

    def _create_session(self) -> "InventorySession":
        """Create a session based on config."""
        if self._config.snapshot_path:
            from vsphere_fs.session.memory import MemorySession
            logger.info(f"Browsing snapshot {self._config.snapshot_path}")
            return MemorySession.from_file(self._config.snapshot_path)

        if self._config.host:
            from vsphere_fs.session.vmomi import VmomiSession
            return VmomiSession(
                self._config.host,
                self._config.user or "",
                self._config.password or "",
                port=self._config.port,
                verify_ssl=self._config.verify_ssl,
                page_size=self._config.page_size,
            )

        raise SessionError(
            "No inventory source configured: set a host (VSPHERE_HOST) "
            "or a snapshot file (VSPHERE_FS_SNAPSHOT)"
        )

    # === Lifecycle ===

    async def __aenter__(self) -> "InventoryBrowser":
        """Async context manager entry."""
        await self._ensure_connected()
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close the session if this browser connected it."""
        if self._connected and self._session is not None:
            await self._session.close()
        if self._owns_session:
            self._session = None
        self._fetcher = None
        self._navigator = None
        self._lister = None
        self._connected = False

    def close_sync(self) -> None:
        """Release all resources (sync)."""
        if self._connected:
            asyncio.run(self.close())

    # === Properties ===

    @property
    def config(self) -> "NavConfig":
        """Current configuration."""
        return self._config

    @property
    def registry(self) -> "KindRegistry":
        return self._registry

    @property
    def fetcher(self) -> PropertyFetcher:
        """Property fetcher of the open session."""
        if self._fetcher is None:
            raise SessionError("Browser is not connected")
        return self._fetcher

    # === Navigation ===

    async def root(self) -> Node:
        """Root of the inventory (usually the root folder)."""
        await self._ensure_connected()
        assert self._session is not None
        return await self._session.root()

    async def resolve(self, path: str | Sequence[str] = "") -> Node:
        """
        Resolve a path from the root.

        Raises:
            PathNotFound: If a segment does not exist
            UnknownKind: If a node on the way has an unregistered kind
        """
        root = await self.root()
        assert self._navigator is not None
        return await self._navigator.resolve(root, path)

    async def children(self, path: str | Sequence[str] = "") -> dict[str, Node]:
        """Children of the node at ``path``, unrendered."""
        node = await self.resolve(path)
        assert self._navigator is not None
        return await self._navigator.children(node)

    async def ls(self, path: str | Sequence[str] = "") -> list[ListingLine]:
        """
        List the children of the node at ``path``.

        Returns:
            One ListingLine per child, in inventory order
        """
        children = await self.children(path)
        assert self._lister is not None
        return await self._lister.list(children)

    async def show(self, path: str | Sequence[str]) -> ListingLine:
        """Summary line of the node at ``path`` itself ("/" for the root)."""
        root = await self.root()
        assert self._navigator is not None and self._lister is not None
        trail = await self._navigator.walk(root, path)
        name, node = trail[-1]
        lines = await self._lister.list([(name or ROOT_NAME, node)])
        return lines[0]

    # === Sync wrappers ===

    def ls_sync(self, path: str | Sequence[str] = "") -> list[ListingLine]:
        """List the children of ``path`` (sync)."""
        return asyncio.run(self.ls(path))

    def show_sync(self, path: str | Sequence[str]) -> ListingLine:
        """Summary line of ``path`` (sync)."""
        return asyncio.run(self.show(path))
