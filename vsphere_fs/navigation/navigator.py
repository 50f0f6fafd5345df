"""
Navigator - Path Resolution

Resolves slash-separated paths by repeatedly enumerating the current node's
children and descending into the exact-name match:
    - Entity: children from its kind descriptor (real children + groups)
    - VirtualGroup: its own bound listing

Path rules:
    - empty segments and "." are ignored
    - ".." returns to the previously visited node (stays put at the root)
    - no partial, case-insensitive or wildcard matching
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from vsphere_fs.errors import PathNotFound
from vsphere_fs.fetch.fetcher import PropertyFetcher
from vsphere_fs.registry.kinds import KindRegistry
from vsphere_fs.types import Node, VirtualGroup

logger = logging.getLogger(__name__)

SEPARATOR = "/"


def split_path(path: str | Sequence[str]) -> list[str]:
    """Split a path into segments, dropping empty and "." segments."""
    parts = path.split(SEPARATOR) if isinstance(path, str) else list(path)
    return [part for part in parts if part and part != "."]


class Navigator:
    """
    Stateless path resolution over the inventory.

    Usage:
        navigator = Navigator(registry, fetcher)
        node = await navigator.resolve(root, "Datacenters/dc1/host/esx01/vms")
        children = await navigator.children(node)
    """

    def __init__(self, registry: KindRegistry, fetcher: PropertyFetcher) -> None:
        self.registry = registry
        self.fetcher = fetcher

    async def children(self, node: Node) -> dict[str, Node]:
        """
        Enumerate the children of ``node``.

        Raises:
            UnknownKind: If ``node`` is an entity of an unregistered kind
            PropertyFetchError: If a relationship read failed
        """
        if isinstance(node, VirtualGroup):
            return await node.list_children()
        descriptor = self.registry.descriptor(node.kind)
        return await descriptor.children(node, self.fetcher)

    async def resolve(self, root: Node, path: str | Sequence[str]) -> Node:
        """
        Resolve ``path`` starting at ``root``.

        Raises:
            PathNotFound: If a segment matches no child (including any
                segment below a leaf)
            UnknownKind: If an entity on the way has an unregistered kind
        """
        trail = await self.walk(root, path)
        return trail[-1][1]

    async def walk(self, root: Node, path: str | Sequence[str]) -> list[tuple[str, Node]]:
        """
        Resolve ``path`` and return the visited (name, node) pairs.

        The first pair is ("", root); ".." segments pop pairs off the end,
        so the result is the canonical route to the final node.
        """
        trail: list[tuple[str, Node]] = [("", root)]

        for segment in split_path(path):
            if segment == "..":
                if len(trail) > 1:
                    trail.pop()
                continue

            children = await self.children(trail[-1][1])
            child = children.get(segment)
            if child is None:
                prefix = SEPARATOR.join(name for name, _ in trail[1:])
                raise PathNotFound(prefix, segment)

            trail.append((segment, child))

        logger.debug(
            f"Resolved '{SEPARATOR.join(name for name, _ in trail[1:])}' -> {trail[-1][1]}"
        )
        return trail
