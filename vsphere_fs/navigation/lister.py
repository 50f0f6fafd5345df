"""
Lister - Summary Rendering for Sibling Nodes

Turns {name: node} into ordered ListingLines:
    1. Grouping nodes render as their bare name (no fetch)
    2. Entities: one fetch wave for every kind's required properties
       (one remote batch per kind)
    3. Each entity line comes from its kind's renderer, fed only with the
       fetched values

An unknown kind or a failed kind-group only affects its own lines.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from vsphere_fs.errors import PropertyFetchError, UnknownKind
from vsphere_fs.fetch.fetcher import PropertyFetcher
from vsphere_fs.registry.kinds import KindRegistry
from vsphere_fs.types import Entity, ListingLine, Node, VirtualGroup

logger = logging.getLogger(__name__)


class Lister:
    """
    Renders listings of sibling nodes.

    Usage:
        lister = Lister(registry, fetcher)
        lines = await lister.list(await navigator.children(node))
        for line in lines:
            print(line.name, line.text)
    """

    def __init__(self, registry: KindRegistry, fetcher: PropertyFetcher) -> None:
        self.registry = registry
        self.fetcher = fetcher

    async def list(
        self,
        nodes: Mapping[str, Node] | Iterable[tuple[str, Node]],
    ) -> list[ListingLine]:
        """
        Render one line per node, in input order.

        Args:
            nodes: {name: node} or (name, node) pairs

        Returns:
            ListingLines; entities that could not be rendered carry ``error``
        """
        pairs = list(nodes.items()) if isinstance(nodes, Mapping) else [tuple(p) for p in nodes]

        wanted: dict[str, tuple[str, ...]] = {}
        unknown: dict[str, UnknownKind] = {}
        for _, node in pairs:
            if not isinstance(node, Entity) or node.kind in wanted or node.kind in unknown:
                continue
            try:
                wanted[node.kind] = self.registry.descriptor(node.kind).required_properties
            except UnknownKind as e:
                logger.warning(f"Cannot render {node.kind} entities: {e}")
                unknown[node.kind] = e

        entities = [node for _, node in pairs if isinstance(node, Entity) and node.kind in wanted]
        values = await self.fetcher.fetch(entities, wanted) if entities else {}

        lines: list[ListingLine] = []
        for name, node in pairs:
            if isinstance(node, VirtualGroup):
                lines.append(ListingLine(name=name, text=name))
                continue

            if node.kind in unknown:
                lines.append(self._error_line(name, node, unknown[node.kind]))
                continue

            result = values[node]
            if isinstance(result, PropertyFetchError):
                lines.append(self._error_line(name, node, result))
                continue

            text = self.registry.descriptor(node.kind).render(node, result)
            lines.append(ListingLine(name=name, text=text, kind=node.kind))

        return lines

    @staticmethod
    def _error_line(name: str, entity: Entity, error: Exception) -> ListingLine:
        return ListingLine(
            name=name,
            text=f"({entity.kind}): unavailable",
            kind=entity.kind,
            error=str(error),
        )
