"""
Property Fetcher - Batched Property Retrieval

Reads display and relationship properties for many entities at once:
    1. Deduplicate entities, group them by kind (discovery order kept)
    2. One session.retrieve() batch per kind, independent kinds concurrently
    3. Fill ABSENT for every requested path the session did not report
    4. A failing kind-group maps each of its entities to PropertyFetchError;
       the other groups are unaffected

Nothing is cached: every call is a fresh fetch wave.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Union

from vsphere_fs.errors import PropertyFetchError
from vsphere_fs.session.base import InventorySession
from vsphere_fs.types import ABSENT, Entity, is_absent, kind_tag

logger = logging.getLogger(__name__)

PropertyPaths = Union[Sequence[str], Mapping[str, Sequence[str]]]
FetchResult = dict[Entity, Union[dict[str, Any], PropertyFetchError]]


def _unique(items: Iterable[Any]) -> list[Any]:
    return list(dict.fromkeys(items))


def _normalize(values: Any, paths: list[str]) -> dict[str, Any]:
    """Fill every requested path, mapping missing and None to ABSENT."""
    values = values or {}
    return {path: ABSENT if is_absent(values.get(path)) else values[path] for path in paths}


class PropertyFetcher:
    """
    Batched, per-kind property retrieval over an InventorySession.

    Usage:
        fetcher = PropertyFetcher(session)
        values = await fetcher.fetch(entities, {"HostSystem": ["name"], "VirtualMachine": ["name"]})

        # values[entity] -> {"name": "esx01"} or PropertyFetchError
    """

    def __init__(self, session: InventorySession, concurrency: int = 4) -> None:
        self.session = session
        self.concurrency = max(1, concurrency)
        self.batches_issued = 0

    async def fetch(
        self,
        entities: Iterable[Entity],
        property_paths: PropertyPaths,
    ) -> FetchResult:
        """
        Fetch properties for entities of any mix of kinds.

        Args:
            entities: Entities to read (duplicates are fetched once)
            property_paths: Paths for every kind, or a {kind: paths} mapping

        Returns:
            {entity: {path: value}} in first-seen entity order; a failed
            kind-group maps its entities to the PropertyFetchError instead
        """
        ordered = _unique(entities)
        groups: dict[str, list[Entity]] = {}
        for entity in ordered:
            groups.setdefault(entity.kind, []).append(entity)

        results: FetchResult = {entity: {} for entity in ordered}
        semaphore = asyncio.Semaphore(self.concurrency)

        async def bounded_fetch(
            kind: str, members: list[Entity], paths: list[str]
        ) -> FetchResult:
            async with semaphore:
                return await self._fetch_group(kind, members, paths)

        tasks = []
        for kind, members in groups.items():
            paths = self._paths_for(kind, property_paths)
            if paths:
                tasks.append(bounded_fetch(kind, members, paths))

        for group_result in await asyncio.gather(*tasks):
            results.update(group_result)

        return results

    async def fetch_one(self, entity: Entity, paths: Sequence[str]) -> dict[str, Any]:
        """
        Fetch properties of a single entity.

        Raises:
            PropertyFetchError: If the remote call failed
        """
        result = (await self.fetch([entity], paths))[entity]
        if isinstance(result, PropertyFetchError):
            raise result
        return result

    async def collect_children(self, entity: Entity, relation: str) -> dict[str, Entity]:
        """
        Follow a relationship property and name every entity it references.

        Reads ``relation`` on ``entity``, then the ``name`` of each referenced
        entity (one batch per referenced kind).

        Returns:
            {name: entity} in the order the remote side listed them. When two
            referenced entities share a name the first one is kept.

        Raises:
            PropertyFetchError: If either read failed
        """
        values = await self.fetch_one(entity, [relation])
        refs = as_entities(values[relation])
        if not refs:
            return {}

        names = await self.fetch(refs, ["name"])
        children: dict[str, Entity] = {}
        for ref in refs:
            result = names[ref]
            if isinstance(result, PropertyFetchError):
                raise result
            name = result["name"]
            name = ref.moref if is_absent(name) else str(name)
            if name in children:
                logger.warning(
                    f"{entity} {relation}: duplicate name '{name}' ({ref}), keeping {children[name]}"
                )
                continue
            children[name] = ref
        return children

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    @staticmethod
    def _paths_for(kind: str, property_paths: PropertyPaths) -> list[str]:
        if isinstance(property_paths, str):
            return [property_paths]
        if isinstance(property_paths, Mapping):
            for key, paths in property_paths.items():
                if kind_tag(key) == kind:
                    return _unique(paths)
            return []
        return _unique(property_paths)

    async def _fetch_group(
        self,
        kind: str,
        members: list[Entity],
        paths: list[str],
    ) -> FetchResult:
        self.batches_issued += 1
        logger.debug(f"Fetching {len(paths)} properties for {len(members)} {kind} entities")

        try:
            raw = await self.session.retrieve(kind, members, paths)
        except Exception as e:
            error = PropertyFetchError(kind, e)
            logger.warning(f"Property fetch failed for {len(members)} {kind} entities: {e}")
            return {entity: error for entity in members}

        try:
            return {entity: _normalize(raw.get(entity), paths) for entity in members}
        except (AttributeError, KeyError, TypeError) as e:
            error = PropertyFetchError(kind, e)
            logger.warning(f"Malformed property response for {kind}: {e}")
            return {entity: error for entity in members}


def as_entities(value: Any) -> list[Entity]:
    """Normalize a relationship value (ABSENT, one handle, or a list) to handles."""
    if isinstance(value, Entity):
        return [value]
    if isinstance(value, (list, tuple)):
        return _unique(item for item in value if isinstance(item, Entity))
    return []
