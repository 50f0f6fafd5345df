"""Reusable children and group listers for kind descriptors."""

from __future__ import annotations

from dataclasses import dataclass

from vsphere_fs.fetch.fetcher import PropertyFetcher, as_entities
from vsphere_fs.types import Entity


@dataclass(frozen=True)
class Relation:
    """
    Group lister reading one relationship property (e.g. a host's ``vm``).

    Compares by path, so registering the same kind twice with the same
    relations is recognized as identical.
    """

    path: str

    async def __call__(self, entity: Entity, fetcher: PropertyFetcher) -> dict[str, Entity]:
        return await fetcher.collect_children(entity, self.path)


@dataclass(frozen=True)
class NamedReferences:
    """
    Children lister exposing single-valued reference properties under fixed
    names, e.g. a datacenter's ``vmFolder`` as ``vm``.

    References the remote side does not report are left out.
    """

    references: tuple[tuple[str, str], ...]

    async def __call__(self, entity: Entity, fetcher: PropertyFetcher) -> dict[str, Entity]:
        values = await fetcher.fetch_one(entity, [path for _, path in self.references])
        children: dict[str, Entity] = {}
        for name, path in self.references:
            refs = as_entities(values[path])
            if refs:
                children[name] = refs[0]
        return children
