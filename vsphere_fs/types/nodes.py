"""
Tree Node Types

A navigable node is either a real Entity or a VirtualGroup: a synthetic
directory that exposes one relationship of its owning entity (for example
the VMs registered on a host) under a fixed name.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from typing import Union

from vsphere_fs.types.entities import Entity

GroupListing = Callable[[], Awaitable[Mapping[str, "Node"]]]


@dataclass(frozen=True)
class VirtualGroup:
    """
    Synthetic node naming a relationship view of ``owner``.

    Built fresh every time the owner's children are enumerated. Two groups
    with the same owner and name compare equal; the bound listing is not
    part of the identity.
    """

    owner: Entity
    name: str
    listing: GroupListing = field(compare=False, repr=False)

    async def list_children(self) -> dict[str, Node]:
        """Enumerate the group's current members (never cached)."""
        return dict(await self.listing())


Node = Union[Entity, VirtualGroup]
