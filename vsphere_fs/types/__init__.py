"""
Type Definitions

Entity Models:
    - Entity - Handle to one managed object (kind + moref)
    - EntityKind - Built-in managed object kinds
    - ABSENT - Marker for values the remote side does not have

Node Models:
    - VirtualGroup - Synthetic relationship directory owned by an entity
    - Node - Entity | VirtualGroup

Result Models:
    - ListingLine - One rendered row of a listing
"""

from vsphere_fs.types.entities import ABSENT, Entity, EntityKind, is_absent, kind_tag
from vsphere_fs.types.nodes import Node, VirtualGroup
from vsphere_fs.types.results import ListingLine

__all__ = [
    "ABSENT",
    "Entity",
    "EntityKind",
    "is_absent",
    "kind_tag",
    "Node",
    "VirtualGroup",
    "ListingLine",
]
