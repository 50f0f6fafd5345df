"""
Kind Registry

Modules:
    kinds: KindRegistry and KindDescriptor

Built-in descriptors live in vsphere_fs.kinds; use
vsphere_fs.kinds.default_registry() for a registry populated with them.
"""

from vsphere_fs.registry.kinds import (
    ChildrenLister,
    GroupLister,
    KindDescriptor,
    KindRegistry,
    SummaryRenderer,
)

__all__ = [
    "ChildrenLister",
    "GroupLister",
    "KindDescriptor",
    "KindRegistry",
    "SummaryRenderer",
]
