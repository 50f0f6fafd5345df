"""
Inventory Sessions

Remote management API access used by the navigation core.

Modules:
    base: Abstract session interface
    memory: In-memory snapshot session (offline browsing, tests)
    vmomi: Live vCenter/ESXi session via pyVmomi

Design:
    - The core only ever calls root() and retrieve() (one batch per kind)
    - pyVmomi is imported lazily so snapshot browsing never loads it
"""

from vsphere_fs.session.base import InventorySession
from vsphere_fs.session.memory import MemorySession


def __getattr__(name: str):
    if name == "VmomiSession":
        from vsphere_fs.session.vmomi import VmomiSession
        return VmomiSession
    raise AttributeError(f"module 'vsphere_fs.session' has no attribute {name!r}")


__all__ = ["InventorySession", "MemorySession", "VmomiSession"]
