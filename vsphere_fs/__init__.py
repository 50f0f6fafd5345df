"""
vsphere-fs - vSphere Inventory as a Filesystem

Navigates a vSphere inventory (folders, datacenters, hosts, clusters, VMs,
datastores, networks) with path-style addressing, synthesized grouping
directories and batched property retrieval.

Example:
    >>> from vsphere_fs import InventoryBrowser, NavConfig
    >>> config = NavConfig(host="vcenter.lab.local", user="admin", password="...")
    >>> async with InventoryBrowser(config=config) as browser:
    ...     for line in await browser.ls("Datacenters/dc1/host/esx01/vms"):
    ...         print(line.name, line.text)

Main Classes:
    InventoryBrowser: Primary entry point (ls, show, resolve)
    NavConfig: Configuration management
    KindRegistry: Per-kind display and navigation rules
    Navigator / Lister: Path resolution and batched listing
"""

__version__ = "0.1.0"

# Public API - lazy imports so pyVmomi is only loaded for live sessions
def __getattr__(name: str):
    """Lazy import public API components."""

    if name == "InventoryBrowser":
        from vsphere_fs.api.browser import InventoryBrowser
        return InventoryBrowser

    if name == "NavConfig":
        from vsphere_fs.config.settings import NavConfig
        return NavConfig

    if name in ("KindRegistry", "KindDescriptor"):
        from vsphere_fs import registry
        return getattr(registry, name)

    if name == "default_registry":
        from vsphere_fs.kinds import default_registry
        return default_registry

    if name in ("Navigator", "Lister"):
        from vsphere_fs import navigation
        return getattr(navigation, name)

    if name in ("PropertyFetcher", "Relation"):
        from vsphere_fs import fetch
        return getattr(fetch, name)

    if name in ("InventorySession", "MemorySession", "VmomiSession"):
        from vsphere_fs import session
        return getattr(session, name)

    # Types
    if name in ("ABSENT", "Entity", "EntityKind", "ListingLine", "VirtualGroup"):
        from vsphere_fs import types
        return getattr(types, name)

    raise AttributeError(f"module 'vsphere_fs' has no attribute {name!r}")


__all__ = [
    # Main classes
    "InventoryBrowser",
    "NavConfig",
    "KindRegistry",
    "KindDescriptor",
    "default_registry",
    "Navigator",
    "Lister",
    "PropertyFetcher",
    "Relation",

    # Sessions
    "InventorySession",
    "MemorySession",
    "VmomiSession",

    # Types
    "ABSENT",
    "Entity",
    "EntityKind",
    "ListingLine",
    "VirtualGroup",

    # Version
    "__version__",
]
