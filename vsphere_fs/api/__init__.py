"""
Public API Layer

Modules:
    browser: InventoryBrowser - main entry point

Design Principles:
    - Single entry point (InventoryBrowser) for callers
    - Async-first with sync wrappers (_sync suffix)
    - Lazy connection - don't connect until needed
    - Context manager support for resource cleanup
"""

from vsphere_fs.api.browser import InventoryBrowser

__all__ = ["InventoryBrowser"]
