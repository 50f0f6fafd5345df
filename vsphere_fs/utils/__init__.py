"""
Utility Functions

Modules:
    units: ABSENT-safe number, size and text formatting for renderers
"""

from vsphere_fs.utils.units import PLACEHOLDER, decimal_size, scaled, text

__all__ = ["PLACEHOLDER", "decimal_size", "scaled", "text"]
