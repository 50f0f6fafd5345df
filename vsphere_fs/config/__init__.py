"""
Configuration System

Manages configuration for vsphere-fs with a layered approach.

Configuration Priority (highest to lowest):
    1. Programmatic (passed to NavConfig() / with_overrides())
    2. Config file values, when loaded with NavConfig.from_file (--config)
    3. Environment variables (VSPHERE_* and VSPHERE_FS_* prefixes)
    4. Built-in defaults

Modules:
    settings: NavConfig class
"""

from vsphere_fs.config.settings import NavConfig

__all__ = ["NavConfig"]
