"""
NavConfig - Configuration Management

Sensible defaults with full override capability.

Example:
    >>> # Use defaults (reads from environment)
    >>> browser = InventoryBrowser()

    >>> # Explicit configuration
    >>> config = NavConfig(host="vcenter.lab.local", user="admin", verify_ssl=False)
    >>> browser = InventoryBrowser(config=config)

    >>> # From config file
    >>> config = NavConfig.from_file("./vsphere-fs.toml")

Environment Variables:
    VSPHERE_HOST - vCenter or ESX host name
    VSPHERE_USER - Login user
    VSPHERE_PASSWORD - Login password
    VSPHERE_FS_PORT - HTTPS port
    VSPHERE_FS_VERIFY_SSL - "0"/"false"/"no" disables certificate checks
    VSPHERE_FS_FETCH_CONCURRENCY - Max kind-groups fetched concurrently
    VSPHERE_FS_PAGE_SIZE - Objects per property collector page
    VSPHERE_FS_SNAPSHOT - JSON inventory snapshot to browse offline
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

_FALSE_VALUES = {"0", "false", "no", "off"}


def _load_toml(path: Path) -> dict[str, Any]:
    with open(path, "rb") as f:
        return tomllib.load(f)


def _parse_bool(value: str) -> bool:
    return value.strip().lower() not in _FALSE_VALUES


class NavConfig:
    """Configuration for vsphere-fs."""

    # === Connection ===

    host: str | None = None
    """vCenter or ESX host to connect to"""

    user: str | None = None
    password: str | None = None

    port: int = 443
    """HTTPS port of the vSphere API endpoint"""

    verify_ssl: bool = True
    """Verify the server certificate (lab hosts often use self-signed ones)"""

    # === Fetching ===

    fetch_concurrency: int = 4
    """Max kind-groups fetched concurrently in one wave"""

    page_size: int = 500
    """Objects per RetrievePropertiesEx page"""

    # === Snapshot ===

    snapshot_path: str | None = None
    """JSON inventory snapshot; when set, no live connection is made"""

    def __init__(self, **kwargs: Any) -> None:
        """
        Initialize configuration.

        Args:
            **kwargs: Override any configuration option

        Raises:
            ValueError: On an unknown option
        """
        self._load_from_env()

        for key, value in kwargs.items():
            if key.startswith("_") or not hasattr(type(self), key):
                raise ValueError(f"Unknown configuration option: {key}")
            setattr(self, key, value)

    def _load_from_env(self) -> None:
        """Load configuration from environment variables."""
        if host := os.getenv("VSPHERE_HOST"):
            self.host = host
        if user := os.getenv("VSPHERE_USER"):
            self.user = user
        if password := os.getenv("VSPHERE_PASSWORD"):
            self.password = password
        if port := os.getenv("VSPHERE_FS_PORT"):
            self.port = int(port)
        if verify := os.getenv("VSPHERE_FS_VERIFY_SSL"):
            self.verify_ssl = _parse_bool(verify)
        if concurrency := os.getenv("VSPHERE_FS_FETCH_CONCURRENCY"):
            self.fetch_concurrency = int(concurrency)
        if page_size := os.getenv("VSPHERE_FS_PAGE_SIZE"):
            self.page_size = int(page_size)
        if snapshot := os.getenv("VSPHERE_FS_SNAPSHOT"):
            self.snapshot_path = snapshot

    @classmethod
    def from_file(cls, path: str | Path) -> "NavConfig":
        """
        Load configuration from TOML file.

        Sections are flattened; top-level keys are taken as-is.

        Example TOML:
            [connection]
            host = "vcenter.lab.local"
            user = "administrator@vsphere.local"
            verify_ssl = false

            [fetch]
            concurrency = 8
            page_size = 1000

            [snapshot]
            path = "./inventory.json"

        Args:
            path: Path to TOML configuration file

        Returns:
            NavConfig with values from file (environment still applies
            beneath them)

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: On an unknown option
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        data = _load_toml(path)

        section_mapping = {
            "connection": "",
            "fetch": "fetch_",
            "snapshot": "snapshot_",
        }
        # [fetch] page_size stays page_size
        unprefixed = {"page_size"}

        flat_config: dict[str, Any] = {}
        for section, prefix in section_mapping.items():
            for key, value in data.get(section, {}).items():
                flat_config[key if key in unprefixed else f"{prefix}{key}"] = value

        for key, value in data.items():
            if key in section_mapping:
                continue
            if isinstance(value, dict):
                raise ValueError(f"Unknown configuration section: [{key}]")
            flat_config[key] = value

        return cls(**flat_config)

    @classmethod
    def from_env(cls) -> "NavConfig":
        """Load configuration from environment variables only."""
        return cls()

    def with_overrides(self, **kwargs: Any) -> "NavConfig":
        """
        Return new config with specified overrides.

        ``None`` values are ignored so unset CLI options keep the current
        value.
        """
        new_config = NavConfig.__new__(NavConfig)
        for key in dir(self):
            if not key.startswith("_") and not callable(getattr(self, key)):
                setattr(new_config, key, getattr(self, key))
        for key, value in kwargs.items():
            if key.startswith("_") or not hasattr(NavConfig, key):
                raise ValueError(f"Unknown configuration option: {key}")
            if value is not None:
                setattr(new_config, key, value)
        return new_config

    def __repr__(self) -> str:
        return (
            f"NavConfig(host={self.host!r}, user={self.user!r}, port={self.port}, "
            f"verify_ssl={self.verify_ssl}, fetch_concurrency={self.fetch_concurrency}, "
            f"page_size={self.page_size}, snapshot_path={self.snapshot_path!r})"
        )
