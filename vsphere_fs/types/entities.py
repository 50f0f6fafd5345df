"""
Entity Types

Handles for objects in the remote inventory.

    - Entity: Frozen (kind, moref) identity of one managed object
    - EntityKind: Managed object kinds with built-in display support
    - ABSENT: Marker for a property the remote side has no value for
"""

from enum import Enum
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, field_validator


class EntityKind(str, Enum):
    """
    Managed object kinds registered by vsphere_fs.kinds.

    The registry is keyed by plain strings; any other managed object type
    name can be registered alongside these.
    """

    FOLDER = "Folder"
    DATACENTER = "Datacenter"
    HOST_SYSTEM = "HostSystem"
    COMPUTE_RESOURCE = "ComputeResource"
    CLUSTER_COMPUTE_RESOURCE = "ClusterComputeResource"
    RESOURCE_POOL = "ResourcePool"
    VIRTUAL_MACHINE = "VirtualMachine"
    DATASTORE = "Datastore"
    NETWORK = "Network"
    DISTRIBUTED_VIRTUAL_PORTGROUP = "DistributedVirtualPortgroup"


def kind_tag(kind: "str | EntityKind") -> str:
    """Normalize a kind given as enum member or string to its plain tag."""
    if isinstance(kind, Enum):
        return str(kind.value)
    return str(kind)


class _Absent:
    """Singleton type of ABSENT."""

    _instance: "_Absent | None" = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> tuple[type, tuple[()]]:
        return (_Absent, ())


ABSENT: Final = _Absent()
"""Value of a requested property the remote side does not have."""


def is_absent(value: Any) -> bool:
    """True for ABSENT and for None (unset on the remote side)."""
    return value is ABSENT or value is None


class Entity(BaseModel):
    """
    Opaque, hashable handle to one managed object.

    Attributes:
        kind: Managed object type name (e.g. "HostSystem")
        moref: Managed object reference id, stable for the session
    """

    kind: str
    moref: str

    model_config = ConfigDict(frozen=True)

    @field_validator("kind", mode="before")
    @classmethod
    def _normalize_kind(cls, value: Any) -> Any:
        if isinstance(value, Enum):
            return kind_tag(value)
        return value

    def __str__(self) -> str:
        return f"{self.kind}:{self.moref}"
