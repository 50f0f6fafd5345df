"""
Abstract Inventory Session Interface

Defines the contract the navigation core needs from a remote management API.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from vsphere_fs.types import Entity


class InventorySession(ABC):
    """
    Abstract interface for inventory sessions.

    Implementations (pyVmomi, in-memory snapshot) must:
        - return managed object references inside property values as
          Entity handles (lists of references as lists of Entity)
        - return ABSENT for properties the remote side does not have

    Lifecycle:
        session = VmomiSession(host, user, password)
        await session.connect()
        # ... operations ...
        await session.close()

    Or using context manager:
        async with VmomiSession(host, user, password) as session:
            root = await session.root()
    """

    @abstractmethod
    async def connect(self) -> None:
        """Open the session (login, retrieve service content)."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """Close the session and release resources."""
        ...

    async def __aenter__(self) -> "InventorySession":
        await self.connect()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    @abstractmethod
    async def root(self) -> Entity:
        """Return the root of the inventory tree."""
        ...

    @abstractmethod
    async def retrieve(
        self,
        kind: str,
        entities: Sequence[Entity],
        paths: Sequence[str],
    ) -> dict[Entity, dict[str, Any]]:
        """
        Retrieve property values for entities of one kind in a single call.

        Args:
            kind: Kind shared by every entity in the batch
            entities: Entities to read
            paths: Dotted property paths to read on each entity

        Returns:
            {entity: {path: value}}; missing paths may be omitted or ABSENT

        Raises:
            Any transport or API error; callers wrap it per kind
        """
        ...
