"""Exception hierarchy for inventory navigation."""

from __future__ import annotations


class VSphereFSError(Exception):
    """Base exception for all vsphere_fs errors."""


class UnknownKind(VSphereFSError):
    """Raised when an entity's kind has no registered descriptor."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"No descriptor registered for kind '{kind}'")


class PathNotFound(VSphereFSError):
    """
    Raised when a path segment matches no child.

    Attributes:
        prefix: Slash-joined segments consumed before the failure ("" at the root)
        segment: The segment that did not match
    """

    def __init__(self, prefix: str, segment: str) -> None:
        self.prefix = prefix
        self.segment = segment
        where = f"'{prefix}'" if prefix else "the root"
        super().__init__(f"'{segment}' not found under {where}")


class PropertyFetchError(VSphereFSError):
    """Raised (or returned per entity) when a kind's batched fetch fails."""

    def __init__(self, kind: str, cause: BaseException) -> None:
        self.kind = kind
        self.cause = cause
        self.__cause__ = cause
        super().__init__(f"Fetching {kind} properties failed: {cause}")


class RegistrationConflict(VSphereFSError):
    """Raised at setup time when a kind registration is inconsistent."""

    def __init__(self, kind: str, reason: str) -> None:
        self.kind = kind
        self.reason = reason
        super().__init__(f"Cannot register kind '{kind}': {reason}")


class SessionError(VSphereFSError):
    """Raised when an inventory session is misused or cannot be opened."""


__all__ = [
    "PathNotFound",
    "PropertyFetchError",
    "RegistrationConflict",
    "SessionError",
    "UnknownKind",
    "VSphereFSError",
]
