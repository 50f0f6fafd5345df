"""
Kind Registry - Per-Kind Display and Navigation Rules

Each entity kind registers one descriptor:
    - required_properties: paths the summary renderer reads
    - summary_renderer: (entity, values) -> text, pure, never raises on ABSENT
    - children_lister: (entity, fetcher) -> {name: node} for real children
    - groups: named VirtualGroups built from (entity, fetcher) listers

Kinds are resolved by lookup on the entity's kind tag, never by inspecting
the remote object.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Awaitable, Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from vsphere_fs.errors import RegistrationConflict, UnknownKind
from vsphere_fs.types import Entity, EntityKind, Node, VirtualGroup, kind_tag

if TYPE_CHECKING:
    from vsphere_fs.fetch.fetcher import PropertyFetcher

logger = logging.getLogger(__name__)

SummaryRenderer = Callable[[Entity, Mapping[str, Any]], str]
ChildrenLister = Callable[[Entity, "PropertyFetcher"], Awaitable[Mapping[str, Node]]]
GroupLister = Callable[[Entity, "PropertyFetcher"], Awaitable[Mapping[str, Node]]]


@dataclass(frozen=True)
class KindDescriptor:
    """Display and navigation rules for one kind."""

    kind: str
    required_properties: tuple[str, ...]
    summary_renderer: SummaryRenderer
    children_lister: ChildrenLister | None = None
    groups: tuple[tuple[str, GroupLister], ...] = ()

    @property
    def group_names(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self.groups)

    @property
    def is_leaf(self) -> bool:
        return self.children_lister is None and not self.groups

    def render(self, entity: Entity, values: Mapping[str, Any]) -> str:
        """Summary text for ``entity`` from already fetched ``values``."""
        return self.summary_renderer(entity, values)

    async def children(self, entity: Entity, fetcher: "PropertyFetcher") -> dict[str, Node]:
        """
        Real children first, then declared groups.

        A real child whose name matches a declared group is hidden behind
        the group.
        """
        out: dict[str, Node] = {}
        reserved = set(self.group_names)

        if self.children_lister is not None:
            for name, node in (await self.children_lister(entity, fetcher)).items():
                if name in reserved:
                    logger.warning(
                        f"{entity}: child '{name}' ({node}) is shadowed by the '{name}' group"
                    )
                    continue
                out[name] = node

        for name, lister in self.groups:
            out[name] = VirtualGroup(
                owner=entity,
                name=name,
                listing=functools.partial(lister, entity, fetcher),
            )
        return out


class KindRegistry:
    """
    Mapping from kind tag to KindDescriptor.

    Usage:
        registry = KindRegistry()
        registry.register(
            "HostSystem",
            ["name", "summary.hardware.cpuMhz"],
            render_host,
            groups=[("vms", Relation("vm"))],
        )
        registry.descriptor("HostSystem").render(entity, values)
    """

    def __init__(self) -> None:
        self._descriptors: dict[str, KindDescriptor] = {}

    def register(
        self,
        kind: str | EntityKind,
        required_properties: Iterable[str],
        summary_renderer: SummaryRenderer,
        children_lister: ChildrenLister | None = None,
        *,
        groups: Iterable[tuple[str, GroupLister]] = (),
    ) -> KindDescriptor:
        """
        Register the descriptor for ``kind``.

        Registering the identical descriptor again is a no-op.

        Raises:
            RegistrationConflict: If two groups share a name, or ``kind`` is
                already registered with a different descriptor
        """
        tag = kind_tag(kind)
        group_list = tuple((str(name), lister) for name, lister in groups)

        seen: set[str] = set()
        for name, _ in group_list:
            if name in seen:
                raise RegistrationConflict(tag, f"group name '{name}' is declared twice")
            seen.add(name)

        descriptor = KindDescriptor(
            kind=tag,
            required_properties=tuple(dict.fromkeys(required_properties)),
            summary_renderer=summary_renderer,
            children_lister=children_lister,
            groups=group_list,
        )

        existing = self._descriptors.get(tag)
        if existing is not None:
            if existing == descriptor:
                return existing
            raise RegistrationConflict(tag, "already registered with a different descriptor")

        self._descriptors[tag] = descriptor
        logger.debug(f"Registered kind: '{tag}' ({len(descriptor.required_properties)} properties)")
        return descriptor

    def descriptor(self, kind: str | EntityKind) -> KindDescriptor:
        """
        Look up the descriptor for ``kind``.

        Raises:
            UnknownKind: If nothing is registered for ``kind``
        """
        tag = kind_tag(kind)
        try:
            return self._descriptors[tag]
        except KeyError:
            raise UnknownKind(tag) from None

    def kinds(self) -> list[str]:
        """Registered kind tags in registration order."""
        return list(self._descriptors)

    def __contains__(self, kind: object) -> bool:
        if not isinstance(kind, str):
            return False
        return kind_tag(kind) in self._descriptors

    def __len__(self) -> int:
        return len(self._descriptors)
