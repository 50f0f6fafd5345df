"""
Built-in Kinds

One module per vSphere managed object type (or family of types), each with
``PROPERTIES``, a ``render`` summary function and ``register(registry)``.

Modules:
    folder: Folder
    datacenter: Datacenter
    host: HostSystem
    cluster: ComputeResource, ClusterComputeResource
    resource_pool: ResourcePool
    vm: VirtualMachine
    datastore: Datastore
    network: Network, DistributedVirtualPortgroup

Usage:
    >>> from vsphere_fs.kinds import default_registry
    >>> registry = default_registry()
    >>> registry.descriptor("HostSystem").group_names
    ('vms', 'datastores')
"""

from vsphere_fs.kinds import (
    cluster,
    datacenter,
    datastore,
    folder,
    host,
    network,
    resource_pool,
    vm,
)
from vsphere_fs.registry.kinds import KindRegistry

BUILTIN_KINDS = (folder, datacenter, host, cluster, resource_pool, vm, datastore, network)


def register_builtin_kinds(registry: KindRegistry) -> KindRegistry:
    """Register every built-in kind on ``registry``; safe to call twice."""
    for module in BUILTIN_KINDS:
        module.register(registry)
    return registry


def default_registry() -> KindRegistry:
    """A fresh registry holding the built-in kinds."""
    return register_builtin_kinds(KindRegistry())


__all__ = ["BUILTIN_KINDS", "default_registry", "register_builtin_kinds"]
