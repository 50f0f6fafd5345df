"""
Shared fixtures: a small vSphere inventory served by MemorySession.

    Datacenters (group-d1)
    └── dc1 (datacenter-2)
        ├── vm/         web01, db01
        ├── host/       cl1 (cluster: esx01, esx02, pool "Resources")
        ├── datastore/  ds1
        └── network/    VM Network
"""

import copy

import pytest

from vsphere_fs.fetch import PropertyFetcher
from vsphere_fs.kinds import default_registry
from vsphere_fs.navigation import Lister, Navigator
from vsphere_fs.session import MemorySession


def ref(moref):
    return {"ref": moref}


INVENTORY = {
    "root": "group-d1",
    "objects": {
        "group-d1": {
            "kind": "Folder",
            "properties": {
                "name": "Datacenters",
                "childType": ["Folder", "Datacenter"],
                "childEntity": [ref("datacenter-2")],
            },
        },
        "datacenter-2": {
            "kind": "Datacenter",
            "properties": {
                "name": "dc1",
                "overallStatus": "green",
                "vmFolder": ref("group-v3"),
                "hostFolder": ref("group-h4"),
                "datastoreFolder": ref("group-s5"),
                "networkFolder": ref("group-n6"),
            },
        },
        "group-v3": {
            "kind": "Folder",
            "properties": {
                "name": "vm",
                "childEntity": [ref("vm-30"), ref("vm-31")],
            },
        },
        "group-h4": {
            "kind": "Folder",
            "properties": {"name": "host", "childEntity": [ref("domain-c7")]},
        },
        "group-s5": {
            "kind": "Folder",
            "properties": {"name": "datastore", "childEntity": [ref("datastore-20")]},
        },
        "group-n6": {
            "kind": "Folder",
            "properties": {"name": "network", "childEntity": [ref("network-40")]},
        },
        "domain-c7": {
            "kind": "ClusterComputeResource",
            "properties": {
                "name": "cl1",
                "summary": {
                    "numHosts": 2,
                    "totalCpu": 57600,
                    "totalMemory": 343597383680,
                },
                "resourcePool": ref("resgroup-8"),
                "host": [ref("host-10"), ref("host-11")],
                "datastore": [ref("datastore-20")],
            },
        },
        "resgroup-8": {
            "kind": "ResourcePool",
            "properties": {
                "name": "Resources",
                "runtime.overallStatus": "green",
                "resourcePool": [],
                "vm": [ref("vm-30"), ref("vm-31")],
            },
        },
        "host-10": {
            "kind": "HostSystem",
            "properties": {
                "name": "esx01",
                "summary": {
                    "hardware": {
                        "memorySize": 274877906944,
                        "cpuModel": "Intel(R) Xeon(R) Gold 6230",
                        "cpuMhz": 2400,
                        "numCpuPkgs": 2,
                        "numCpuCores": 16,
                        "numCpuThreads": 32,
                    }
                },
                "vm": [ref("vm-30"), ref("vm-31")],
                "datastore": [ref("datastore-20")],
            },
        },
        "host-11": {
            "kind": "HostSystem",
            "properties": {
                "name": "esx02",
                "summary": {
                    "hardware": {
                        "memorySize": 68719476736,
                        "numCpuPkgs": 1,
                        "numCpuCores": 8,
                    }
                },
                "vm": [],
                "datastore": [ref("datastore-20")],
            },
        },
        "vm-30": {
            "kind": "VirtualMachine",
            "properties": {
                "name": "web01",
                "runtime.powerState": "poweredOn",
                "summary.config.numCpu": 2,
                "summary.config.memorySizeMB": 4096,
                "guest.ipAddress": "10.0.0.5",
            },
        },
        "vm-31": {
            "kind": "VirtualMachine",
            "properties": {
                "name": "db01",
                "runtime": {"powerState": "poweredOff"},
                "summary": {"config": {"numCpu": 4, "memorySizeMB": 8192}},
                "guest": {"ipAddress": None},
            },
        },
        "datastore-20": {
            "kind": "Datastore",
            "properties": {
                "name": "ds1",
                "summary.type": "VMFS",
                "summary.capacity": 2000000000000,
                "summary.freeSpace": 1200000000000,
                "vm": [ref("vm-30"), ref("vm-31")],
            },
        },
        "network-40": {
            "kind": "Network",
            "properties": {
                "name": "VM Network",
                "summary.accessible": True,
                "vm": [ref("vm-30")],
            },
        },
    },
}


@pytest.fixture
def inventory():
    """A fresh copy of the snapshot document."""
    return copy.deepcopy(INVENTORY)


@pytest.fixture
def session(inventory):
    return MemorySession.from_dict(inventory)


@pytest.fixture
def host_session():
    """Inventory whose root is a single host with two VMs and one datastore."""
    session = MemorySession()
    session.add(
        "host-1",
        "HostSystem",
        {
            "name": "esx01",
            "vm": [ref("vm-1"), ref("vm-2")],
            "datastore": [ref("datastore-1")],
        },
    )
    session.add("vm-1", "VirtualMachine", {"name": "alpha", "runtime.powerState": "poweredOn"})
    session.add("vm-2", "VirtualMachine", {"name": "beta", "runtime.powerState": "poweredOff"})
    session.add("datastore-1", "Datastore", {"name": "local", "summary.type": "VMFS"})
    return session


@pytest.fixture
def registry():
    return default_registry()


@pytest.fixture
def fetcher(session):
    return PropertyFetcher(session)


@pytest.fixture
def navigator(registry, fetcher):
    return Navigator(registry, fetcher)


@pytest.fixture
def lister(registry, fetcher):
    return Lister(registry, fetcher)
