"""Tests for the built-in kind renderers and listers."""

import pytest

from vsphere_fs.kinds import (
    cluster,
    datacenter,
    datastore,
    default_registry,
    folder,
    host,
    network,
    resource_pool,
    vm,
)
from vsphere_fs.types import ABSENT, Entity, EntityKind
from vsphere_fs.utils import PLACEHOLDER, decimal_size, scaled, text


def entity_of(kind):
    return Entity(kind=kind, moref="obj-1")


class TestRenderersWithAbsentValues:
    """Every renderer copes with all of its properties ABSENT."""

    @pytest.mark.parametrize("kind", [kind.value for kind in EntityKind])
    def test_all_absent(self, kind):
        descriptor = default_registry().descriptor(kind)
        values = {path: ABSENT for path in descriptor.required_properties}

        rendered = descriptor.render(entity_of(kind), values)

        assert isinstance(rendered, str)
        assert rendered.startswith("(")

    @pytest.mark.parametrize("kind", [kind.value for kind in EntityKind])
    def test_empty_values(self, kind):
        """Renderers never index missing keys."""
        descriptor = default_registry().descriptor(kind)
        assert isinstance(descriptor.render(entity_of(kind), {}), str)


class TestHostRenderer:
    """Tests for the HostSystem summary line."""

    def values(self, **overrides):
        values = {
            "name": "esx01",
            "summary.hardware.memorySize": 137438953472,
            "summary.hardware.cpuModel": "AMD EPYC 7313",
            "summary.hardware.cpuMhz": 3000,
            "summary.hardware.numCpuPkgs": 1,
            "summary.hardware.numCpuCores": 16,
            "summary.hardware.numCpuThreads": 32,
        }
        values.update(overrides)
        return values

    def test_full_line(self):
        line = host.render(entity_of("HostSystem"), self.values())
        assert line == "(host): cpu 1*16*3.00 GHz, memory 137.44 GB"

    def test_absent_cpu_mhz(self):
        """Only the frequency field turns into the placeholder."""
        line = host.render(entity_of("HostSystem"), self.values(**{"summary.hardware.cpuMhz": ABSENT}))
        assert line == "(host): cpu 1*16*- GHz, memory 137.44 GB"

    def test_all_absent(self):
        line = host.render(entity_of("HostSystem"), {path: ABSENT for path in host.PROPERTIES})
        assert line == "(host): cpu -*-*- GHz, memory - GB"

    def test_properties(self):
        assert host.PROPERTIES[0] == "name"
        assert len(host.PROPERTIES) == 7


class TestOtherRenderers:
    def test_folder(self):
        assert folder.render(entity_of("Folder"), {"name": "vm"}) == "(folder)"

    def test_datacenter(self):
        line = datacenter.render(entity_of("Datacenter"), {"overallStatus": "yellow"})
        assert line == "(datacenter): status yellow"

    def test_cluster(self):
        values = {
            "summary.numHosts": 3,
            "summary.totalCpu": 86400,
            "summary.totalMemory": 412316860416,
        }
        line = cluster.render(entity_of("ClusterComputeResource"), values)
        assert line == "(cluster): hosts 3, cpu 86.40 GHz, memory 412.32 GB"

    def test_resource_pool(self):
        line = resource_pool.render(entity_of("ResourcePool"), {"runtime.overallStatus": "red"})
        assert line == "(resource pool): status red"

    def test_vm(self):
        values = {
            "runtime.powerState": "suspended",
            "summary.config.numCpu": 1,
            "summary.config.memorySizeMB": 2048,
            "guest.ipAddress": ABSENT,
        }
        assert vm.render(entity_of("VirtualMachine"), values) == "(vm): suspended, 1 vCPU, 2048 MB, -"

    def test_datastore(self):
        values = {
            "summary.type": "NFS",
            "summary.capacity": 500000000000,
            "summary.freeSpace": 125000000000,
        }
        line = datastore.render(entity_of("Datastore"), values)
        assert line == "(datastore): NFS, 125.00 GB free of 500.00 GB"

    def test_network_states(self):
        kind = entity_of("Network")
        assert network.render(kind, {"summary.accessible": True}) == "(network): accessible"
        assert network.render(kind, {"summary.accessible": False}) == "(network): inaccessible"
        assert network.render(kind, {"summary.accessible": ABSENT}) == "(network): -"


class TestFormatting:
    """Tests for ABSENT-safe formatting helpers."""

    def test_text(self):
        assert text("green") == "green"
        assert text(0) == "0"
        assert text(ABSENT) == PLACEHOLDER
        assert text("") == PLACEHOLDER

    def test_scaled(self):
        assert scaled(2400, 1000) == "2.40"
        assert scaled(ABSENT, 1000) == PLACEHOLDER
        assert scaled("fast", 1000) == PLACEHOLDER
        assert scaled(True, 1000) == PLACEHOLDER

    def test_decimal_size(self):
        assert decimal_size(999) == "999.00 B"
        assert decimal_size(1_500_000) == "1.50 MB"
        assert decimal_size(2_000_000_000_000) == "2.00 TB"
        assert decimal_size(ABSENT) == PLACEHOLDER


class TestNamedReferences:
    """Tests for fixed-name reference children."""

    @pytest.mark.asyncio
    async def test_missing_folder_left_out(self, session, fetcher):
        session.update("datacenter-2", networkFolder=None)

        children = await datacenter.ROOT_FOLDERS(session.entity("datacenter-2"), fetcher)

        assert list(children) == ["vm", "host", "datastore"]
