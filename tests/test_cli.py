"""Tests for the vsphere-fs command-line interface."""

import json

import pytest
from typer.testing import CliRunner

from vsphere_fs.cli import app

runner = CliRunner()


@pytest.fixture
def snapshot(tmp_path, inventory, monkeypatch):
    for name in ("VSPHERE_HOST", "VSPHERE_USER", "VSPHERE_PASSWORD", "VSPHERE_FS_SNAPSHOT"):
        monkeypatch.delenv(name, raising=False)
    path = tmp_path / "inventory.json"
    path.write_text(json.dumps(inventory))
    return str(path)


class TestHelp:
    """Tests for CLI help output."""

    def test_help(self):
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "ls" in result.stdout
        assert "show" in result.stdout
        assert "kinds" in result.stdout

    def test_global_options(self):
        result = runner.invoke(app, ["--help"])

        assert "--snapshot" in result.stdout
        assert "--insecure" in result.stdout


class TestLs:
    """Tests for the ls command."""

    def test_ls_root(self, snapshot):
        result = runner.invoke(app, ["--snapshot", snapshot, "ls"])

        assert result.exit_code == 0
        assert "dc1" in result.stdout
        assert "status green" in result.stdout

    def test_ls_hosts(self, snapshot):
        result = runner.invoke(app, ["--snapshot", snapshot, "ls", "dc1/host/cl1/hosts"])

        assert result.exit_code == 0
        assert "esx01" in result.stdout
        assert "2*16*2.40 GHz" in result.stdout
        assert "1*8*- GHz" in result.stdout

    def test_ls_groups(self, snapshot):
        result = runner.invoke(app, ["--snapshot", snapshot, "ls", "dc1/host/cl1/hosts/esx01"])

        assert result.exit_code == 0
        assert "vms/" in result.stdout
        assert "datastores/" in result.stdout

    def test_ls_empty_group(self, snapshot):
        result = runner.invoke(
            app, ["--snapshot", snapshot, "ls", "dc1/host/cl1/hosts/esx02/vms"]
        )

        assert result.exit_code == 0
        assert "is empty" in result.stdout

    def test_missing_segment(self, snapshot):
        result = runner.invoke(app, ["--snapshot", snapshot, "ls", "dc1/nope"])

        assert result.exit_code == 1
        assert "Error" in result.stdout
        assert "'nope' not found under 'dc1'" in result.stdout

    def test_missing_snapshot(self, tmp_path, monkeypatch):
        monkeypatch.delenv("VSPHERE_FS_SNAPSHOT", raising=False)
        result = runner.invoke(app, ["--snapshot", str(tmp_path / "none.json"), "ls"])

        assert result.exit_code == 1
        assert "Snapshot not found" in result.stdout

    def test_no_source(self, monkeypatch):
        for name in ("VSPHERE_HOST", "VSPHERE_FS_SNAPSHOT"):
            monkeypatch.delenv(name, raising=False)
        result = runner.invoke(app, ["ls"])

        assert result.exit_code == 1
        assert "No inventory source configured" in result.stdout


class TestShow:
    """Tests for the show command."""

    def test_show_vm(self, snapshot):
        result = runner.invoke(app, ["--snapshot", snapshot, "show", "dc1/vm/web01"])

        assert result.exit_code == 0
        assert "poweredOn, 2 vCPU, 4096 MB, 10.0.0.5" in result.stdout
        assert "VirtualMachine" in result.stdout

    def test_show_missing(self, snapshot):
        result = runner.invoke(app, ["--snapshot", snapshot, "show", "dc2"])

        assert result.exit_code == 1
        assert "not found under the root" in result.stdout


class TestConfigOption:
    def test_config_file(self, snapshot, tmp_path):
        config = tmp_path / "vsphere-fs.toml"
        config.write_text(f'[snapshot]\npath = "{snapshot}"\n')

        result = runner.invoke(app, ["--config", str(config), "ls", "dc1"])

        assert result.exit_code == 0
        assert "datastore" in result.stdout

    def test_bad_config_file(self, tmp_path):
        config = tmp_path / "bad.toml"
        config.write_text("[fetch]\nretries = 3\n")

        result = runner.invoke(app, ["--config", str(config), "kinds"])

        assert result.exit_code == 1
        assert "Unknown configuration option" in result.stdout


class TestKinds:
    def test_lists_builtin_kinds(self):
        result = runner.invoke(app, ["kinds"])

        assert result.exit_code == 0
        assert "HostSystem" in result.stdout
        assert "vms/, datastores/" in result.stdout
        assert "leaf" in result.stdout
