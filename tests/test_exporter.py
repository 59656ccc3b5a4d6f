from pathlib import Path

import pytest
from ruamel.yaml import YAML

import pacmanconf
from pacmanconf.core.models import Config, Options, Repository
from pacmanconf.parsing.exporter import ConfigExporter

SAMPLE = str(Path(__file__).parent / "fixtures" / "pacman.conf")


@pytest.fixture
def exporter():
    return ConfigExporter()


def test_to_ini_layout(exporter):
    config = Config(
        options=Options(color=True, hold_pkg=("pacman", "glibc"), cache_dir=("/c/",)),
        repos=(Repository(name="core", servers=("http://a", "http://b"), usage=("All",)),),
    )
    text = exporter.to_ini(config)
    lines = text.splitlines()

    assert lines[0] == "[options]"
    assert "HoldPkg = pacman glibc" in lines
    assert "Color" in lines
    assert "CheckSpace" not in lines
    assert "XferCommand = " not in text
    assert text.endswith("[core]\nServer = http://a\nServer = http://b\nUsage = All\n")


def test_to_ini_reparses_to_equal_config(exporter, tmp_path):
    """
    IDEMPOTENCY TEST: the expanded text of the sample describes the
    same configuration as the original Include tree.
    """
    original = pacmanconf.parse_file(SAMPLE)
    flat = tmp_path / "flat.conf"
    flat.write_text(exporter.to_ini(original))

    assert pacmanconf.parse_file(str(flat)) == original


def test_to_ini_reparses_rebased_config(exporter, tmp_path):
    original = pacmanconf.ConfigReader().config_path(SAMPLE).root_dir("/mnt").read()
    flat = tmp_path / "flat.conf"
    flat.write_text(exporter.to_ini(original))

    assert pacmanconf.parse_file(str(flat)) == original


def test_to_ini_reparses_empty_repository(exporter, tmp_path):
    original = Config(
        options=Options(cache_dir=("/var/cache/pacman/pkg/",)),
        repos=(Repository(name="local"), Repository(name="core", servers=("http://a",))),
    )
    flat = tmp_path / "flat.conf"
    flat.write_text(exporter.to_ini(original))

    assert "[local]\n\n[core]" in flat.read_text()
    assert pacmanconf.parse_file(str(flat)) == original


def test_to_yaml_loads_back(exporter):
    config = pacmanconf.parse_file(SAMPLE)
    data = YAML(typ='safe').load(exporter.to_yaml(config))

    assert list(data["repos"]) == list(config.repo_names)
    assert data["options"]["HoldPkg"] == ["pacman", "glibc"]
    assert data["options"]["Color"] is True
    assert data["options"]["ParallelDownloads"] == 5
    assert data["repos"]["core"]["Server"] == list(config.repo("core").servers)
    assert data["repos"]["core"]["SigLevel"] == ["Required", "DatabaseOptional"]


def test_to_mapping_uses_pacman_names(exporter):
    mapping = exporter.to_mapping(Config())
    assert mapping["options"]["DBPath"] == "/var/lib/pacman/"
    assert mapping["options"]["ILoveCandy"] is False
    assert mapping["repos"] == {}
