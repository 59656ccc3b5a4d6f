#!/usr/bin/env python3
"""
PACMANCONF ENGINE TESTS - Integration Verification
--------------------------------------------------
Runs the public entry points against the sample configuration in
tests/fixtures and checks the complete resulting model.
"""

import dataclasses
from pathlib import Path

import pytest

import pacmanconf
from pacmanconf import (
    ConfigIOError,
    ConfigReader,
    CyclicIncludeError,
    PacmanConfError,
    ReaderSettings,
)

FIXTURES = Path(__file__).parent / "fixtures"
SAMPLE = str(FIXTURES / "pacman.conf")

REPO_ORDER = (
    "testing", "core", "extra", "community-testing",
    "community", "multilib-testing", "multilib",
)

MIRRORS = (
    "https://ftp.halifax.rwth-aachen.de/archlinux/$repo/os/$arch",
    "rsync://ftp.halifax.rwth-aachen.de/archlinux/$repo/os/$arch",
    "http://mirror.cyberbits.eu/archlinux/$repo/os/$arch",
)


@pytest.fixture(scope="module")
def sample():
    return pacmanconf.parse_file(SAMPLE)


def test_sample_options(sample):
    options = sample.options
    assert options.hold_pkg == ("pacman", "glibc")
    assert options.color is True
    assert options.check_space is True
    assert options.i_love_candy is True
    assert options.disable_sandbox is True
    assert options.verbose_pkg_lists is False
    assert options.download_user == "foo"
    assert options.parallel_downloads == 5
    assert options.architecture == ("auto",)
    assert options.sig_level == ("Required", "DatabaseOptional")
    assert options.local_file_sig_level == ("Optional",)
    assert options.remote_file_sig_level == ()
    assert options.db_path == "/var/lib/pacman/"


def test_sample_repositories(sample):
    assert sample.repo_names == REPO_ORDER
    for repo in sample.repos:
        assert repo.servers == MIRRORS
        assert repo.sig_level == sample.options.sig_level
        assert repo.usage == ()


def test_commented_out_repository_is_absent(sample):
    assert sample.repo("custom") is None


def test_parsing_is_deterministic(sample):
    assert pacmanconf.parse_file(SAMPLE) == sample


def test_config_is_immutable(sample):
    with pytest.raises(dataclasses.FrozenInstanceError):
        sample.repos = ()
    with pytest.raises(dataclasses.FrozenInstanceError):
        sample.options.color = False
    assert isinstance(sample.repos, tuple)
    assert isinstance(sample.repos[0].servers, tuple)


def test_reader_matches_parse_file(sample):
    assert ConfigReader().config_path(SAMPLE).read() == sample


def test_reader_methods_chain():
    reader = ConfigReader()
    assert reader.config_path(SAMPLE).root_dir("/mnt").max_include_depth(3) is reader
    assert reader.settings == ReaderSettings(config_path=SAMPLE, root_dir="/mnt", max_include_depth=3)


def test_reader_root_override():
    config = ConfigReader().config_path(SAMPLE).root_dir("/mnt").read()
    assert config.options.root_dir == "/mnt"
    assert config.options.db_path == "/mnt/var/lib/pacman/"
    assert config.repo_names == REPO_ORDER


def test_default_path_is_used(monkeypatch, tmp_path):
    conf = tmp_path / "pacman.conf"
    conf.write_text("[options]\nColor\n")
    monkeypatch.setattr("pacmanconf.core.engine.DEFAULT_CONFIG_PATH", str(conf))
    assert pacmanconf.parse().options.color is True


def test_nonexistent_path_is_io_error(tmp_path):
    with pytest.raises(ConfigIOError):
        pacmanconf.parse_file(str(tmp_path / "missing.conf"))


def test_error_in_include_aborts_whole_read(tmp_path):
    (tmp_path / "a.conf").write_text("[options]\nColor\n[core]\nInclude = b.conf\n")
    (tmp_path / "b.conf").write_text("Server = x\nInclude = a.conf\n")
    with pytest.raises(CyclicIncludeError):
        pacmanconf.parse_file(str(tmp_path / "a.conf"))


def test_first_error_wins(tmp_path):
    """Errors are reported in file-processing order."""
    (tmp_path / "pacman.conf").write_text("[core]\nInclude = bad.conf\n[broken\n")
    (tmp_path / "bad.conf").write_text("Server = a\n[x\n")
    with pytest.raises(PacmanConfError) as exc:
        pacmanconf.parse_file(str(tmp_path / "pacman.conf"))
    assert exc.value.path.endswith("bad.conf")
    assert exc.value.line_no == 2


def test_expand_renders_text():
    text = ConfigReader().config_path(SAMPLE).expand()
    assert text.startswith("[options]\n")
    assert "[multilib]" in text
    assert text.count("Server = ") == len(REPO_ORDER) * len(MIRRORS)
