from pathlib import Path

import pytest
from ruamel.yaml import YAML

from pacmanconf.cli.main import main

SAMPLE = str(Path(__file__).parent / "fixtures" / "pacman.conf")


def test_show(capsys):
    assert main(["show", "-c", SAMPLE]) == 0
    out = capsys.readouterr().out
    assert "hold_pkg" in out
    assert "multilib-testing" in out
    assert "core" in out


def test_expand_is_plain_when_piped(capsys):
    assert main(["expand", "--config", SAMPLE]) == 0
    out = capsys.readouterr().out
    assert out.startswith("[options]\n")
    assert "DownloadUser = foo" in out


def test_export_yaml(capsys):
    assert main(["export", "-c", SAMPLE, "--root", "/mnt"]) == 0
    data = YAML(typ='safe').load(capsys.readouterr().out)
    assert data["options"]["RootDir"] == "/mnt"
    assert "multilib" in data["repos"]


def test_missing_file_exits_nonzero(capsys, tmp_path):
    assert main(["show", "-c", str(tmp_path / "missing.conf")]) == 1
    captured = capsys.readouterr()
    assert "Error" in captured.err
    assert captured.out == ""


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage: pacmanconf" in capsys.readouterr().out


def test_version(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--version"])
    assert exc.value.code == 0
    assert "pacmanconf v" in capsys.readouterr().out
