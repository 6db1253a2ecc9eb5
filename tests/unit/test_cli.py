import os

import pytest
from click.testing import CliRunner

from boxborder.cli.main import cli


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for key in [k for k in os.environ if k.startswith("BOXBORDER_")]:
        monkeypatch.delenv(key)
    return CliRunner()


def test_inspect_reports_uniform_border(runner):
    result = runner.invoke(cli, ["inspect", "all=white 2"])
    assert result.exit_code == 0
    assert "uniform: yes" in result.output
    assert "all=#ffffff 2 solid" in result.output


def test_add_merges(runner):
    result = runner.invoke(cli, ["add", "all=white 2", "all=white 1"])
    assert result.exit_code == 0
    assert "all=#ffffff 3 solid" in result.output


def test_add_reports_not_combinable(runner):
    result = runner.invoke(cli, ["add", "left=red", "start=blue"])
    assert result.exit_code == 1
    assert "Not combinable" in result.output


def test_lerp_lists_frames(runner):
    result = runner.invoke(cli, ["lerp", "all=red", "start=blue 2; end=blue 2", "--frames", "3"])
    assert result.exit_code == 0
    assert "0.00" in result.output
    assert "0.50" in result.output
    assert "1.00" in result.output
    assert "BorderDirectional" in result.output


def test_lerp_frames_come_from_settings(runner, tmp_path):
    (tmp_path / "boxborder.json").write_text('{"frames": 2, "precision": 1}')
    result = runner.invoke(cli, ["lerp", "all=red", "none"])
    assert result.exit_code == 0
    assert "0.0" in result.output
    assert "1.0" in result.output
    assert "0.5" not in result.output


def test_scale(runner):
    result = runner.invoke(cli, ["scale", "all=red 4", "0.5"])
    assert result.exit_code == 0
    assert "all=#ff0000 2 solid" in result.output


def test_invalid_border_is_reported(runner):
    result = runner.invoke(cli, ["inspect", "left=red; start=blue"])
    assert result.exit_code == 1
    assert "Error" in result.output


def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output


def test_add_falls_back_to_reverse_order(runner):
    result = runner.invoke(cli, ["add", "top=red", "start=blue"])
    assert result.exit_code == 0
    assert "BorderDirectional" in result.output
