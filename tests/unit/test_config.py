import json

import pytest

from boxborder import Color, ConfigError
from boxborder.config import Settings, load_settings


def test_defaults_without_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    settings = load_settings(environ={})
    assert settings == Settings()


def test_file_then_environment(tmp_path):
    path = tmp_path / "boxborder.json"
    path.write_text(json.dumps({"frames": 9, "precision": 3, "colours": {"brand": "#102030"}}))
    settings = load_settings(path, environ={"BOXBORDER_FRAMES": "4", "OTHER": "x"})
    assert settings.frames == 4
    assert settings.precision == 3
    assert settings.palette().get("brand") == Color(0x10, 0x20, 0x30)


def test_cwd_file_is_picked_up(tmp_path, monkeypatch):
    (tmp_path / "boxborder.json").write_text('{"log_level": "debug"}')
    monkeypatch.chdir(tmp_path)
    assert load_settings(environ={}).log_level == "debug"


def test_missing_explicit_file(tmp_path):
    with pytest.raises(ConfigError):
        load_settings(tmp_path / "absent.json", environ={})


@pytest.mark.parametrize("content", ["{broken", "[]", '{"frames": 1}', '{"precision": "two"}'])
def test_invalid_files(tmp_path, content):
    path = tmp_path / "boxborder.json"
    path.write_text(content)
    with pytest.raises(ConfigError):
        load_settings(path, environ={})


def test_bad_palette_entry():
    settings = Settings(colours={"brand": "not-a-colour"})
    with pytest.raises(ConfigError):
        settings.palette()


def test_unknown_keys_are_ignored(tmp_path):
    path = tmp_path / "boxborder.json"
    path.write_text('{"theme": "dark"}')
    assert load_settings(path, environ={}) == Settings()
