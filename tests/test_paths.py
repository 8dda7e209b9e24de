from pathlib import Path

import pytest

from pyinifile import paths


def test_config_file_under_user_config_dir(monkeypatch, tmp_path: Path):
    monkeypatch.setattr(paths, "_uc", lambda appname: str(tmp_path / appname))
    assert paths.config_file("player") == (tmp_path / "pyinifile" / "player.conf").resolve()
    assert paths.config_file("player", "mpv", suffix=".ini") == (
        tmp_path / "mpv" / "player.ini"
    ).resolve()


def test_app_name_env_override(monkeypatch, tmp_path: Path):
    monkeypatch.setattr(paths, "_uc", lambda appname: str(tmp_path / appname))
    monkeypatch.setenv("PYINIFILE_APP_NAME", "custom")
    assert paths.user_config_dir() == (tmp_path / "custom").resolve()


@pytest.mark.parametrize("identifier", ["", "../escape", "a/b"])
def test_config_file_rejects_paths(identifier):
    with pytest.raises(ValueError):
        paths.config_file(identifier)


def test_empty_app_name_env_is_ignored(monkeypatch, tmp_path: Path):
    monkeypatch.setattr(paths, "_uc", lambda appname: str(tmp_path / appname))
    monkeypatch.setenv(paths.ENV_APP_NAME, "")
    assert paths.user_config_dir("mpv") == (tmp_path / "mpv").resolve()
