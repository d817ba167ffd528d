import os

from pycitra.fileutil import (
    create_full_path,
    get_user_path,
    write_string_to_file
)


def test_env_override(tmp_path, monkeypatch):
    monkeypatch.setenv('PYCITRA_USER_DIR', str(tmp_path))
    assert get_user_path() == os.path.join(str(tmp_path), 'config', '')


def test_portable_user_dir(tmp_path, monkeypatch):
    monkeypatch.delenv('PYCITRA_USER_DIR', raising=False)
    (tmp_path / 'user').mkdir()
    monkeypatch.chdir(tmp_path)
    assert get_user_path() == os.path.join(
        os.getcwd(), 'user', 'config', '')


def test_xdg_config_home(tmp_path, monkeypatch):
    if os.name == 'nt':
        return
    monkeypatch.delenv('PYCITRA_USER_DIR', raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv('XDG_CONFIG_HOME', str(tmp_path / 'xdg'))
    assert get_user_path() == os.path.join(
        str(tmp_path), 'xdg', 'citra-emu', '')


def test_create_full_path(tmp_path):
    target = tmp_path / 'a' / 'b' / 'file.ini'
    create_full_path(str(target))
    assert target.parent.is_dir()
    assert not target.exists()
    create_full_path(os.path.join(str(tmp_path), 'c', 'd', ''))
    assert (tmp_path / 'c' / 'd').is_dir()


def test_write_string_keeps_newlines(tmp_path):
    target = tmp_path / 'f.ini'
    assert write_string_to_file('a\nb\n', str(target)) == 4
    assert target.read_bytes() == b'a\nb\n'
