# -*- encoding: utf-8 -*-
# @File   : fileutil.py
# @Time   : 2024/10/12 20:48:19
# @Author : pycitra contributors

"""Where the user's files live, and the few file operations the loader needs.

Lookup order of the user directory:
1. `$PYCITRA_USER_DIR`, if set;
2. `./user`, if it exists (portable install);
3. the platform default, i.e. `%APPDATA%/Citra` on Windows,
or the XDG base directories elsewhere.
"""

import os
from os.path import dirname, expanduser, isdir, join

USER_DIR_ENV = 'PYCITRA_USER_DIR'
PORTABLE_DIR = 'user'
EMU_DATA_DIR = 'citra-emu'
WINDOWS_DATA_DIR = 'Citra'
CONFIG_DIR = 'config'


def _explicit_user_dir() -> str | None:
    if env := os.environ.get(USER_DIR_ENV):
        return env
    portable = join(os.getcwd(), PORTABLE_DIR)
    if isdir(portable):
        return portable
    return None


def get_user_path() -> str:
    """Directory holding the config files, always ending with a separator."""
    if (root := _explicit_user_dir()) is not None:
        return join(root, CONFIG_DIR, '')
    if os.name == 'nt':
        appdata = os.environ.get('APPDATA') or expanduser('~')
        return join(appdata, WINDOWS_DATA_DIR, CONFIG_DIR, '')
    base = os.environ.get('XDG_CONFIG_HOME') or join(
        expanduser('~'), '.config')
    return join(base, EMU_DATA_DIR, '')


def create_full_path(path: str) -> None:
    """Create every missing parent directory of `path`.

    A `path` ending with a separator is a directory itself
    and gets created too. Raises `OSError`.
    """
    if parent := dirname(path):
        os.makedirs(parent, exist_ok=True)


def write_string_to_file(
    text: str, filename: str, encoding: str = 'utf-8'
) -> int:
    """Write `text` as is (no newline translation). Raises `OSError`."""
    with open(filename, 'w', encoding=encoding, newline='') as fp:
        return fp.write(text)
