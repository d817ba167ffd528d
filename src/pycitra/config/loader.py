# -*- encoding: utf-8 -*-
# @File   : loader.py
# @Time   : 2024/10/12 23:10:02
# @Author : pycitra contributors

import logging
from enum import Enum
from os.path import join

from .. import settings
from ..fileutil import (
    create_full_path,
    get_user_path,
    write_string_to_file
)
from ..ini import IniReader
from ..settings import Values
from .default_ini import SDL2_CONFIG_FILE
from .schema import populate

_log = logging.getLogger(__name__)

CONFIG_FILENAME = 'sdl2-config.ini'


class LoadAttempt(int, Enum):
    INITIAL = 0
    BOOTSTRAPPED = 1


class Config:
    """Frontend configuration bound to one INI file.

    Creating a `Config` only parses the file; call `reload()` to
    (re)write the settings. A file that can't be read is replaced with
    the default one, at most once per `reload()`.

    Not thread-safe: the reader is swapped without any locking,
    so keep every `reload()` on one thread.
    """

    def __init__(
        self,
        values: Values | None = None,
        location: str | None = None,
        encoding: str | None = None,
    ) -> None:
        self._location = location or join(
            get_user_path(), CONFIG_FILENAME)
        self._values = settings.values if values is None else values
        self._codec = encoding
        self._reader = IniReader(self._location, self._codec)

    @property
    def location(self) -> str:
        return self._location

    @property
    def reader(self) -> IniReader:
        return self._reader

    @property
    def values(self) -> Values:
        return self._values

    def _bootstrap(self, default_contents: str) -> bool:
        try:
            create_full_path(self._location)
            write_string_to_file(default_contents, self._location)
        except OSError as e:
            _log.error('Unable to write %s: %s', self._location, e)
            return False
        self._reader = IniReader(self._location, self._codec)  # reopen
        return True

    def _load_ini(self, default_contents: str) -> bool:
        """Make sure the reader is valid, rewriting the file from
        `default_contents` once if it isn't.
        """
        for attempt in LoadAttempt:
            if self._reader.valid:
                _log.info('Successfully loaded %s', self._location)
                return True
            if attempt is LoadAttempt.BOOTSTRAPPED:
                break
            _log.warning('Failed to load %s. Creating file from defaults...',
                         self._location)
            if not self._bootstrap(default_contents):
                break
        _log.error('Failed.')
        return False

    def reload(self, values: Values | None = None) -> bool:
        """Parse the file again and write every known field into `values`
        (the bound ones by default). Returns `False` if no readable file
        could be obtained, in which case `values` is left untouched.
        """
        self._reader = IniReader(self._location, self._codec)
        if not self._load_ini(SDL2_CONFIG_FILE):
            return False
        populate(self._reader, self._values if values is None else values)
        return True
