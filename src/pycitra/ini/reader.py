# -*- encoding: utf-8 -*-
# @File   : reader.py
# @Time   : 2024/10/12 21:37:04
# @Author : pycitra contributors

"""Read-only, typed view of one INI file.

Coercion follows inih's `INIReader`:
- integers take the longest `strtol(..., 0)` prefix, so `0x10` is 16,
  `010` is 8 and `12abc` is 12;
- reals take the longest `strtod` prefix;
- booleans accept `true/yes/on/1` and `false/no/off/0`, ignoring case.

Anything else yields the caller's default.
"""

import logging
import re

from .model import IniClass
from .parser import IniParser

_log = logging.getLogger(__name__)

_INTEGER = re.compile(r'\s*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)')
_REAL = re.compile(
    r'\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)',
    re.IGNORECASE)
_TRUE = frozenset(('true', 'yes', 'on', '1'))
_FALSE = frozenset(('false', 'no', 'off', '0'))


def parse_integer(text: str) -> int | None:
    if (m := _INTEGER.match(text)) is None:
        return None
    sign, digits = m.groups()
    if digits[:2].lower() == '0x':
        value = int(digits[2:], 16)
    elif digits.startswith('0') and len(digits) > 1:
        value = int(digits[1:], 8)
    else:
        value = int(digits)
    return -value if sign == '-' else value


def parse_real(text: str) -> float | None:
    if (m := _REAL.match(text)) is None:
        return None
    return float(m.group())


def parse_boolean(text: str) -> bool | None:
    lowered = text.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    return None


class IniReader:
    """Parses `filename` once, on construction. Never raises.

    `parse_error` is 0 on success, -1 if the file couldn't be opened,
    otherwise the line number of the first malformed line.
    Only -1 makes the reader invalid; malformed lines are skipped.
    """

    def __init__(self, filename: str, encoding: str | None = None) -> None:
        self._fn = filename
        try:
            self._ini = IniParser(filename, encoding).read()
        except OSError as e:
            _log.debug('Unable to read %s: %s', filename, e)
            self._ini = IniClass()
            self._parse_error = -1
            return
        self._parse_error = self._ini.errors[0] if self._ini.errors else 0
        if self._ini.errors:
            _log.warning('%s: ignored malformed line(s) %s',
                         filename, ', '.join(map(str, self._ini.errors)))

    @property
    def filename(self) -> str:
        return self._fn

    @property
    def parse_error(self) -> int:
        return self._parse_error

    @property
    def valid(self) -> bool:
        return self._parse_error >= 0

    def has_value(self, section: str, key: str) -> bool:
        return section in self._ini and key in self._ini[section]

    def get(self, section: str, key: str, default=None):
        """Raw string value. Present-but-empty values are returned as is."""
        if not self.has_value(section, key):
            return default
        return self._ini[section][key]

    def get_integer(self, section: str, key: str, default=None):
        raw = self.get(section, key)
        value = None if raw is None else parse_integer(raw)
        return default if value is None else value

    def get_real(self, section: str, key: str, default=None):
        raw = self.get(section, key)
        value = None if raw is None else parse_real(raw)
        return default if value is None else value

    def get_boolean(self, section: str, key: str, default=None):
        raw = self.get(section, key)
        value = None if raw is None else parse_boolean(raw)
        return default if value is None else value

    def __repr__(self) -> str:
        return f'<IniReader {self._fn!r} parse_error={self._parse_error}>'
