# -*- encoding: utf-8 -*-
# @File   : param.py
# @Time   : 2024/10/13 15:10:27
# @Author : pycitra contributors

"""`ParamPackage`, the string form every input device is configured with.

    engine:keyboard,code:4

`$0`, `$1` and `$2` stand for `:`, `,` and `$` inside keys and values,
which is how a whole package nests into another one's value.
"""

import logging
from collections.abc import MutableMapping
from typing import Iterator, Mapping

from .consts import (
    ESCAPE_CHARACTER,
    ESCAPE_CHARACTER_ESCAPE,
    KEY_VALUE_SEPARATOR,
    KEY_VALUE_SEPARATOR_ESCAPE,
    PARAM_SEPARATOR,
    PARAM_SEPARATOR_ESCAPE
)

_log = logging.getLogger(__name__)


def _escape(part: str) -> str:
    part = part.replace(ESCAPE_CHARACTER, ESCAPE_CHARACTER_ESCAPE)
    part = part.replace(PARAM_SEPARATOR, PARAM_SEPARATOR_ESCAPE)
    return part.replace(KEY_VALUE_SEPARATOR, KEY_VALUE_SEPARATOR_ESCAPE)


def _unescape(part: str) -> str:
    part = part.replace(KEY_VALUE_SEPARATOR_ESCAPE, KEY_VALUE_SEPARATOR)
    part = part.replace(PARAM_SEPARATOR_ESCAPE, PARAM_SEPARATOR)
    return part.replace(ESCAPE_CHARACTER_ESCAPE, ESCAPE_CHARACTER)


class ParamPackage(MutableMapping[str, str]):
    def __init__(self, pairs: Mapping[str, str] | None = None) -> None:
        self.__raw: dict[str, str] = {}
        if pairs:
            self.update(pairs)

    @classmethod
    def deserialize(cls, serialized: str) -> 'ParamPackage':
        ret = cls()
        if not serialized:
            return ret
        for pair in serialized.split(PARAM_SEPARATOR):
            key_value = pair.split(KEY_VALUE_SEPARATOR)
            if len(key_value) != 2:
                _log.error('invalid key pair %r in %r', pair, serialized)
                continue
            ret[_unescape(key_value[0])] = _unescape(key_value[1])
        return ret

    def serialize(self) -> str:
        """Keys are written sorted, so equal packages encode equally."""
        return PARAM_SEPARATOR.join(
            _escape(k) + KEY_VALUE_SEPARATOR + _escape(self.__raw[k])
            for k in sorted(self.__raw))

    def __getitem__(self, key: str) -> str:
        return self.__raw[key]

    def __setitem__(self, key: str, value: str | int | float) -> None:
        if isinstance(value, float):
            # std::to_string() flavour
            value = f'{value:.6f}'
        self.__raw[key] = str(value)

    def __delitem__(self, key: str) -> None:
        del self.__raw[key]

    def __len__(self) -> int:
        return len(self.__raw)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def get_int(self, key: str, default: int = 0) -> int:
        try:
            return int(self.__raw[key])
        except KeyError:
            return default
        except ValueError:
            _log.error('failed to convert %r to int', self.__raw[key])
            return default

    def get_float(self, key: str, default: float = 0.0) -> float:
        try:
            return float(self.__raw[key])
        except KeyError:
            return default
        except ValueError:
            _log.error('failed to convert %r to float', self.__raw[key])
            return default

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return f'ParamPackage({self.__raw!r})'
