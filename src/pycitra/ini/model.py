# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/10 00:57:10
# @Author : pycitra contributors

"""
Basically INI Structure, the way inih reads it.

Section names and keys are case-insensitive,
while the first spelling seen is kept for writing back.
"""

from collections.abc import MutableMapping
from typing import Iterator


class IniSection(MutableMapping[str, str]):
    """INI section dict.

    All pairs *should* be `str: str` (even if the value is an empty string),
    but in runtime we wouldn't limit that much.

    Lookups go through lower-cased keys, so `Use_CPU_JIT` and `use_cpu_jit`
    are the same entry.
    """

    def __init__(self, section_name: str, /,
                 pairs: MutableMapping[str, str] | None = None) -> None:
        self._name = section_name
        # lower-cased key -> (original spelling, value)
        self._data: dict[str, tuple[str, str]] = {}
        if pairs:
            self.update(pairs)

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        return self._data[key.lower()][1]

    def __setitem__(self, key: str, value: str) -> None:
        lowered = key.lower()
        # keep the first spelling, just like a user would expect
        # when the file is saved again.
        spelling = self._data[lowered][0] if lowered in self._data else key
        self._data[lowered] = (spelling, value)

    def __delitem__(self, key: str) -> None:
        del self._data[key.lower()]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return (spelling for spelling, _ in self._data.values())

    def __str__(self) -> str:
        return f"[{self._name}]"

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self._data))

    def to_dict(self) -> dict[str, str]:
        return dict(self.items())


class IniClass(MutableMapping[str, IniSection]):
    """INI file representation. Supports the following (comments aside):

        ```ini
        key = val  ; access via self.header, pairs before any section.

        [Section]
        key233 = val666
        other: val114514
        ```

    Malformed lines don't stop the parser,
    their line numbers are collected in `self.errors`.
    """

    def __init__(self) -> None:
        self.__header = IniSection('; PyCitra_Maintained')
        self.__raw: dict[str, IniSection] = {}
        self.errors: list[int] = []

    @property
    def header(self) -> IniSection:
        """Pairs placed on top of the file, not belonging to any section."""
        return self.__header

    def __getitem__(self, key: str) -> IniSection:
        return self.__raw[key.lower()]

    def __setitem__(
        self,
        key: str,
        value: IniSection | MutableMapping[str, str]
    ) -> None:
        # shouldn't keep ptr to external dict in key setting operation.
        self.__raw[key.lower()] = IniSection(key, value)

    def __delitem__(self, key: str) -> None:
        del self.__raw[key.lower()]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self.__raw

    def __len__(self) -> int:
        return len(self.__raw)

    def __iter__(self) -> Iterator[str]:
        return (sect.name for sect in self.__raw.values())

    def setdefault(  # type: ignore[override]
        self, key: str, default: MutableMapping[str, str] | None = None
    ) -> IniSection:
        if key not in self:
            self[key] = default or {}
        return self[key]

    def clear(self) -> None:
        self.__header.clear()
        self.__raw.clear()
        self.errors.clear()
