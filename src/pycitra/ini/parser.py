# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/10 01:04:45
# @Author : pycitra contributors

"""Plain INI reading and writing, lenient in the same places inih is:

1. Lines starting with `;` or `#` are comments, and so is everything
after a `;` that follows whitespace.
2. Pairs may be delimited with either `=` or `:`, whichever comes first.
3. A malformed line is recorded and skipped, the rest still gets parsed.
4. A repeated key overrides the earlier one. (inih would join both values
with a newline instead.)

There is no multi-line value or `[#include]` support,
as the emulator frontend never writes any.
"""

import logging
from io import StringIO, TextIOBase

import chardet

from ..abstract import FileHandler
from .model import IniClass, IniSection

_log = logging.getLogger(__name__)

_BOM = '\ufeff'


def _strip_inline_comment(line: str) -> str:
    prev = ''
    for idx, ch in enumerate(line):
        if ch == ';' and prev.isspace():
            return line[:idx].rstrip()
        prev = ch
    return line


def _find_delimiter(line: str) -> int:
    found = [i for i in (line.find('='), line.find(':')) if i >= 0]
    return min(found) if found else -1


class IniParser(FileHandler[IniClass]):
    def __init__(self, filename: str, encoding: str | None = None):
        super().__init__(filename)
        self._codec = encoding or 'utf-8'

    @staticmethod
    def readstream(buf: TextIOBase, ins: IniClass | None = None) -> IniClass:
        """Read a decoded char stream.

        Just call `self.read()` if there's nothing special.
        """
        if ins is None:
            ins = IniClass()
        this_sect: IniSection = ins.header
        lineno = 0
        while i := buf.readline():
            lineno += 1
            if lineno == 1 and i.startswith(_BOM):
                i = i[1:]
            line = i.strip()
            if not line or line[0] in ';#':
                continue
            line = _strip_inline_comment(line)
            if line[0] == '[':
                end = line.find(']')
                if end < 0:
                    ins.errors.append(lineno)
                    continue
                this_sect = ins.setdefault(line[1:end].strip())
                continue
            delim = _find_delimiter(line)
            key = line[:delim].strip() if delim > 0 else ''
            if not key:
                ins.errors.append(lineno)
                continue
            this_sect[key] = line[delim + 1:].strip()
        return ins

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8'}

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
        except (UnicodeDecodeError, LookupError):
            try:
                buf = raw.decode('gbk')
            except UnicodeDecodeError:
                # never reject a file over a few odd bytes.
                buf = raw.decode('utf-8', errors='replace')
        _log.warning('%s is not %s text, decoded with fallbacks.',
                     filename, 'utf-8')
        return StringIO(buf)

    def read(self) -> IniClass:
        """Read the file this `IniParser` is bound to.

        Raises `OSError` when the file cannot be opened.
        Undecodable bytes never fail the read.
        """
        try:
            # when the encoding got wrong,
            # just `UnicodeDecodeError` and fallback to `chardet`.
            with open(self._fn, 'r', encoding=self._codec) as fp:
                return self.readstream(fp)
        except UnicodeDecodeError:
            return self.readstream(self._decode_file(self._fn))

    @staticmethod
    def __output_section(
        section: IniSection, delimiter: str = '=', with_decl: bool = True
    ) -> str:
        ret = [f'[{section.name}]'] if with_decl else []
        for k, v in section.items():
            ret.append(f'{k}{delimiter}{v}')
        return '\n'.join(ret)

    def write(
        self, instance: IniClass, *,
        blank_lines: int = 1,
        delimiter: str = '='
    ) -> None:
        """Save to *one* INI file.

        Comments and malformed lines read before are not kept.
        """
        buffers = []
        if instance.header:
            buffers.append(self.__output_section(
                instance.header, delimiter, with_decl=False))
        buffers.extend(
            self.__output_section(sect, delimiter)
            for sect in instance.values())
        with open(self._fn, 'w', encoding=self._codec) as fp:
            for i in buffers:
                fp.write(i)
                fp.write('\n' * (blank_lines + 1))

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f"({self._codec})"
