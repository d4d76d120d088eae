# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/13 00:12:37
# @Author : Kariko Lin

"""Read and write INI documents on disk.

Files are opened with the given encoding first (or the system default
when none is given). If that fails to decode, `chardet` takes a guess.
"""

import logging
from io import StringIO, TextIOBase
from os import PathLike

import chardet

from .codec import parse_ini, parse_ini_strings, stringify_ini
from .model import IniDocument, RawDocument
from ..abstract import FileHandler


class IniParser(FileHandler[IniDocument | RawDocument]):
    def __init__(
        self, filename: str | PathLike[str],
        encoding: str | None = None, *,
        typed: bool = True
    ) -> None:
        """`typed=False` keeps values as strings and groups header-less
        pairs under `[default]`, the same as `IniStore.parse()`."""
        super().__init__(filename, encoding)
        self._typed = typed

    def readstream(self, buf: TextIOBase) -> IniDocument | RawDocument:
        """读取解码好的字符串流。"""
        text = buf.read()
        return parse_ini(text) if self._typed else parse_ini_strings(text)

    @staticmethod
    def _decode_file(filename: str | PathLike[str]) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8', 'confidence': 0.0}
        logging.warning(
            f'{filename}: decoding failed, retrying with {codec["encoding"]}.')

        # fallbacks, latin-1 maps every byte.
        try:
            buf = raw.decode(codec['encoding'])
        except UnicodeDecodeError:
            buf = raw.decode('latin-1')
        return StringIO(buf)

    def read(self) -> IniDocument | RawDocument:
        try:
            # when encoding is None, `open()` would fallback to system default.
            with open(self._fn, 'r', encoding=self._codec) as fp:
                return self.readstream(fp)
        except UnicodeDecodeError:
            return self.readstream(self._decode_file(self._fn))

    def write(
        self, instance: IniDocument | RawDocument, *,
        delimiter: str = ' = ',
        blank_lines: int = 1
    ) -> None:
        text = stringify_ini(
            instance, delimiter=delimiter, blank_lines=blank_lines)
        with open(self._fn, 'w', encoding=self._codec or 'utf-8') as fp:
            if text:
                fp.write(text)
                fp.write('\n')
