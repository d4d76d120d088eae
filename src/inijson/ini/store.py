# -*- encoding: utf-8 -*-
# @File   : store.py
# @Time   : 2026/10/13 01:26:05
# @Author : Kariko Lin

from os import PathLike

from .codec import parse_ini_strings, stringify_ini
from .model import RawDocument, format_value
from .parser import IniParser


class IniStore:
    """A single INI document with simple CRUD access.

    Unlike `parse_ini()`, everything kept here is a string: `parse()` does
    no type guessing, and `set()` turns whatever it gets into text at once:
    `True` as `"true"`, `5` as `"5"`, and `None` as `""` (not `"None"`).
    Pairs that appear before any header live in `[default]`.

    `data` is public. `to_json()` hands out the very same dict, so
    changes made through either side are seen by the other.
    """

    def __init__(self) -> None:
        self.data: RawDocument = {}

    def parse(self, text: str) -> RawDocument:
        """Replace the current document with the one parsed from `text`."""
        self.data = parse_ini_strings(text)
        return self.data

    def get(self, section: str, key: str) -> str | None:
        return self.data.get(section, {}).get(key)

    def set(self, section: str, key: str, value: object) -> None:
        self.data.setdefault(section, {})[key] = format_value(value)

    def delete(self, section: str, key: str | None = None) -> bool:
        """Drop a whole section, or one key of it.

        A section left empty by removing its last key goes away as well.
        Returns whether anything got removed.
        """
        if section not in self.data:
            return False
        if key is None:
            del self.data[section]
            return True
        if key not in self.data[section]:
            return False
        del self.data[section][key]
        if not self.data[section]:
            del self.data[section]
        return True

    def to_json(self) -> RawDocument:
        return self.data

    def stringify(self, *, delimiter: str = ' = ', blank_lines: int = 1) -> str:
        return stringify_ini(
            self.data, delimiter=delimiter, blank_lines=blank_lines)

    def load(
        self, filename: str | PathLike[str], encoding: str | None = None
    ) -> RawDocument:
        """Same as `parse()`, reading from a file instead."""
        self.data = IniParser(filename, encoding, typed=False).read()
        return self.data

    def save(
        self, filename: str | PathLike[str], encoding: str = 'utf-8', *,
        delimiter: str = ' = ',
        blank_lines: int = 1
    ) -> None:
        IniParser(filename, encoding).write(
            self.data, delimiter=delimiter, blank_lines=blank_lines)

    def __repr__(self) -> str:
        return 'IniStore { .sections = %d }' % len(self.data)
