# -*- encoding: utf-8 -*-
# @File   : codec.py
# @Time   : 2026/10/12 22:03:51
# @Author : Kariko Lin

"""Plain `str <-> dict` INI conversion.

The reader is permissive on purpose: blank lines, `;`/`#` comment lines
and anything that is neither a header nor a `key = value` pair are
dropped without complaint. Comments are whole-line only, so

    ```ini
    key = value ; not a comment
    ```

keeps `value ; not a comment` as its value.
"""

import logging
import re
from collections.abc import Iterator, Mapping
from typing import NamedTuple
from warnings import warn

from .model import (
    DEFAULT_SECTION,
    IniDocument,
    IniSection,
    RawDocument,
    coerce_value,
    format_value,
    is_section,
)

__all__ = [
    'SectionHeader', 'KeyValue', 'tokenize',
    'parse_ini', 'parse_ini_strings', 'stringify_ini'
]

SECTION_PATTERN = re.compile(r'^\s*\[([^\]]*)\]\s*$')
PAIR_PATTERN = re.compile(r'^\s*([^=]+?)\s*=\s*(.*)$')
COMMENT_PREFIXES = (';', '#')


class SectionHeader(NamedTuple):
    lineno: int
    name: str


class KeyValue(NamedTuple):
    lineno: int
    key: str
    value: str


def tokenize(text: str) -> Iterator[SectionHeader | KeyValue]:
    """Yield headers and pairs, line by line. Values are trimmed strings."""
    for lineno, line in enumerate(text.split('\n'), 1):
        line = line.strip()
        if not line or line.startswith(COMMENT_PREFIXES):
            continue
        if match := SECTION_PATTERN.match(line):
            yield SectionHeader(lineno, match[1].strip())
        elif match := PAIR_PATTERN.match(line):
            yield KeyValue(lineno, match[1].strip(), match[2].strip())
        else:
            logging.debug(f'INI line {lineno} dropped: {line!r}')


def parse_ini(text: str) -> IniDocument:
    """Parse INI text, guessing value types.

    Pairs before the first header stay top-level entries of the result.
    A header met twice reopens the same section, later keys win.
    """
    ret: IniDocument = {}
    this_sect: dict = ret
    for token in tokenize(text):
        match token:
            case SectionHeader(name=name):
                if not is_section(ret.get(name)):
                    ret[name] = {}
                this_sect = ret[name]
            case KeyValue(key=key, value=value):
                this_sect[key] = coerce_value(value)
    return ret


def parse_ini_strings(
    text: str, default_section: str = DEFAULT_SECTION
) -> RawDocument:
    """Parse INI text, keeping every value as a trimmed string.

    Pairs before the first header are grouped under `default_section`,
    which is dropped again if nothing landed in it.
    """
    ret: RawDocument = {}
    current = default_section
    for token in tokenize(text):
        match token:
            case SectionHeader(name=name):
                current = name
                ret.setdefault(name, {})
            case KeyValue(key=key, value=value):
                ret.setdefault(current, {})[key] = value
    if default_section in ret and not ret[default_section]:
        del ret[default_section]
    return ret


def _section_lines(
    name: str, pairs: Mapping[str, object], delimiter: str
) -> list[str]:
    ret = []
    for k, v in pairs.items():
        if is_section(v) or isinstance(v, (list, tuple, set)):
            warn(f'[{name}] "{k}" holds a nested {type(v).__name__}, '
                 'which INI cannot express. Skipped.')
            continue
        ret.append(f'{k}{delimiter}{format_value(v)}')
    return ret


def stringify_ini(
    doc: Mapping[str, IniSection | object], *,
    delimiter: str = ' = ',
    blank_lines: int = 1
) -> str:
    """Serialize a document back to INI text.

    Top-level scalars come first, without a header. Sections follow in
    their stored order; those left without any pair are not written.
    The result carries no trailing newline.
    """
    header = {k: v for k, v in doc.items() if not is_section(v)}
    blocks: list[str] = []
    if lines := _section_lines('', header, delimiter):
        blocks.append('\n'.join(lines))
    for name, pairs in doc.items():
        if not is_section(pairs):
            continue
        if lines := _section_lines(name, pairs, delimiter):
            blocks.append('\n'.join([f'[{name}]', *lines]))
    return ('\n' * (blank_lines + 1)).join(blocks).rstrip()
