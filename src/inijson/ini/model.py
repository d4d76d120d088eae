# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/12 21:40:18
# @Author : Kariko Lin

"""
INI document shapes, plus the value coercion rules shared by the codec
and the store.

A document is a plain ordered `dict`: section names map to section dicts,
and section dicts map keys to values. Keys met before any `[section]`
header are kept as top-level scalars by `parse_ini()`, so a document
may carry both.
"""

import re
from collections.abc import Mapping
from typing import TypeAlias

IniValue: TypeAlias = bool | int | float | str | None
IniSection: TypeAlias = dict[str, IniValue]
IniDocument: TypeAlias = dict[str, IniSection | IniValue]

# string-only flavour kept by `IniStore`.
RawSection: TypeAlias = dict[str, str]
RawDocument: TypeAlias = dict[str, RawSection]

DEFAULT_SECTION = 'default'

_INTEGER = re.compile(r'[+-]?[0-9]+')
_DECIMAL = re.compile(r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')


def coerce_value(raw: str) -> bool | int | float | str:
    """Guess the type of a trimmed INI value.

    `true`/`false` (any case) become booleans, decimal literals become
    `int` (no fraction, no exponent) or `float`, the rest stays as is.
    """
    lowered = raw.lower()
    if lowered == 'true':
        return True
    if lowered == 'false':
        return False
    if _INTEGER.fullmatch(raw):
        return int(raw)
    if _DECIMAL.fullmatch(raw):
        return float(raw)
    return raw


def format_value(value: object) -> str:
    """Render one value the way it is written after `key = `."""
    # bool before int, as bool is an int subclass.
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if value is None:
        return ''
    # integral floats drop `.0`; from 1e21 on, keep the exponent form.
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)


def is_section(value: object) -> bool:
    return isinstance(value, Mapping)
