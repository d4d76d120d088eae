# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/12 21:38:02
# @Author : Kariko Lin

from .model import (
    IniValue,
    IniSection,
    IniDocument,
    RawDocument,
    DEFAULT_SECTION,
    coerce_value,
    format_value
)
from .codec import parse_ini, parse_ini_strings, stringify_ini
from .parser import IniParser
from .store import IniStore
