# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/12 21:31:46
# @Author : Kariko Lin

import logging

from .ini import IniParser, IniStore, parse_ini, parse_ini_strings, stringify_ini
from .formats import (
    InvalidDocument,
    JsonDocParser,
    YamlDocParser,
    from_json_text,
    from_yaml_text,
    to_json_text,
    to_yaml_text,
)

__version__ = '0.1.0'

__all__ = [
    'parse_ini', 'parse_ini_strings', 'stringify_ini',
    'IniStore', 'IniParser',
    'JsonDocParser', 'YamlDocParser', 'InvalidDocument',
    'to_json_text', 'from_json_text', 'to_yaml_text', 'from_yaml_text'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
