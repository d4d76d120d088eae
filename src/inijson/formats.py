# -*- encoding: utf-8 -*-
# @File   : formats.py
# @Time   : 2026/10/14 19:47:22
# @Author : Kariko Lin

"""JSON and YAML views of an INI document.

Both map onto the document 1:1: a mapping value is a section,
anything else is a header-less pair. Nothing deeper than that.
"""

import json
from os import PathLike

import yaml

from .abstract import FileHandler
from .ini.model import IniDocument, is_section

_SCALARS = (str, int, float, bool, type(None))


class InvalidDocument(ValueError):
    """Raised when a JSON/YAML payload doesn't fit into an INI document."""
    pass


def _check_document(src: object) -> IniDocument:
    if not isinstance(src, dict):
        raise InvalidDocument(
            f'top level must be a mapping, got {type(src).__name__}.')
    for name, sect in src.items():
        if isinstance(sect, _SCALARS):
            continue
        if not is_section(sect):
            raise InvalidDocument(
                f'"{name}" is a {type(sect).__name__}, '
                'neither a section nor a scalar.')
        for k, v in sect.items():
            if not isinstance(v, _SCALARS):
                raise InvalidDocument(
                    f'[{name}] "{k}" is a {type(v).__name__}, '
                    'INI sections cannot nest.')
    return src


def to_json_text(doc: IniDocument, indent: int | None = 2) -> str:
    return json.dumps(doc, ensure_ascii=False, indent=indent)


def from_json_text(text: str) -> IniDocument:
    return _check_document(json.loads(text))


def to_yaml_text(doc: IniDocument) -> str:
    return yaml.safe_dump(
        doc, allow_unicode=True, sort_keys=False, default_flow_style=False)


def from_yaml_text(text: str) -> IniDocument:
    src = yaml.safe_load(text)
    # an empty stream loads as None.
    return _check_document({} if src is None else src)


class JsonDocParser(FileHandler[IniDocument]):
    def __init__(
        self, filename: str | PathLike[str], encoding: str = 'utf-8'
    ) -> None:
        super().__init__(filename, encoding)

    def read(self) -> IniDocument:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            return from_json_text(fp.read())

    def write(self, instance: IniDocument, indent: int | None = 2) -> None:
        with open(self._fn, 'w', encoding=self._codec) as fp:
            fp.write(to_json_text(instance, indent))
            fp.write('\n')


class YamlDocParser(FileHandler[IniDocument]):
    def __init__(
        self, filename: str | PathLike[str], encoding: str = 'utf-8'
    ) -> None:
        super().__init__(filename, encoding)

    def read(self) -> IniDocument:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            return from_yaml_text(fp.read())

    def write(self, instance: IniDocument) -> None:
        with open(self._fn, 'w', encoding=self._codec) as fp:
            fp.write(to_yaml_text(instance))
