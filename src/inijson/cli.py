# -*- encoding: utf-8 -*-
# @File   : cli.py
# @Time   : 2026/10/15 23:05:41
# @Author : Kariko Lin

"""
inijson CLI.

Commands:
  inijson to-json    - INI file to JSON
  inijson to-yaml    - INI file to YAML
  inijson from-json  - JSON file to INI
  inijson from-yaml  - YAML file to INI
  inijson get        - Print one value of an INI file
  inijson set        - Update one value of an INI file in place
"""

import argparse
import sys

from . import __version__
from .formats import (
    InvalidDocument,
    JsonDocParser,
    YamlDocParser,
    to_json_text,
    to_yaml_text,
)
from .ini import IniParser, IniStore, stringify_ini


def _emit(text: str, output: str | None) -> None:
    if output is None:
        print(text)
        return
    with open(output, 'w', encoding='utf-8') as fp:
        fp.write(text)
        fp.write('\n')


def cmd_to_json(args: argparse.Namespace) -> None:
    doc = IniParser(args.path, args.encoding, typed=not args.strings).read()
    _emit(to_json_text(doc, args.indent), args.output)


def cmd_to_yaml(args: argparse.Namespace) -> None:
    doc = IniParser(args.path, args.encoding, typed=not args.strings).read()
    _emit(to_yaml_text(doc).rstrip('\n'), args.output)


def cmd_from_json(args: argparse.Namespace) -> None:
    _emit(stringify_ini(JsonDocParser(args.path).read()), args.output)


def cmd_from_yaml(args: argparse.Namespace) -> None:
    _emit(stringify_ini(YamlDocParser(args.path).read()), args.output)


def cmd_get(args: argparse.Namespace) -> None:
    store = IniStore()
    store.load(args.path, args.encoding)
    if (value := store.get(args.section, args.key)) is None:
        print(f'Error: [{args.section}] has no "{args.key}"', file=sys.stderr)
        sys.exit(1)
    print(value)


def cmd_set(args: argparse.Namespace) -> None:
    store = IniStore()
    store.load(args.path, args.encoding)
    store.set(args.section, args.key, args.value)
    store.save(args.path, args.encoding or 'utf-8')


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog='inijson',
        description='Convert INI files to and from JSON/YAML.',
    )
    parser.add_argument(
        '--version', action='version', version=f'inijson {__version__}')
    sub = parser.add_subparsers(dest='command')

    def ini_input(p: argparse.ArgumentParser) -> None:
        p.add_argument('path', help='Path to INI file')
        p.add_argument('-e', '--encoding', help='INI file encoding')

    p_json = sub.add_parser('to-json', help='Convert an INI file to JSON')
    ini_input(p_json)
    p_json.add_argument('-o', '--output', help='Output file path')
    p_json.add_argument('--indent', type=int, default=2, help='JSON indent')
    p_json.add_argument(
        '--strings', action='store_true', help='Keep every value as text')

    p_yaml = sub.add_parser('to-yaml', help='Convert an INI file to YAML')
    ini_input(p_yaml)
    p_yaml.add_argument('-o', '--output', help='Output file path')
    p_yaml.add_argument(
        '--strings', action='store_true', help='Keep every value as text')

    p_fjson = sub.add_parser('from-json', help='Convert a JSON file to INI')
    p_fjson.add_argument('path', help='Path to JSON file')
    p_fjson.add_argument('-o', '--output', help='Output file path')

    p_fyaml = sub.add_parser('from-yaml', help='Convert a YAML file to INI')
    p_fyaml.add_argument('path', help='Path to YAML file')
    p_fyaml.add_argument('-o', '--output', help='Output file path')

    p_get = sub.add_parser('get', help='Print one value of an INI file')
    ini_input(p_get)
    p_get.add_argument('section', help='Section name')
    p_get.add_argument('key', help='Key name')

    p_set = sub.add_parser('set', help='Update one value of an INI file')
    ini_input(p_set)
    p_set.add_argument('section', help='Section name')
    p_set.add_argument('key', help='Key name')
    p_set.add_argument('value', help='New value')

    args = parser.parse_args(argv)
    commands = {
        'to-json': cmd_to_json,
        'to-yaml': cmd_to_yaml,
        'from-json': cmd_from_json,
        'from-yaml': cmd_from_yaml,
        'get': cmd_get,
        'set': cmd_set,
    }
    if args.command is None:
        parser.print_help()
        sys.exit(1)
    try:
        commands[args.command](args)
    except (OSError, InvalidDocument) as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)
