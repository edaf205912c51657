import argparse
import logging
import sys
from typing import List, Optional

from py_convtable import (TableRegistry, load_builtin_tables, load_config, logger,
                          __version__ as version)

DEFAULT_TABLE = 'typography'


def add_table_arguments(parser):
    tables = parser.add_argument_group('Tables')
    tables.add_argument("-c", "--config", action="append", default=[],
                        help="TOML file with [convtab.tables.*] sections, may be repeated")
    tables.add_argument("-t", "--table", action="store", default=DEFAULT_TABLE,
                        help=f"Table to use (default: {DEFAULT_TABLE})")


def add_commands(parser):
    commands = parser.add_subparsers(dest='command', required=True)

    convert = commands.add_parser('convert', help="Convert a value to another unit")
    convert.add_argument("text", help="Input like '1p6' or '10 cm'")
    convert.add_argument("unit", help="Desired unit key")
    convert.add_argument("-r", "--raw", action="store_true", help="Print the unrounded value only")

    parse = commands.add_parser('parse', help="Show how a value is parsed")
    parse.add_argument("text", help="Input like '1p6' or '10 cm'")

    find = commands.add_parser('find', help="Show the definition of a unit")
    find.add_argument("unit", help="Unit key or alias")

    commands.add_parser('tables', help="List available tables")


def get_arg_parser():
    parser = argparse.ArgumentParser(
        prog='convtab',
        description="Parse and convert measurements with unit tables"
    )
    parser.add_argument("-v", "--version", action='version',
                        version=f'convtab v{version}', help="Show version")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug messages")
    add_table_arguments(parser)
    add_commands(parser)
    return parser


def run(argv, registry: TableRegistry) -> int:
    if argv.command == 'tables':
        for name in registry.names():
            table = registry.get(name).unwrap()
            print(f"{name}: base={table.base}, precision={table.precision}, units={' '.join(table)}")
        return 0

    got = registry.get(argv.table)
    if got.is_err():
        logger.error(got.error)
        return 1
    table = got.value

    if argv.command == 'convert':
        result = registry.convert(argv.text, argv.unit, argv.table)
        if result.is_err():
            logger.error(result.error)
            return 1
        converted = result.value
        print(converted.value if argv.raw else table.format(converted.value, converted.unit))
    elif argv.command == 'parse':
        result = registry.parse(argv.text, argv.table)
        if result.is_err():
            logger.error(result.error)
            return 1
        parsed = result.value
        print(f"main: {parsed.main.value} {parsed.main.unit} (scale={parsed.main.scale}, bias={parsed.main.bias})")
        if parsed.sub is not None:
            print(f"sub: {parsed.sub.value} {parsed.sub.unit} (scale={parsed.sub.scale}, bias={parsed.sub.bias})")
        print(f"base: {parsed.value_in_base} {parsed.base}")
    elif argv.command == 'find':
        result = registry.find(argv.unit, argv.table)
        if result.is_err():
            logger.error(result.error)
            return 1
        unit = result.value
        term = f" {unit.term[0]}/{unit.term[1]}" if unit.term else ''
        print(f"{argv.unit}:{term} scale={unit.scale}, bias={unit.bias}, minor={unit.minor}")
    return 0


def main(args: Optional[List[str]] = None) -> int:
    parser = get_arg_parser()
    argv = parser.parse_args(args)

    if argv.debug:
        logger.setLevel(logging.DEBUG)
        logger.info("Debug messages enabled")

    registry = TableRegistry()
    try:
        load_builtin_tables(registry)
        for filepath in argv.config:
            load_config(filepath, registry, force=True)
    except Exception as exc:
        logger.exception(exc)
        return 1
    return run(argv, registry)


if __name__ == '__main__':
    sys.exit(main())
