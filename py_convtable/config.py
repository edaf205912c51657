"""Loading conversion tables from TOML files.

A config file declares raw tables under ``[convtab.tables.<name>]``:

    [convtab.tables.typography]
    pt = { base = true, term = "Point(s)" }
    p = { scale = 12.0, minor = "pt", term = "Pica(s)" }

`basicConfig` registers tables from a mapping, an explicit file, or the first
``.convtab.toml`` / ``convtab.toml`` found from the current directory upward.
Bundled tables (distance, temperature, typography) ship in ``py_convtable/assets``.
"""
import importlib.resources
import os
import sys
from typing import Any, Dict, List, Mapping, Optional

from py_convtable.logger import logger
from py_convtable.registry import TableRegistry
from py_convtable.unit import RawTable

if sys.version_info[:2] < (3, 11):
    import tomli as tomllib
else:
    import tomllib

__all__ = (
    'CONFIG_FILENAMES',
    'BUILTIN_TABLES',
    'find_config_file',
    'read_tables',
    'load_config',
    'basic_config',
    'load_builtin_tables',
    'load_distance_table',
    'load_temperature_table',
    'load_typography_table',
)

CONFIG_FILENAMES = ('.convtab.toml', 'convtab.toml')
BUILTIN_TABLES = ('distance', 'temperature', 'typography')


def find_config_file(start_dir: Optional[str] = None) -> Optional[str]:
    """Search for a config file starting from `start_dir` and walking up.

    Args:
        start_dir: Directory to start from. Defaults to the current working directory.

    Returns:
        Absolute path of the first config file found, otherwise None.
    """
    current_dir = os.path.abspath(start_dir or os.getcwd())
    while True:
        for filename in CONFIG_FILENAMES:
            path = os.path.join(current_dir, filename)
            if os.path.exists(path):
                return os.path.abspath(path)

        parent_dir = os.path.dirname(current_dir)
        if parent_dir == current_dir:
            return None
        current_dir = parent_dir


def read_tables(filepath: str, suppress_warnings: bool = False) -> Dict[str, RawTable]:
    """Read raw tables from a TOML file without registering them.

    Raises:
        OSError: If the file cannot be read.
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    with open(filepath, "rb") as fp:
        _config: Dict[str, Any] = tomllib.load(fp)

    if _convtab := _config.get('convtab'):
        if tables := _convtab.get('tables'):
            return dict(tables)
        if not suppress_warnings:
            logger.warning(f"Config {os.path.basename(filepath)} has no `convtab.tables` section")
    elif not suppress_warnings:
        logger.warning(f"Config {os.path.basename(filepath)} has no `convtab` section")
    return {}


def _register_all(registry: TableRegistry, tables: Mapping[str, RawTable], force: bool) -> List[str]:
    registered = []
    for name, raw in tables.items():
        result = registry.register(name, raw, force=force)
        if result.is_ok():
            registered.append(name)
        else:
            logger.error(f"Can't register table '{name}': {result.error}")
    return registered


def load_config(filepath: str, registry: TableRegistry,
                force: bool = False, suppress_warnings: bool = False) -> List[str]:
    """Register every table of a TOML file.

    Tables that fail to normalize, or whose name is taken while `force` is off,
    are logged and skipped.

    Returns:
        Names of the tables registered.
    """
    logger.debug(f"Loading tables from {os.path.basename(filepath)} at {os.path.dirname(filepath)}")
    return _register_all(registry, read_tables(filepath, suppress_warnings), force)


def basic_config(registry: TableRegistry,
                 filename: Optional[str] = None,
                 tables: Optional[Mapping[str, RawTable]] = None,
                 force: bool = False,
                 suppress_warnings: bool = False) -> List[str]:
    """Register tables from a mapping or a config file.

    Args:
        registry: Registry to fill.
        filename: Config file path. If neither `filename` nor `tables` is given,
                  `find_config_file` is used.
        tables: Mapping of table name to raw table.
        force: Replace tables already registered under the same name.
        suppress_warnings: If True, suppress warning messages.

    Returns:
        Names of the tables registered.

    Raises:
        ValueError: If both filename and tables are provided.
    """
    if filename and tables:
        raise ValueError("Can't use tables and config file at same time")
    if tables:
        return _register_all(registry, tables, force)
    if filename is None:
        filename = find_config_file()
        if filename is None:
            if not suppress_warnings:
                logger.warning(f"No config file found, looked for {', '.join(CONFIG_FILENAMES)}")
            return []
    return load_config(filename, registry, force, suppress_warnings)


def _resolve_resource_path(path: str) -> str:
    return str(importlib.resources.files('py_convtable').joinpath(path))


def load_builtin_tables(registry: TableRegistry, *names: str, force: bool = False) -> List[str]:
    """Register bundled tables, all of them when no name is given.

    Raises:
        ValueError: If a name is not one of `BUILTIN_TABLES`.
    """
    registered = []
    for name in names or BUILTIN_TABLES:
        if name not in BUILTIN_TABLES:
            raise ValueError(f"Unknown builtin table {name!r}, expected one of {BUILTIN_TABLES}")
        registered.extend(
            load_config(_resolve_resource_path(f'assets/{name}.toml'), registry, force, suppress_warnings=True)
        )
    return registered


def load_distance_table(registry: TableRegistry, force: bool = False) -> List[str]:
    return load_builtin_tables(registry, 'distance', force=force)


def load_temperature_table(registry: TableRegistry, force: bool = False) -> List[str]:
    return load_builtin_tables(registry, 'temperature', force=force)


def load_typography_table(registry: TableRegistry, force: bool = False) -> List[str]:
    return load_builtin_tables(registry, 'typography', force=force)
