"""Parse and convert measurement strings with declarative unit tables."""

import importlib.metadata

try:
    __version__ = importlib.metadata.version("py_convtable")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.0.0"
__author__ = "py_convtable contributors"

# Local imports
from .logger import logger, enable_file_logging, disable_file_logging
from .exceptions import (INVALID_INPUT, ConversionTableError, TableSchemaError, NoBaseUnitError,
                         DuplicateBaseUnitError, AliasError, PatternBuildError, InputFormatError,
                         UnitLookupError, UnitNotFoundError, AliasResolutionError, TableNotFoundError,
                         TableRegistrationError)
from .result import Ok, Err, Result, as_result
from .term import Term, parse_term
from .unit import (Number, RawUnitSpec, RawUnitSpecDict, RawTable, NormalizedUnit, NormalizedTable,
                   ParsedComponent, ParseResult, ConversionResult)
from .pattern import build_pattern
from .normalizer import Normalization, normalize, create_table
from .operations import parse, convert, find, pluralize
from .registry import TableRegistry
from .config import (BUILTIN_TABLES, basic_config, find_config_file, load_config, read_tables,
                     load_builtin_tables, load_distance_table, load_temperature_table,
                     load_typography_table)

basicConfig = basic_config
loadDistanceTable = load_distance_table
loadTemperatureTable = load_temperature_table
loadTypographyTable = load_typography_table

# DRY: build __all__ from global symbols
_SKIP_GLOBALS = {
    # Skip Python builtins
    "__name__", "__doc__", "__package__", "__loader__", "__spec__",
    "__file__", "__cached__", "__builtins__", "__path__",
    # Skip imported modules
    "importlib",
    # Skip submodules
    "exceptions", "result", "term", "unit", "pattern", "normalizer",
    "operations", "registry", "config",
}
__all__ = [
    name for name in globals()
    if not name.startswith("_") and name not in _SKIP_GLOBALS
]
