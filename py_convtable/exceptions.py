"""py_convtable exception types.

Exception Hierarchy
-------------------

Exception (built-in Python)
└── ConversionTableError
    ├── TableSchemaError (ValueError)
    │   ├── NoBaseUnitError
    │   ├── DuplicateBaseUnitError
    │   └── AliasError
    ├── PatternBuildError (ValueError)
    ├── InputFormatError (ValueError)
    ├── UnitLookupError (LookupError)
    │   ├── UnitNotFoundError
    │   ├── AliasResolutionError
    │   └── TableNotFoundError
    └── TableRegistrationError

These exceptions are raised inside the library. The public operations
(`normalize`, `build_pattern`, `parse`, `convert`, `find` and the registry methods)
never let them escape: they are returned as `Err` values carrying both the message
and the exception instance, see `py_convtable.result`.

Schema errors:

- NoBaseUnitError: the table declares no `base` unit.
- DuplicateBaseUnitError: a second `base` unit was found. Contains:
  - key: the colliding key
  - base_key: the base key seen first
- AliasError: alias points to a missing unit or to another alias.

Input and lookup errors:

- InputFormatError: the input text does not match the table pattern. The message is
  always `INVALID_INPUT`, whatever the reason.
- UnitNotFoundError, AliasResolutionError, TableNotFoundError: lookup failures.
"""

__all__ = (
    'INVALID_INPUT',
    'ConversionTableError',
    'TableSchemaError',
    'NoBaseUnitError',
    'DuplicateBaseUnitError',
    'AliasError',
    'PatternBuildError',
    'InputFormatError',
    'UnitLookupError',
    'UnitNotFoundError',
    'AliasResolutionError',
    'TableNotFoundError',
    'TableRegistrationError',
)

INVALID_INPUT = "Invalid input format or no match found."


class ConversionTableError(Exception):
    """Base class for all py_convtable errors."""


class TableSchemaError(ConversionTableError, ValueError):
    """Raw table is malformed."""


class NoBaseUnitError(TableSchemaError):
    """Table declares no base unit."""

    def __init__(self, table_name: str = ''):
        self.table_name = table_name
        super().__init__(f"No base key declared in table: '{table_name}'")


class DuplicateBaseUnitError(TableSchemaError):
    """Table declares more than one base unit."""

    def __init__(self, key: str, base_key: str, table_name: str = ''):
        self.key = key
        self.base_key = base_key
        self.table_name = table_name
        super().__init__(f"Duplicate base key in table '{table_name}': '{key}' collides with '{base_key}'")


class AliasError(TableSchemaError):
    """Alias cannot be resolved with a single hop."""


class PatternBuildError(ConversionTableError, ValueError):
    """Unit pattern cannot be built."""


class InputFormatError(ConversionTableError, ValueError):
    """Input text does not match the unit pattern."""

    def __init__(self, message: str = INVALID_INPUT):
        super().__init__(message)


class UnitLookupError(ConversionTableError, LookupError):
    """Base class for lookup failures."""


class UnitNotFoundError(UnitLookupError):
    """Unit key is not in the table."""


class AliasResolutionError(UnitLookupError):
    """Alias target is not in the table."""


class TableNotFoundError(UnitLookupError):
    """Table name is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Table '{name}' not found.")


class TableRegistrationError(ConversionTableError):
    """Table name is already taken."""
