"""Regular expression recognising the input strings of a table.

The pattern reads ``<major value> [<major unit>] [<minor value>]``, e.g. ``1p6``,
``10 cm`` or ``12``. Unit keys are tried longest first so that a short key never
shadows a longer one it prefixes (``c`` and ``cm``).

Examples:
    >>> build_pattern(['c', 'cm', 'pt']).unwrap()
    '^\\\\s*(?P<major_value>[0-9]+(?:\\\\.[0-9]+)?)\\\\s*(?P<major_unit>cm|pt|c)?\\\\s*(?P<minor_value>[0-9]+(?:\\\\.[0-9]+)?)?\\\\s*$'
"""
import re
from typing import Iterable

from py_convtable.exceptions import PatternBuildError
from py_convtable.result import as_result

__all__ = ('DECIMAL_RE', 'build_pattern')

DECIMAL_RE = r'[0-9]+(?:\.[0-9]+)?'


def _build_pattern(units: Iterable[str], table_name: str = '') -> str:
    keys = sorted(units, key=len, reverse=True)
    if not keys:
        raise PatternBuildError(f"No units found to build pattern for table: '{table_name}'")
    alternation = '|'.join(re.escape(key) for key in keys)
    return (rf'^\s*(?P<major_value>{DECIMAL_RE})'
            rf'\s*(?P<major_unit>{alternation})?'
            rf'\s*(?P<minor_value>{DECIMAL_RE})?\s*$')


@as_result
def build_pattern(units: Iterable[str], table_name: str = '') -> str:
    """Build the anchored pattern for the given unit keys.

    Args:
        units: Unit keys, usually a `NormalizedTable` or its `units` mapping.
        table_name: Used in error messages.

    Returns:
        `Ok(pattern)` or `Err` when there is no unit to match.
    """
    return _build_pattern(units, table_name)
