"""Parsing, conversion and lookup over a `NormalizedTable`.

Examples:
    >>> from py_convtable import create_table
    >>> table = create_table({
    ...     'pt': {'base': True, 'term': 'Point(s)'},
    ...     'p': {'scale': 12.0, 'minor': 'pt', 'term': 'Pica(s)'},
    ...     'i': {'alias': 'in'},
    ...     'in': {'scale': 72.0, 'term': 'Inch(es)'},
    ... }, 'typography').unwrap()
    >>> parse('1p6', table).unwrap().main
    ParsedComponent(unit='p', value=1.0, scale=12.0, bias=0.0)
    >>> convert('2i', 'pt', table).unwrap()
    ConversionResult(unit='pt', value=144.0)
    >>> find('i', table).unwrap().term
    ('Inch', 'Inches')
"""
from typing import Optional

from py_convtable.exceptions import (AliasResolutionError, InputFormatError,
                                     UnitNotFoundError)
from py_convtable.result import as_result
from py_convtable.unit import (ConversionResult, NormalizedTable, NormalizedUnit, Number,
                               ParsedComponent, ParseResult)

__all__ = ('parse', 'convert', 'find', 'pluralize')


def _parse(text: str, table: NormalizedTable) -> ParseResult:
    if not isinstance(text, str):
        raise InputFormatError()
    match = table.regex.fullmatch(text.strip())
    if match is None:
        raise InputFormatError()

    major_value, major_unit, minor_value = match.group('major_value', 'major_unit', 'minor_value')

    unit_key = major_unit or table.base
    entry = table.units[unit_key]
    if entry.alias is not None:
        unit_key = entry.alias
        if (target := table.units.get(unit_key)) is None:
            raise InputFormatError()
        entry = target

    main = ParsedComponent(unit_key, float(major_value), entry.scale, entry.bias)

    sub: Optional[ParsedComponent] = None
    if minor_value is not None:
        if entry.minor is None:
            # a trailing number is only meaningful for units with a minor unit
            raise InputFormatError()
        minor = table.units.get(entry.minor)
        sub = ParsedComponent(
            entry.minor,
            float(minor_value),
            minor.scale if minor is not None else 1.0,
            minor.bias if minor is not None else 0.0,
        )

    return ParseResult(main, sub, table.base)


def _convert(text: str, desired_unit: str, table: NormalizedTable) -> ConversionResult:
    parsed = _parse(text, table)
    desired = table.units.get(desired_unit)
    if desired is None:
        raise UnitNotFoundError(f"Unit '{desired_unit}' not found.")
    return ConversionResult(desired_unit, desired.from_base(parsed.value_in_base))


def _find(unit_key: str, table: NormalizedTable) -> NormalizedUnit:
    unit_data = table.units.get(unit_key)
    if unit_data is None:
        raise UnitNotFoundError(f"Unit '{unit_key}' not found in table '{table.name}'.")
    if unit_data.alias is not None:
        resolved = table.units.get(unit_data.alias)
        if resolved is None:
            raise AliasResolutionError(f"Alias '{unit_key}' does not map to a valid unit in the table.")
        unit_data = resolved
    return unit_data


@as_result
def parse(text: str, table: NormalizedTable) -> ParseResult:
    """Parse ``<major value> [<major unit>] [<minor value>]``.

    A missing unit means the base unit. An alias is reported as its target key with
    the target's scale and bias. A minor value is accepted only when the (resolved)
    unit declares a minor unit.

    Returns:
        `Ok(ParseResult)`, or `Err` with `INVALID_INPUT` for any input that does not
        fit the table.
    """
    return _parse(text, table)


@as_result
def convert(text: str, desired_unit: str, table: NormalizedTable) -> ConversionResult:
    """Convert an input string to `desired_unit`.

    Both parts of a compound input are summed in the base unit, then mapped to the
    desired unit: ``(value_in_base - bias) / scale``. The result is not rounded;
    use `NormalizedTable.precision` for display.

    Returns:
        `Ok(ConversionResult)`, the parse `Err` unchanged, or `Err` when the desired
        unit is not in the table.
    """
    return _convert(text, desired_unit, table)


@as_result
def find(unit_key: str, table: NormalizedTable) -> NormalizedUnit:
    """Look a unit up, following one level of alias."""
    return _find(unit_key, table)


def pluralize(unit: str, value: Number, table: NormalizedTable) -> str:
    return table.pluralize(unit, value)
