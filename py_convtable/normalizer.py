"""Normalization of raw, human-authored unit tables.

`normalize` resolves aliases (a single hop), applies defaults, splits terms, identifies
the base unit and measures the decimal precision of the table. `create_table` chains
normalization and pattern construction into a ready to use `NormalizedTable`.
"""
from __future__ import annotations

from decimal import Decimal
from math import isfinite
from typing import Dict, Mapping, NamedTuple, Optional

from py_convtable.exceptions import (AliasError, DuplicateBaseUnitError, NoBaseUnitError,
                                     TableSchemaError)
from py_convtable.logger import logger
from py_convtable.pattern import _build_pattern
from py_convtable.result import as_result
from py_convtable.term import parse_term
from py_convtable.unit import Number, NormalizedTable, NormalizedUnit, RawTable, RawUnitSpec

__all__ = (
    'SCALE_DIGITS',
    'MIN_PRECISION',
    'MAX_PRECISION',
    'Normalization',
    'normalize',
    'create_table',
    'round_to_precision',
    'decimal_places',
)

SCALE_DIGITS: int = 15
MIN_PRECISION: int = 6
MAX_PRECISION: int = 15


class Normalization(NamedTuple):
    units: Mapping[str, NormalizedUnit]
    base: str
    precision: int


def round_to_precision(num: Number, digits: int = SCALE_DIGITS) -> float:
    """Round through a fixed-point representation with `digits` decimals.

    >>> round_to_precision(5 / 9)
    0.555555555555556
    """
    return float(f"{num:.{digits}f}")


def decimal_places(num: float) -> int:
    """Number of digits after the decimal point in the shortest repr of `num`.

    >>> decimal_places(12.78906575)
    8
    >>> decimal_places(100.0)
    1
    """
    if not isfinite(num):
        return 0
    exponent = Decimal(repr(num)).as_tuple().exponent
    return max(0, -int(exponent))


def _validate_key(key: object) -> str:
    if not isinstance(key, str) or not key:
        raise TableSchemaError(f"Unit keys must be non-empty strings, got {key!r}")
    return key


def _normalize(raw: RawTable, table_name: str = '') -> Normalization:
    if not isinstance(raw, Mapping):
        raise TableSchemaError(f"Table '{table_name}': mapping of unit specs expected, got {type(raw).__name__}")

    specs: Dict[str, RawUnitSpec] = {
        _validate_key(key): RawUnitSpec.from_mapping(key, spec) for key, spec in raw.items()
    }

    units: Dict[str, NormalizedUnit] = {}
    base_key: Optional[str] = None
    precision = MIN_PRECISION

    for key, spec in specs.items():
        if spec.base:
            if base_key is not None:
                raise DuplicateBaseUnitError(key, base_key, table_name)
            base_key = key

        source = spec
        if spec.alias is not None:
            if spec.base:
                raise AliasError(f"Table '{table_name}': base unit '{key}' cannot be an alias")
            target = specs.get(spec.alias)
            if target is None:
                raise AliasError(f"Table '{table_name}': alias '{key}' points to unknown unit '{spec.alias}'")
            if target.alias is not None:
                raise AliasError(f"Table '{table_name}': alias '{key}' points to alias '{spec.alias}', "
                                 f"alias chains are not supported")
            source = target

        try:
            scale = round_to_precision(source.scale if source.scale is not None else 1)
        except (OverflowError, TypeError) as exc:
            raise TableSchemaError(f"Table '{table_name}': scale of unit '{key}' is not representable: {exc}") from exc
        if scale == 0 or not isfinite(scale):
            raise TableSchemaError(f"Table '{table_name}': scale of unit '{key}' must be finite and non-zero")
        try:
            bias = float(source.bias) if source.bias is not None else 0.0
        except (OverflowError, TypeError) as exc:
            raise TableSchemaError(f"Table '{table_name}': bias of unit '{key}' is not representable: {exc}") from exc
        if not isfinite(bias):
            raise TableSchemaError(f"Table '{table_name}': bias of unit '{key}' must be finite")

        units[key] = NormalizedUnit(
            is_base=spec.base,
            scale=scale,
            bias=bias,
            alias=spec.alias,
            minor=source.minor,
            term=parse_term(source.term),
        )
        precision = max(precision, decimal_places(scale))

    if base_key is None:
        raise NoBaseUnitError(table_name)

    for key, unit in units.items():
        if unit.minor is not None and unit.minor not in units:
            raise TableSchemaError(f"Table '{table_name}': minor unit '{unit.minor}' of '{key}' is not declared")

    precision = max(MIN_PRECISION, min(MAX_PRECISION, precision))
    logger.debug(f"Normalized table '{table_name}': {len(units)} units, base={base_key!r}, {precision=}")
    return Normalization(units, base_key, precision)


def _create_table(raw: RawTable, table_name: str = '') -> NormalizedTable:
    units, base, precision = _normalize(raw, table_name)
    pattern = _build_pattern(units, table_name)
    return NormalizedTable(units, base, precision, pattern, table_name)


@as_result
def normalize(raw: RawTable, table_name: str = '') -> Normalization:
    """Normalize a raw unit table.

    Args:
        raw: Mapping of unit key to `RawUnitSpec` (or an equivalent mapping).
        table_name: Used in error messages.

    Returns:
        `Ok(Normalization(units, base, precision))` or `Err` for a schema error:
        no base unit, duplicate base units, unresolvable alias, malformed entry.
    """
    return _normalize(raw, table_name)


@as_result
def create_table(raw: RawTable, table_name: str = '') -> NormalizedTable:
    """Normalize a raw table and build its pattern.

    Returns:
        `Ok(NormalizedTable)` or the first `Err` met.
    """
    return _create_table(raw, table_name)
