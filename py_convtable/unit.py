"""Data model for conversion tables.

A conversion table is authored as a sparse mapping of unit keys to `RawUnitSpec`
entries and normalized once into an immutable `NormalizedTable`. Every unit of a
table converts to the table's base unit with an affine transform:

    value_in_base = value * scale + bias

Examples:
    >>> from py_convtable import create_table
    >>> table = create_table({
    ...     'pt': {'base': True, 'term': 'Point(s)'},
    ...     'p': {'scale': 12.0, 'minor': 'pt', 'term': 'Pica(s)'},
    ... }, 'typography').unwrap()
    >>> table.base
    'pt'
    >>> table['p']
    NormalizedUnit(is_base=False, scale=12.0, bias=0.0, alias=None, minor='pt', term=('Pica', 'Picas'))
    >>> table.pluralize('p', 2)
    'Picas'
    >>> table.format(18, 'pt')
    '18 Points'
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field, fields
from numbers import Real
from types import MappingProxyType
from typing import Any, Iterator, Mapping, NamedTuple, Optional, Union

from typing_extensions import Self, TypeAlias, TypedDict

from py_convtable.exceptions import TableSchemaError
from py_convtable.term import Term, TermInput

__all__ = (
    'Number',
    'RawUnitSpec',
    'RawUnitSpecDict',
    'RawTable',
    'NormalizedUnit',
    'NormalizedTable',
    'ParsedComponent',
    'ParseResult',
    'ConversionResult',
)

Number: TypeAlias = Union[float, int]


class RawUnitSpecDict(TypedDict, total=False):
    base: bool
    scale: Number
    bias: Number
    alias: str
    minor: str
    term: TermInput


@dataclass(frozen=True)
class RawUnitSpec:
    """Author-supplied, sparse unit entry.

    Attributes:
        base: True for the reference unit of the table (at most one per table).
        scale: Multiplier to the base unit, defaults to 1.
        bias: Offset added after scaling, defaults to 0.
        alias: Key of the unit this entry mirrors.
        minor: Key of the finer-grained unit used for compound input like ``1p6``.
        term: Human name, e.g. ``"Meter(s)"``, ``"Foot/Feet"`` or ``("Foot", "Feet")``.
    """

    base: bool = False
    scale: Optional[Number] = None
    bias: Optional[Number] = None
    alias: Optional[str] = None
    minor: Optional[str] = None
    term: TermInput = None

    @classmethod
    def from_mapping(cls, key: str, spec: Union[Self, Mapping[str, Any]]) -> Self:
        """Validate a raw entry and return it as `RawUnitSpec`.

        Raises:
            TableSchemaError: On unknown fields or wrongly typed values.
        """
        if isinstance(spec, cls):
            spec.validate(key)
            return spec
        if not isinstance(spec, Mapping):
            raise TableSchemaError(f"Unit '{key}': mapping expected, got {type(spec).__name__}")
        known = {f.name for f in fields(cls)}
        if unknown := set(spec.keys()) - known:
            raise TableSchemaError(f"Unit '{key}': unknown field(s) {sorted(map(str, unknown))}")
        obj = cls(**{k: v for k, v in spec.items() if v is not None})
        obj.validate(key)
        return obj

    def validate(self, key: str) -> None:
        if not isinstance(self.base, bool):
            raise TableSchemaError(f"Unit '{key}': 'base' must be a bool, got {self.base!r}")
        for name in ('scale', 'bias'):
            value = getattr(self, name)
            if value is not None and (isinstance(value, bool) or not isinstance(value, Real)):
                raise TableSchemaError(f"Unit '{key}': '{name}' must be a number, got {value!r}")
        for name in ('alias', 'minor'):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise TableSchemaError(f"Unit '{key}': '{name}' must be a unit key, got {value!r}")
        term = self.term
        if term is not None and not isinstance(term, str):
            if not (isinstance(term, (list, tuple)) and len(term) == 2
                    and all(isinstance(t, str) for t in term)):
                raise TableSchemaError(f"Unit '{key}': 'term' must be a string or a (singular, plural) pair")


RawTable: TypeAlias = Mapping[str, Union[RawUnitSpec, RawUnitSpecDict, Mapping[str, Any]]]


@dataclass(frozen=True)
class NormalizedUnit:
    """Resolved and defaulted unit entry.

    For an alias entry, `scale`, `bias`, `minor` and `term` are copies of the
    target's values and `alias` keeps the target key.
    """

    is_base: bool = False
    scale: float = 1.0
    bias: float = 0.0
    alias: Optional[str] = None
    minor: Optional[str] = None
    term: Optional[Term] = None

    def to_base(self, value: Number) -> float:
        return value * self.scale + self.bias

    def from_base(self, value: Number) -> float:
        return (value - self.bias) / self.scale


@dataclass(frozen=True)
class NormalizedTable:
    """Immutable, fully resolved conversion table.

    Attributes:
        units: Read-only mapping of unit key to `NormalizedUnit`.
        base: Key of the base unit.
        precision: Decimal digits the table is accurate to, within [6, 15].
        pattern: Anchored regular expression recognising the table's input strings.
        name: Table name, used in messages.
    """

    units: Mapping[str, NormalizedUnit]
    base: str
    precision: int
    pattern: str
    name: str = ''
    regex: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        # read-only copy, the caller keeps no handle on it
        object.__setattr__(self, 'units', MappingProxyType(dict(self.units)))
        object.__setattr__(self, 'precision', max(6, min(15, self.precision)))
        object.__setattr__(self, 'regex', re.compile(self.pattern))

    def __getitem__(self, key: str) -> NormalizedUnit:
        return self.units[key]

    def __contains__(self, key: object) -> bool:
        return key in self.units

    def __iter__(self) -> Iterator[str]:
        return iter(self.units)

    def __len__(self) -> int:
        return len(self.units)

    def get(self, key: str, default: Optional[NormalizedUnit] = None) -> Optional[NormalizedUnit]:
        return self.units.get(key, default)

    def keys(self):
        return self.units.keys()

    def pluralize(self, unit: str, value: Number) -> str:
        """Singular term for a value of exactly 1, plural otherwise.

        Falls back to the unit key when the unit is unknown or has no term.
        """
        unit_data = self.units.get(unit)
        if unit_data is None or unit_data.term is None:
            return unit
        return unit_data.term[0] if value == 1 else unit_data.term[1]

    def format(self, value: Number, unit: str) -> str:
        """Value rounded to the table precision, followed by the pluralized term."""
        rounded = round(value, self.precision)
        if float(rounded).is_integer():
            rounded = int(rounded)
        return f"{rounded} {self.pluralize(unit, rounded)}"


class ParsedComponent(NamedTuple):
    """One part (major or minor) of a parsed input."""

    unit: str
    value: float
    scale: float = 1.0
    bias: float = 0.0

    @property
    def in_base(self) -> float:
        return self.value * self.scale + self.bias


@dataclass(frozen=True)
class ParseResult:
    """Structured form of an input such as ``1p6``."""

    main: ParsedComponent
    sub: Optional[ParsedComponent]
    base: str

    @property
    def value_in_base(self) -> float:
        value = self.main.in_base
        if self.sub is not None:
            value += self.sub.in_base
        return value


class ConversionResult(NamedTuple):
    unit: str
    value: float
