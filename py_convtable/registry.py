"""Named storage of normalized conversion tables.

Registries are plain objects; create as many as needed and pass them to whoever needs
them. Writes are serialized with a lock and a table is completely built before it is
installed, so readers see either the previous table or the new one.

Examples:
    >>> registry = TableRegistry()
    >>> registry.register('length', {
    ...     'cm': {'base': True, 'term': 'Centimeter(s)'},
    ...     'm': {'scale': 100, 'term': 'Meter(s)'},
    ... }).is_ok()
    True
    >>> registry.convert('2m', 'cm', 'length').unwrap()
    ConversionResult(unit='cm', value=200.0)
    >>> registry.register('length', {'m': {'base': True}}).error
    "Table 'length' is already registered. Use force=True to overwrite."
"""
import re
import threading
from typing import Dict, Iterator, List, Optional

from py_convtable.exceptions import ConversionTableError, TableNotFoundError, TableRegistrationError
from py_convtable.logger import logger
from py_convtable.normalizer import _create_table
from py_convtable.operations import _convert, _find, _parse
from py_convtable.result import Err, Ok, Result, as_result
from py_convtable.unit import ConversionResult, NormalizedTable, NormalizedUnit, ParseResult, RawTable

__all__ = ('TableRegistry',)


class TableRegistry:
    """Keyed store of `NormalizedTable` instances."""

    def __init__(self) -> None:
        self._tables: Dict[str, NormalizedTable] = {}
        self._lock = threading.Lock()

    def __contains__(self, name: object) -> bool:
        return name in self._tables

    def __len__(self) -> int:
        return len(self._tables)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__}: {self.names()}>'

    def names(self) -> List[str]:
        with self._lock:
            return list(self._tables)

    def _get(self, name: str) -> NormalizedTable:
        table = self._tables.get(name)
        if table is None:
            raise TableNotFoundError(name)
        return table

    @as_result
    def register(self, name: str, raw: RawTable, force: bool = False) -> NormalizedTable:
        """Normalize `raw` and store it under `name`.

        Args:
            name: Table name.
            raw: Raw unit table.
            force: Replace an existing table of the same name.

        Returns:
            `Ok(NormalizedTable)`, or `Err` when the name is taken (without `force`)
            or the table is invalid. A failure leaves the registry unchanged.
        """
        if name in self._tables and not force:
            raise TableRegistrationError(f"Table '{name}' is already registered. Use force=True to overwrite.")
        try:
            table = _create_table(raw, name)
        except ConversionTableError as exc:
            logger.warning(f"Table '{name}' rejected: {exc}")
            raise
        with self._lock:
            if name in self._tables and not force:
                raise TableRegistrationError(
                    f"Table '{name}' is already registered. Use force=True to overwrite.")
            replaced = name in self._tables
            self._tables[name] = table
        logger.debug(f"Table '{name}' {'replaced' if replaced else 'registered'} "
                    f"(base={table.base!r}, precision={table.precision})")
        return table

    def unregister(self, name: str, verbose: bool = False) -> Result[Optional[str]]:
        """Remove a table.

        A missing table is not an error unless `verbose` is set.
        """
        with self._lock:
            removed = self._tables.pop(name, None)
        if removed is None:
            if verbose:
                exc = TableNotFoundError(name)
                return Err(f"Table '{name}' is not registered.", exc)
            return Ok(None)
        logger.debug(f"Table '{name}' unregistered")
        return Ok(f"Table '{name}' unregistered successfully.")

    def clear(self) -> None:
        with self._lock:
            self._tables.clear()

    @as_result
    def get(self, name: str) -> NormalizedTable:
        return self._get(name)

    @as_result
    def regex(self, name: str) -> re.Pattern:
        """Compiled pattern of a registered table."""
        return self._get(name).regex

    @as_result
    def parse(self, text: str, name: str) -> ParseResult:
        return _parse(text, self._get(name))

    @as_result
    def convert(self, text: str, desired_unit: str, name: str) -> ConversionResult:
        return _convert(text, desired_unit, self._get(name))

    @as_result
    def find(self, unit_key: str, name: str) -> NormalizedUnit:
        return _find(unit_key, self._get(name))
