"""Tagged result type returned by every public py_convtable operation.

A result is either `Ok(value)` or `Err(error)`, never both and never neither.

Examples:
    >>> from py_convtable import convert, create_table
    >>> table = create_table({'pt': {'base': True}, 'p': {'scale': 12}}).unwrap()
    >>> res = convert('1p', 'pt', table)
    >>> res
    Ok(value=ConversionResult(unit='pt', value=12.0))
    >>> res.is_ok()
    True
    >>> convert('1x', 'pt', table).error
    'Invalid input format or no match found.'
"""
from __future__ import annotations

from dataclasses import dataclass, field
from functools import wraps
from typing import Any, Callable, Generic, NoReturn, Optional, TypeVar, Union

from typing_extensions import ParamSpec, TypeAlias

from py_convtable.exceptions import ConversionTableError
from py_convtable.logger import logger

__all__ = ('Ok', 'Err', 'Result', 'as_result')

T = TypeVar('T')
P = ParamSpec('P')


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome."""

    value: T

    @property
    def error(self) -> None:
        return None

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: Any) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed outcome.

    Attributes:
        error: Human-readable message.
        exception: The library exception the message came from (not part of equality).
    """

    error: str
    exception: Optional[ConversionTableError] = field(default=None, compare=False, repr=False)

    @property
    def value(self) -> None:
        return None

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Re-raise the carried exception."""
        if self.exception is not None:
            raise self.exception
        raise ConversionTableError(self.error)

    def unwrap_or(self, default: T) -> T:
        return default


Result: TypeAlias = Union[Ok[T], Err]


def as_result(func: Callable[P, T]) -> Callable[P, Result[T]]:
    """Wrap a raising function so that library errors come back as `Err`.

    Only `ConversionTableError` is converted; anything else is a bug and propagates.
    """

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T]:
        try:
            return Ok(func(*args, **kwargs))
        except ConversionTableError as exc:
            logger.debug(f"{func.__name__} failed: {exc}")
            return Err(str(exc), exc)

    return wrapper
