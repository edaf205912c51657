"""Split human-written unit names into (singular, plural) pairs.

Examples:
    >>> parse_term("Meter(s)")
    ('Meter', 'Meters')
    >>> parse_term("Foot/Feet")
    ('Foot', 'Feet')
    >>> parse_term("Celsius")
    ('Celsius', 'Celsius')
    >>> parse_term(None) is None
    True
"""
import re
from typing import Optional, Sequence, Tuple, Union

from typing_extensions import TypeAlias

__all__ = ('Term', 'TermInput', 'parse_term')

Term: TypeAlias = Tuple[str, str]
TermInput: TypeAlias = Union[str, Sequence[str], None]

_PARENTHESES_RE = re.compile(r'([^(]+)\(([^)]+)\)')
_SLASH_RE = re.compile(r'([^/]+)/(.+)')


def parse_term(term: TermInput) -> Optional[Term]:
    """Parse a term into its singular and plural forms.

    Rules, in order:
        1. a two-item sequence is returned as is (as a tuple);
        2. ``prefix(suffix)`` gives ``(prefix, prefix + suffix)``;
        3. ``prefix/suffix`` gives ``(prefix, suffix)``;
        4. any other non-empty string is used for both forms, verbatim;
        5. ``None`` or an empty string gives ``None``.

    Args:
        term: Term string, an existing pair, or None.

    Returns:
        ``(singular, plural)`` or None.
    """
    if not isinstance(term, str):
        if term is not None and len(term) == 2:
            return term[0], term[1]
        return None

    if match := _PARENTHESES_RE.fullmatch(term):
        prefix, suffix = match.groups()
        return prefix, prefix + suffix
    if match := _SLASH_RE.fullmatch(term):
        singular, plural = match.groups()
        return singular, plural
    if term:
        return term, term
    return None
