"""Escaping rules for SQL identifiers and quoted data.

Every formatted object in this package is rendered by one of two rules:

* identifiers (schemas, tables, columns, types) via `escape_identifier`,
  wrapped by `ObjectConcat`
* data values via `escape_literal`, wrapped by `QuotedDataConcat`

Both take a sequence of fragments that are escaped as one logical string.
"""

import logging
from collections.abc import Iterable

import attrs

from .contract import contract
from .errors import UnsupportedIdentifierCharacterError

logger = logging.getLogger(__name__)

# MonetDB rejects these in identifiers, even when quoted
IDENTIFIER_REJECT_CHARACTERS = ("'", "\\")
IDENTIFIER_QUOTE_CHARACTERS = (" ", '"')


@contract()
def escape_identifier(fragments: Iterable[str]) -> str:
    """Escape fragments as a single SQL identifier.

    Escaping rules:

    * as-is, if no fragment contains ``"`` or space
    * otherwise surround with ``"`` and escape ``"`` with ``""``

    Parameters
    ----------
    fragments : Iterable[str]
        Parts of the identifier, e.g. ``["schema", ".", "table"]``.

    Returns
    -------
    str
        The escaped identifier.

    Raises
    ------
    UnsupportedIdentifierCharacterError
        If any fragment contains ``'`` or ``\\``.

    Examples
    --------
    >>> escape_identifier(["foo_", "bar", "_baz"])
    'foo_bar_baz'
    >>> escape_identifier(["foo bar"])
    '"foo bar"'
    >>> escape_identifier(["schema", ".", 'ta"ble'])
    '"schema.ta""ble"'
    """
    parts = tuple(fragments)

    for part in parts:
        for character in part:
            if character in IDENTIFIER_REJECT_CHARACTERS:
                logger.debug("Rejecting identifier %r", parts)
                raise UnsupportedIdentifierCharacterError(parts, character)

    joined = "".join(parts)
    if any(c in part for part in parts for c in IDENTIFIER_QUOTE_CHARACTERS):
        escaped = joined.replace('"', '""')
        return f'"{escaped}"'
    return joined


@contract()
def escape_literal(fragments: Iterable[str]) -> str:
    """Escape fragments as a single quoted SQL string literal.

    Escaping rules:

    * surround with ``'`` and escape ``'`` with ``''``
    * escape ``\\`` with ``\\\\``

    Examples
    --------
    >>> escape_literal(["hello 'world' foo"])
    "'hello ''world'' foo'"
    >>> escape_literal(["it", "'", "s"])
    "'it''s'"
    """
    joined = "".join(fragments)
    escaped = joined.replace("'", "''").replace("\\", "\\\\")
    return f"'{escaped}'"


def _to_fragments(value: Iterable[str]) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    return tuple(value)


@attrs.define(frozen=True, slots=True, order=True)
class ObjectConcat:
    """Concatenation of strings with identifier escaping rules."""

    fragments: tuple[str, ...] = attrs.field(converter=_to_fragments)

    def as_quoted_data(self) -> "QuotedDataConcat":
        """Get the same fragments represented as quoted data."""
        return QuotedDataConcat(self.fragments)

    def __str__(self) -> str:
        return escape_identifier(self.fragments)


@attrs.define(frozen=True, slots=True, order=True)
class QuotedDataConcat:
    """Concatenation of strings with quoted data escaping rules."""

    fragments: tuple[str, ...] = attrs.field(converter=_to_fragments)

    def __str__(self) -> str:
        return escape_literal(self.fragments)
