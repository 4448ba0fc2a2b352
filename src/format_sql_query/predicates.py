"""Boolean predicates joined into a WHERE clause."""

from collections.abc import Iterable, Iterator
from typing import Protocol, Self

import attrs


class Renderable(Protocol):
    def __str__(self) -> str: ...


def _to_predicates(predicates: Iterable[Renderable]) -> list[Renderable]:
    # a str is one predicate, not an iterable of single-character ones
    if isinstance(predicates, str):
        return [predicates]
    # materialize first, predicates may iterate over this collection
    return list(predicates)


@attrs.define(frozen=True, slots=True)
class PredicateStatement:
    """SQL statement with boolean logic."""

    statement: str
    predicates: tuple[Renderable, ...]

    def __str__(self) -> str:
        return f"{self.statement} " + "\nAND ".join(str(p) for p in self.predicates)


class Predicates:
    """Collection of boolean predicates.

    Predicates are kept in insertion order and rendered only when the
    collection is rendered.

    Examples
    --------
    >>> print(Predicates.from_one("foo = 'bar'").and_("baz").as_where())
    WHERE foo = 'bar'
    AND baz
    """

    def __init__(self, predicates: Iterable[Renderable] = ()) -> None:
        self._predicates: list[Renderable] = _to_predicates(predicates)

    @classmethod
    def from_one(cls, predicate: Renderable) -> Self:
        """Create collection containing the given predicate."""
        return cls().and_(predicate)

    @classmethod
    def from_all(cls, predicates: Iterable[Renderable]) -> Self:
        """Create collection containing the given predicates."""
        return cls().and_all(predicates)

    def as_where(self) -> PredicateStatement:
        """Get WHERE statement with the predicates."""
        return PredicateStatement("WHERE", tuple(self._predicates))

    def and_push(self, predicate: Renderable) -> None:
        """Append predicate."""
        self._predicates.append(predicate)

    def and_extend(self, predicates: Iterable[Renderable]) -> None:
        """Append all predicates."""
        self._predicates.extend(_to_predicates(predicates))

    def and_(self, predicate: Renderable) -> Self:
        """Append predicate with fluent API."""
        self.and_push(predicate)
        return self

    def and_all(self, predicates: Iterable[Renderable]) -> Self:
        """Append all predicates with fluent API."""
        self.and_extend(predicates)
        return self

    def __iter__(self) -> Iterator[Renderable]:
        return iter(self._predicates)

    def __len__(self) -> int:
        return len(self._predicates)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._predicates!r})"
