"""Exceptions raised while formatting SQL fragments."""

from collections.abc import Sequence
from typing import Any


class FormatSqlQueryError(Exception):
    """Base class for all errors raised by this package."""


class UnsupportedIdentifierCharacterError(FormatSqlQueryError, ValueError):
    """Identifier contains a character that cannot be escaped.

    Attributes
    ----------
    fragments : tuple[str, ...]
        Fragments of the rejected identifier.
    character : str
        The first unsupported character found.
    """

    def __init__(self, fragments: Sequence[str], character: str) -> None:
        self.fragments = tuple(fragments)
        self.character = character
        super().__init__(
            f"Unsupported character {character!r} in identifier: {''.join(self.fragments)!r}"
        )


class UnsupportedDataTypeError(FormatSqlQueryError, TypeError):
    """Value type has no SQL type registered for a dialect."""

    def __init__(self, dialect: type[Any], value_type: Any) -> None:
        self.dialect = dialect
        self.value_type = value_type
        type_name = getattr(value_type, "__name__", repr(value_type))
        super().__init__(
            f"Value type {type_name} is not supported by dialect {dialect.__name__}"
        )


class DialectMismatchError(FormatSqlQueryError, TypeError):
    """Values tagged with different dialects were mixed."""


class UnknownDialectError(FormatSqlQueryError, KeyError):
    """No dialect is registered under the given name."""

    def __str__(self) -> str:
        return str(self.args[0])


class UnknownValueTypeError(FormatSqlQueryError, KeyError):
    """No value type is known under the given name."""

    def __str__(self) -> str:
        return str(self.args[0])


class RenderContractViolationError(FormatSqlQueryError):
    """Rendering failed with an error outside of its contract.

    Attributes
    ----------
    function_name : str | None
        Name of the rendering function that failed.
    original_exception : Exception | None
        The exception that broke the contract.
    """

    def __init__(
        self,
        message: str = "render contract violation",
        *,
        function_name: str | None = None,
        original_exception: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.function_name = function_name
        self.original_exception = original_exception

    def __str__(self) -> str:
        parts = [super().__str__()]

        if self.function_name:
            parts.append(f"in function '{self.function_name}'")

        if self.original_exception:
            parts.append(
                f"caused by {type(self.original_exception).__name__}: {self.original_exception}"
            )

        return " ".join(parts)
