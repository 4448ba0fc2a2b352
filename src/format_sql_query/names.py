"""Typed SQL names: schemas, tables, columns and column types.

All objects render escaped (and quoted if needed) with ``str()`` so they
can be used directly in SQL statement templates.

Examples
--------
>>> "SELECT {} FROM {} WHERE {} = {}".format(
...     Column("foo bar"),
...     SchemaTable("foo", "baz"),
...     Column("blah"),
...     QuotedData("hello 'world' foo"),
... )
'SELECT "foo bar" FROM foo.baz WHERE blah = \\'hello \\'\\'world\\'\\' foo\\''
"""

from collections.abc import Callable, Iterable
from typing import Self

import attrs

from .data_type import Dialect, ValueType, sql_type
from .errors import DialectMismatchError
from .escape import ObjectConcat, QuotedDataConcat, escape_identifier, escape_literal

SCHEMA_SEPARATOR = "."


@attrs.define(frozen=True, slots=True, order=True)
class Object:
    """Generic object like table, schema or column, escaped with identifier rules."""

    value: str

    def as_str(self) -> str:
        """Get original value."""
        return self.value

    def as_quoted_data(self) -> QuotedDataConcat:
        """Get object represented as quoted data."""
        return QuotedDataConcat((self.value,))

    def __str__(self) -> str:
        return escape_identifier((self.value,))


def _to_object(value: str | Object) -> Object:
    if isinstance(value, Object):
        return value
    return Object(value)


@attrs.define(frozen=True, slots=True, order=True)
class QuotedData:
    """Strings and other data in single quotes."""

    value: str

    def as_str(self) -> str:
        """Get original value."""
        return self.value

    def map(self, fn: Callable[[str], str]) -> "MapQuotedData":
        """Get quoted data whose content is mapped with ``fn`` when rendered."""
        return MapQuotedData(self.value, fn)

    def __str__(self) -> str:
        return escape_literal((self.value,))


@attrs.define(frozen=True, slots=True)
class MapQuotedData:
    """Quoted data with its content mapped at render time."""

    value: str
    fn: Callable[[str], str]

    def __str__(self) -> str:
        return escape_literal((self.fn(self.value),))


@attrs.define(frozen=True, slots=True, order=True)
class Schema:
    """Database schema name."""

    object: Object = attrs.field(converter=_to_object)

    def as_str(self) -> str:
        """Get original value."""
        return self.object.as_str()

    def as_quoted_data(self) -> QuotedDataConcat:
        return self.object.as_quoted_data()

    def __str__(self) -> str:
        return str(self.object)


def _to_schema(value: str | Object | Schema) -> Schema:
    if isinstance(value, Schema):
        return value
    return Schema(value)


@attrs.define(frozen=True, slots=True, order=True)
class Table:
    """Database table name."""

    object: Object = attrs.field(converter=_to_object)

    def with_schema(self, schema: str | Object | Schema) -> "SchemaTable":
        """Construct `SchemaTable` from this table and the given schema."""
        return SchemaTable(schema, self)

    def qualify(self, schema: str | Object | Schema | None) -> "Table | SchemaTable":
        """Qualify this table with the schema, if one is given.

        Examples
        --------
        >>> str(Table("baz").qualify("foo"))
        'foo.baz'
        >>> str(Table("baz").qualify(None))
        'baz'
        """
        if schema is None:
            return self
        return self.with_schema(schema)

    def with_postfix(self, postfix: str) -> ObjectConcat:
        """Get this table name with the postfix, escaped as one identifier."""
        return ObjectConcat((self.as_str(), postfix))

    def with_postfix_sep(self, postfix: str, separator: str) -> ObjectConcat:
        """Get this table name with the postfix separated by the separator,
        escaped as one identifier."""
        return ObjectConcat((self.as_str(), separator, postfix))

    def as_str(self) -> str:
        """Get original value."""
        return self.object.as_str()

    def as_quoted_data(self) -> QuotedDataConcat:
        return self.object.as_quoted_data()

    def __str__(self) -> str:
        return str(self.object)


def _to_table(value: str | Object | Table) -> Table:
    if isinstance(value, Table):
        return value
    return Table(value)


@attrs.define(frozen=True, slots=True, order=True)
class SchemaTable:
    """Table name in a schema.

    Schema and table are escaped together as one identifier, so quoting
    applies to the whole qualified name.
    """

    schema: Schema = attrs.field(converter=_to_schema)
    table: Table = attrs.field(converter=_to_table)

    @classmethod
    def from_pair(cls, pair: tuple[str | Object | Schema, str | Object | Table]) -> Self:
        schema, table = pair
        return cls(schema, table)

    def _fragments(self) -> tuple[str, str, str]:
        return (self.schema.as_str(), SCHEMA_SEPARATOR, self.table.as_str())

    def with_postfix(self, postfix: str) -> ObjectConcat:
        """Get this table name with the postfix, escaped as one identifier.

        Examples
        --------
        >>> str(SchemaTable("foo", "baz").with_postfix("_quix"))
        'foo.baz_quix'
        """
        return ObjectConcat((*self._fragments(), postfix))

    def with_postfix_sep(self, postfix: str, separator: str) -> ObjectConcat:
        return ObjectConcat((*self._fragments(), separator, postfix))

    def as_quoted_data(self) -> QuotedDataConcat:
        """Get ``schema.table`` represented as quoted data."""
        return QuotedDataConcat(self._fragments())

    def __str__(self) -> str:
        return escape_identifier(self._fragments())


@attrs.define(frozen=True, slots=True, order=True)
class Column:
    """Table column name."""

    object: Object = attrs.field(converter=_to_object)

    def as_str(self) -> str:
        """Get original value."""
        return self.object.as_str()

    def as_quoted_data(self) -> QuotedDataConcat:
        return self.object.as_quoted_data()

    def __str__(self) -> str:
        return str(self.object)


def _to_column(value: str | Object | Column) -> Column:
    if isinstance(value, Column):
        return value
    return Column(value)


@attrs.define(frozen=True, slots=True, order=True)
class ColumnType[D: Dialect]:
    """Column type name for the SQL dialect ``D``.

    Column types of different dialects never compare equal, even if their
    names do.
    """

    dialect: type[D] = attrs.field(order=lambda d: d.__name__)
    object: Object = attrs.field(converter=_to_object)

    @classmethod
    def of(cls, dialect: type[D], value_type: ValueType) -> "ColumnType[D]":
        """Get the column type the dialect uses for the value type.

        Raises
        ------
        UnsupportedDataTypeError
            If the dialect has no type registered for the value type.

        Examples
        --------
        >>> from format_sql_query.data_type import Int32, MonetDbDialect
        >>> str(ColumnType.of(MonetDbDialect, Int32))
        'INT'
        """
        return cls(dialect, sql_type(dialect, value_type))

    def as_str(self) -> str:
        """Get original value."""
        return self.object.as_str()

    def __str__(self) -> str:
        return str(self.object)


@attrs.define(frozen=True, slots=True, order=True)
class ColumnSchema[D: Dialect]:
    """Column name and type for the SQL dialect ``D``."""

    column: Column = attrs.field(converter=_to_column)
    column_type: ColumnType[D]

    @classmethod
    def of(
        cls,
        dialect: type[D],
        column: str | Object | Column,
        value_type: ValueType,
    ) -> "ColumnSchema[D]":
        return cls(column, ColumnType.of(dialect, value_type))

    @classmethod
    def from_pair(cls, pair: tuple[str | Object | Column, ColumnType[D]]) -> "ColumnSchema[D]":
        column, column_type = pair
        return cls(column, column_type)

    @property
    def dialect(self) -> type[D]:
        return self.column_type.dialect

    def __str__(self) -> str:
        return f"{self.column} {self.column_type}"


def column_definitions[D: Dialect](schemas: Iterable[ColumnSchema[D]]) -> str:
    """Join column schemas for use in a column definition list.

    Raises
    ------
    DialectMismatchError
        If the column schemas are not all of the same dialect.

    Examples
    --------
    >>> from format_sql_query.data_type import Int64, SqlServerDialect
    >>> column_definitions(
    ...     [
    ...         ColumnSchema.of(SqlServerDialect, "id", Int64),
    ...         ColumnSchema.of(SqlServerDialect, "full name", str),
    ...     ]
    ... )
    'id BIGINT, "full name" NVARCHAR'
    """
    items = list(schemas)
    dialects = {schema.dialect for schema in items}
    if len(dialects) > 1:
        names = ", ".join(sorted(d.__name__ for d in dialects))
        raise DialectMismatchError(f"Column schemas mix dialects: {names}")
    return ", ".join(str(schema) for schema in items)
