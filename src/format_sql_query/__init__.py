"""Types and helpers for building correctly escaped SQL queries.

Every object renders escaped (and quoted if needed) with ``str()``:

* `ObjectConcat` and the name types use identifier escaping rules
* `QuotedDataConcat` and `QuotedData` use data escaping rules
"""

from .data_type import (
    Dialect,
    Float32,
    Float64,
    Int8,
    Int16,
    Int32,
    Int64,
    MonetDbDialect,
    SqlServerDialect,
    available_dialects,
    get_dialect,
    register_data_type,
    register_dialect,
    sql_type,
    supports,
    value_type_by_name,
)
from .errors import (
    DialectMismatchError,
    FormatSqlQueryError,
    RenderContractViolationError,
    UnknownDialectError,
    UnknownValueTypeError,
    UnsupportedDataTypeError,
    UnsupportedIdentifierCharacterError,
)
from .escape import ObjectConcat, QuotedDataConcat, escape_identifier, escape_literal
from .names import (
    Column,
    ColumnSchema,
    ColumnType,
    MapQuotedData,
    Object,
    QuotedData,
    Schema,
    SchemaTable,
    Table,
    column_definitions,
)
from .predicates import PredicateStatement, Predicates

__all__ = [
    "Column",
    "ColumnSchema",
    "ColumnType",
    "Dialect",
    "DialectMismatchError",
    "Float32",
    "Float64",
    "FormatSqlQueryError",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "MapQuotedData",
    "MonetDbDialect",
    "Object",
    "ObjectConcat",
    "PredicateStatement",
    "Predicates",
    "QuotedData",
    "QuotedDataConcat",
    "RenderContractViolationError",
    "Schema",
    "SchemaTable",
    "SqlServerDialect",
    "Table",
    "UnknownDialectError",
    "UnknownValueTypeError",
    "UnsupportedDataTypeError",
    "UnsupportedIdentifierCharacterError",
    "available_dialects",
    "column_definitions",
    "escape_identifier",
    "escape_literal",
    "get_dialect",
    "register_data_type",
    "register_dialect",
    "sql_type",
    "supports",
    "value_type_by_name",
]
