"""SQL dialects and the column types they use for Python value types.

A dialect is a class used as a tag; it is never instantiated. Each
(dialect, value type) pair is registered independently, so dialects do not
need to support the same set of value types.

Examples
--------
>>> sql_type(SqlServerDialect, bool)
'BIT'
>>> sql_type(MonetDbDialect, bool)
'BOOLEAN'
>>> supports(MonetDbDialect, Float32)
False
"""

import logging
from collections.abc import Mapping
from typing import ClassVar, NewType

from .errors import UnknownDialectError, UnknownValueTypeError, UnsupportedDataTypeError

logger = logging.getLogger(__name__)

Int8 = NewType("Int8", int)
Int16 = NewType("Int16", int)
Int32 = NewType("Int32", int)
Int64 = NewType("Int64", int)
Float32 = NewType("Float32", float)
Float64 = NewType("Float64", float)

type ValueType = type | NewType

# Python's own numeric types are as wide as the widest marker
_VALUE_TYPE_ALIASES: dict[ValueType, ValueType] = {
    int: Int64,
    float: Float64,
}

VALUE_TYPES: Mapping[str, ValueType] = {
    "bool": bool,
    "int8": Int8,
    "int16": Int16,
    "int32": Int32,
    "int64": Int64,
    "float32": Float32,
    "float64": Float64,
    "str": str,
}


class Dialect:
    """Base class for SQL dialect tags."""

    name: ClassVar[str]


_DIALECTS: dict[str, type[Dialect]] = {}
_DATA_TYPES: dict[type[Dialect], dict[ValueType, str]] = {}


def register_dialect[D: type[Dialect]](dialect: D) -> D:
    """Register a dialect under its ``name`` so it can be looked up by name."""
    name = getattr(dialect, "name", None)
    if not name or not isinstance(name, str):
        raise ValueError("Dialect must define a non-empty name")
    _DIALECTS[name.lower()] = dialect
    _DATA_TYPES.setdefault(dialect, {})
    logger.debug("Registered dialect %s", name)
    return dialect


def get_dialect(name: str) -> type[Dialect]:
    """Get a registered dialect by its case-insensitive name.

    Raises
    ------
    UnknownDialectError
        If no dialect is registered under the name.
    """
    key = name.lower()
    if key not in _DIALECTS:
        available = ", ".join(sorted(_DIALECTS))
        raise UnknownDialectError(f"Unknown dialect '{name}'. Available: {available}")
    return _DIALECTS[key]


def available_dialects() -> dict[str, type[Dialect]]:
    return dict(_DIALECTS)


def value_type_by_name(name: str) -> ValueType:
    """Get a value type by its name, e.g. ``"int32"``.

    Raises
    ------
    UnknownValueTypeError
        If the name does not denote a value type.
    """
    try:
        return VALUE_TYPES[name.lower()]
    except KeyError:
        available = ", ".join(VALUE_TYPES)
        raise UnknownValueTypeError(
            f"Unknown value type '{name}'. Available: {available}"
        ) from None


def _resolve(value_type: ValueType) -> ValueType:
    return _VALUE_TYPE_ALIASES.get(value_type, value_type)


def register_data_type(dialect: type[Dialect], value_type: ValueType, sql_type: str) -> None:
    """Register the SQL type a dialect uses for a value type."""
    _DATA_TYPES.setdefault(dialect, {})[_resolve(value_type)] = sql_type


def supports(dialect: type[Dialect], value_type: ValueType) -> bool:
    return _resolve(value_type) in _DATA_TYPES.get(dialect, {})


def sql_type(dialect: type[Dialect], value_type: ValueType) -> str:
    """Get the SQL type name a dialect uses for a value type.

    Parameters
    ----------
    dialect : type[Dialect]
        Dialect tag.
    value_type : ValueType
        Python value type such as ``bool``, ``Int32`` or ``str``.

    Returns
    -------
    str
        The SQL type name.

    Raises
    ------
    UnsupportedDataTypeError
        If the dialect has no type registered for the value type.
    """
    try:
        return _DATA_TYPES[dialect][_resolve(value_type)]
    except KeyError:
        raise UnsupportedDataTypeError(dialect, value_type) from None


@register_dialect
class SqlServerDialect(Dialect):
    name = "sqlserver"


register_data_type(SqlServerDialect, bool, "BIT")
register_data_type(SqlServerDialect, Int8, "TINYINT")
register_data_type(SqlServerDialect, Int16, "SMALLINT")
register_data_type(SqlServerDialect, Int32, "INT")
register_data_type(SqlServerDialect, Int64, "BIGINT")
register_data_type(SqlServerDialect, Float32, "REAL")
register_data_type(SqlServerDialect, Float64, "FLOAT")
register_data_type(SqlServerDialect, str, "NVARCHAR")


@register_dialect
class MonetDbDialect(Dialect):
    name = "monetdb"


register_data_type(MonetDbDialect, bool, "BOOLEAN")
register_data_type(MonetDbDialect, Int8, "TINYINT")
register_data_type(MonetDbDialect, Int16, "SMALLINT")
register_data_type(MonetDbDialect, Int32, "INT")
register_data_type(MonetDbDialect, Int64, "BIGINT")
register_data_type(MonetDbDialect, Float64, "DOUBLE")
register_data_type(MonetDbDialect, str, "STRING")
