"""
Error hierarchy raised while building dialects and rendering SQL.
"""

from __future__ import annotations


class DialectError(Exception):
    """Base error for dialect-related failures."""


class DialectConfigurationError(DialectError):
    """Raised when a backend name or environment configuration is invalid."""


class FrozenRegistryError(DialectError):
    """Raised when a registry is written to after dialect initialization."""


class UnknownSymbolError(DialectError, KeyError):
    """
    Raised when a keyword or clause is requested directly but was never
    registered on the active dialect.
    """

    def __init__(self, symbol: object, dialect: str | None = None) -> None:
        self.symbol = symbol
        self.dialect = dialect
        where = f" for dialect '{dialect}'" if dialect else ""
        super().__init__(f"Unknown symbol {symbol!s}{where}")

    def __str__(self) -> str:
        return str(self.args[0])


class UnsupportedStatementError(DialectError, KeyError):
    """Raised when a dialect has no statement template for a query kind."""

    def __init__(self, kind: object, dialect: str | None = None) -> None:
        self.kind = kind
        self.dialect = dialect
        where = f"Dialect '{dialect}'" if dialect else "Dialect"
        super().__init__(f"{where} does not support {kind!s} statements")

    def __str__(self) -> str:
        return str(self.args[0])


class InvalidColumnTypeError(DialectError, ValueError):
    """Raised when a column's declared type cannot be resolved."""

    def __init__(self, type_name: object, column: str | None = None) -> None:
        self.type_name = type_name
        self.column = column
        if column:
            message = f"Invalid type {type_name!r} for column '{column}'"
        else:
            message = f"Invalid column type {type_name!r}"
        super().__init__(message)
