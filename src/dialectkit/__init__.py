"""
dialectkit public package initialization.

Render backend-agnostic query and schema descriptions into the SQL text of
PostgreSQL, MySQL, SQLite or a plain ANSI baseline.
"""

from .core import (  # noqa: F401
    Clause,
    DataType,
    DialectConfigurationError,
    DialectError,
    FrozenRegistryError,
    InvalidColumnTypeError,
    Keyword,
    QueryKind,
    Statement,
    TypeRegistry,
    UnknownSymbolError,
    UnsupportedStatementError,
    default_type_registry,
)
from .dialects import (  # noqa: F401
    Dialect,
    DialectConfig,
    create_dialect,
    dialect_from_dsn,
    get_mysql_dialect,
    get_postgres_dialect,
    get_sqlite_dialect,
)
from .query import Join, Q, Query, Raw  # noqa: F401
from .schema import Schema, SchemaBuilder  # noqa: F401

__all__ = [
    "Clause",
    "DataType",
    "Dialect",
    "DialectConfig",
    "DialectConfigurationError",
    "DialectError",
    "FrozenRegistryError",
    "InvalidColumnTypeError",
    "Join",
    "Keyword",
    "Q",
    "Query",
    "QueryKind",
    "Raw",
    "Schema",
    "SchemaBuilder",
    "Statement",
    "TypeRegistry",
    "UnknownSymbolError",
    "UnsupportedStatementError",
    "create_dialect",
    "default_type_registry",
    "dialect_from_dsn",
    "get_mysql_dialect",
    "get_postgres_dialect",
    "get_sqlite_dialect",
]
