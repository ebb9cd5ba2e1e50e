"""
Symbols, registries, type resolution, and errors shared by every dialect.
"""

from .errors import (
    DialectConfigurationError,
    DialectError,
    FrozenRegistryError,
    InvalidColumnTypeError,
    UnknownSymbolError,
    UnsupportedStatementError,
)
from .registry import Statement, StatementRegistry, SymbolRegistry
from .symbols import Clause, Keyword, QueryKind
from .types import DataType, TypeRegistry, TypeResolver, default_type_registry

__all__ = [
    "Clause",
    "DataType",
    "DialectConfigurationError",
    "DialectError",
    "FrozenRegistryError",
    "InvalidColumnTypeError",
    "Keyword",
    "QueryKind",
    "Statement",
    "StatementRegistry",
    "SymbolRegistry",
    "TypeRegistry",
    "TypeResolver",
    "UnknownSymbolError",
    "UnsupportedStatementError",
    "default_type_registry",
]
