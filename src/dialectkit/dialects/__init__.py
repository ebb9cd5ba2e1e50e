"""
Dialect registry and backend lookup.
"""

from __future__ import annotations

import os
from typing import Dict, Optional, Sequence, Tuple
from urllib.parse import urlparse

from ..core.errors import DialectConfigurationError
from ..core.types import TypeResolver
from .base import Dialect, DialectConfig, Initializer, initialize_baseline
from .mysql import MYSQL_CONFIG, get_mysql_dialect, initialize_mysql
from .postgres import POSTGRES_CONFIG, get_postgres_dialect, initialize_postgres
from .sqlite import SQLITE_CONFIG, get_sqlite_dialect, initialize_sqlite

DIALECT_ENV = "DIALECTKIT_DIALECT"

BACKENDS: Dict[str, Tuple[DialectConfig, Sequence[Initializer]]] = {
    "ansi": (DialectConfig(name="ansi"), ()),
    "postgresql": (POSTGRES_CONFIG, (initialize_postgres,)),
    "mysql": (MYSQL_CONFIG, (initialize_mysql,)),
    "sqlite": (SQLITE_CONFIG, (initialize_sqlite,)),
}

ALIASES: Dict[str, str] = {
    "postgres": "postgresql",
    "pgsql": "postgresql",
    "psql": "postgresql",
    "mariadb": "mysql",
    "sqlite3": "sqlite",
}


def resolve_backend_name(name: str) -> str:
    """
    Normalize names such as ``postgresql+psycopg`` or ``PgSQL``.
    """
    normalized = name.strip().lower().split("+", 1)[0]
    normalized = ALIASES.get(normalized, normalized)
    if normalized not in BACKENDS:
        available = ", ".join(sorted(BACKENDS))
        raise DialectConfigurationError(f"Unknown dialect '{name}'. Available: {available}")
    return normalized


def create_dialect(
    name: Optional[str] = None, *, type_resolver: Optional[TypeResolver] = None
) -> Dialect:
    """
    Build a dialect by backend name, falling back to ``DIALECTKIT_DIALECT``.
    """
    if name is None:
        name = os.getenv(DIALECT_ENV)
        if not name:
            raise DialectConfigurationError(f"Environment variable {DIALECT_ENV} is not set")
    config, initializers = BACKENDS[resolve_backend_name(name)]
    return Dialect(config, initializers, type_resolver=type_resolver)


def dialect_from_dsn(dsn: str, *, type_resolver: Optional[TypeResolver] = None) -> Dialect:
    """
    Build the dialect matching a DSN scheme, e.g. ``postgresql://...``.
    """
    scheme = urlparse(dsn).scheme
    if not scheme:
        raise DialectConfigurationError("DSN has no scheme to select a dialect from")
    return create_dialect(scheme, type_resolver=type_resolver)


__all__ = [
    "BACKENDS",
    "DIALECT_ENV",
    "Dialect",
    "DialectConfig",
    "create_dialect",
    "dialect_from_dsn",
    "get_mysql_dialect",
    "get_postgres_dialect",
    "get_sqlite_dialect",
    "initialize_baseline",
    "resolve_backend_name",
]
