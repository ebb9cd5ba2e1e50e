"""
SQLite overrides layered on the baseline dialect.

SQLite has no TRUNCATE statement and no row locking, so neither is added.
"""

from __future__ import annotations

from typing import Optional

from ..core.symbols import Clause
from ..core.types import TypeResolver
from .base import Dialect, DialectConfig

SQLITE_CONFIG = DialectConfig(name="sqlite", quote_character='"')


def initialize_sqlite(dialect: Dialect) -> None:
    dialect.clauses.add_many({Clause.OFFSET: "LIMIT -1 OFFSET %s"})
    dialect.type_aliases.add_many({"serial": "integer"})


def get_sqlite_dialect(type_resolver: Optional[TypeResolver] = None) -> Dialect:
    return Dialect(SQLITE_CONFIG, [initialize_sqlite], type_resolver=type_resolver)
