"""
MySQL overrides layered on the baseline dialect.
"""

from __future__ import annotations

from typing import Optional

from ..core.symbols import Clause, Keyword, QueryKind
from ..core.types import TypeResolver
from .base import Dialect, DialectConfig

MYSQL_CONFIG = DialectConfig(name="mysql", quote_character="`")


def initialize_mysql(dialect: Dialect) -> None:
    dialect.clauses.add_many(
        {
            # MySQL has no standalone OFFSET; the limit is the largest BIGINT UNSIGNED.
            Clause.OFFSET: "LIMIT 18446744073709551615 OFFSET %s",
            Clause.UNIQUE_KEY: "UNIQUE KEY (%s)",
        }
    )

    dialect.keywords.add_many(
        {
            Keyword.ENGINE: "ENGINE",
            Keyword.FOR_SHARE_LOCK: "LOCK IN SHARE MODE",
            Keyword.FOR_UPDATE_LOCK: "FOR UPDATE",
        }
    )

    dialect.statements.add_many(
        {
            QueryKind.SELECT: (
                "SELECT {distinct} {fields} FROM {table} {joins} {where} {group_by} {having} "
                "{compounds} {order_by} {limit} {lock}"
            ),
            QueryKind.UPDATE: "UPDATE {table} {joins} SET {fields} {where} {order_by} {limit}",
            QueryKind.DELETE: "DELETE FROM {table} {joins} {where} {order_by} {limit}",
            QueryKind.TRUNCATE: "TRUNCATE TABLE {table}",
            QueryKind.DROP_TABLE: "DROP {temporary} TABLE IF EXISTS {table} {action}",
            QueryKind.DROP_INDEX: "DROP INDEX {index} ON {table}",
        }
    )


def get_mysql_dialect(type_resolver: Optional[TypeResolver] = None) -> Dialect:
    return Dialect(MYSQL_CONFIG, [initialize_mysql], type_resolver=type_resolver)
