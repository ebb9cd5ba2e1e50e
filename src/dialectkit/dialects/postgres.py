"""
PostgreSQL overrides layered on the baseline dialect.
"""

from __future__ import annotations

from typing import Optional

from ..core.symbols import Clause, Keyword, QueryKind
from ..core.types import TypeResolver
from .base import Dialect, DialectConfig

POSTGRES_CONFIG = DialectConfig(name="postgresql", quote_character='"')


def initialize_postgres(dialect: Dialect) -> None:
    dialect.clauses.add_many(
        {
            Clause.DISTINCT_ON: "DISTINCT ON (%s)",
            Clause.STRAIGHT_JOIN: "INNER JOIN %s ON %s",
            Clause.MATCH: "%s",
            Clause.NOT_REGEXP: "%s !~* ?",
            Clause.RETURNING: "RETURNING %s",
            Clause.REGEXP: "%s ~* ?",
            Clause.RLIKE: "%s ~* ?",
            Clause.WITH: "WITH (%s)",
        }
    )

    dialect.keywords.add_many(
        {
            Keyword.CONCURRENTLY: "CONCURRENTLY",
            Keyword.CONTINUE_IDENTITY: "CONTINUE IDENTITY",
            Keyword.DELETE_ROWS: "DELETE ROWS",
            Keyword.DROP: "DROP",
            Keyword.FOR_SHARE_LOCK: "FOR SHARE",
            Keyword.FOR_UPDATE_LOCK: "FOR UPDATE",
            Keyword.INHERITS: "INHERITS",
            Keyword.GLOBAL: "GLOBAL",
            Keyword.LOCAL: "LOCAL",
            Keyword.MATCH_FULL: "MATCH FULL",
            Keyword.MATCH_PARTIAL: "MATCH PARTIAL",
            Keyword.MATCH_SIMPLE: "MATCH SIMPLE",
            Keyword.ON_COMMIT: "ON COMMIT",
            Keyword.ONLY: "ONLY",
            Keyword.PRESERVE_ROWS: "PRESERVE ROWS",
            Keyword.RESTART_IDENTITY: "RESTART IDENTITY",
            Keyword.SET_DEFAULT: "SET DEFAULT",
            Keyword.TABLESPACE: "TABLESPACE",
            Keyword.UNIQUE: "UNIQUE",
            Keyword.UNLOGGED: "UNLOGGED",
            Keyword.WITH_OIDS: "WITH OIDS",
            Keyword.WITHOUT_OIDS: "WITHOUT OIDS",
        }
    )

    dialect.statements.add_many(
        {
            QueryKind.INSERT: "INSERT INTO {table} {fields} VALUES {values} {returning}",
            QueryKind.SELECT: (
                "SELECT {distinct} {fields} FROM {table} {joins} {where} {group_by} {having} "
                "{compounds} {order_by} {limit} {lock}"
            ),
            QueryKind.UPDATE: "UPDATE {only} {table} SET {fields} {where} {returning}",
            QueryKind.DELETE: "DELETE FROM {only} {table} {joins} {where} {returning}",
            QueryKind.TRUNCATE: "TRUNCATE {only} {table} {identity} {action}",
            QueryKind.CREATE_TABLE: (
                "CREATE {type} {temporary} {unlogged} TABLE IF NOT EXISTS {table} (\n"
                "{columns}{keys}\n) {options}"
            ),
            QueryKind.CREATE_INDEX: "CREATE {type} INDEX {concurrently} {index} ON {table} ({fields})",
            QueryKind.DROP_TABLE: "DROP TABLE IF EXISTS {table} {action}",
            QueryKind.DROP_INDEX: "DROP INDEX {concurrently} IF EXISTS {index} {action}",
        }
    )

    dialect.type_aliases.add_many(
        {
            "blob": "bytea",
            "datetime": "timestamp",
            "double": "double precision",
        }
    )


def get_postgres_dialect(type_resolver: Optional[TypeResolver] = None) -> Dialect:
    return Dialect(POSTGRES_CONFIG, [initialize_postgres], type_resolver=type_resolver)
