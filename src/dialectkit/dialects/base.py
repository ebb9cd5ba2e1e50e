"""
Dialect composition: baseline registration followed by backend overrides.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple

from ..core.registry import Statement, StatementRegistry, SymbolRegistry
from ..core.symbols import Clause, Keyword, QueryKind
from ..core.types import DataType, TypeResolver, default_type_registry
from ..query.compiler import StatementCompiler
from ..query.query import Query
from ..schema.columns import ColumnFormatter
from ..schema.core import Schema
from ..utils import get_logger

Initializer = Callable[["Dialect"], None]


@dataclass(frozen=True)
class DialectConfig:
    """
    Static settings of a backend.
    """

    name: str
    quote_character: str = '"'


class Dialect:
    """
    Keyword, clause, statement and type-alias tables for one backend.

    Construction seeds the baseline through :func:`initialize_baseline`, then
    runs each backend initializer in order; every initializer only calls
    ``add_many`` with the symbols it changes. The registries are frozen once
    construction finishes, so a dialect can be shared freely afterwards.
    """

    def __init__(
        self,
        config: DialectConfig,
        initializers: Sequence[Initializer] = (),
        *,
        type_resolver: Optional[TypeResolver] = None,
    ) -> None:
        self.config = config
        self.type_resolver: TypeResolver = type_resolver or default_type_registry()
        self.keywords: SymbolRegistry[Keyword] = SymbolRegistry(Keyword, owner=config.name)
        self.clauses: SymbolRegistry[Clause] = SymbolRegistry(Clause, owner=config.name)
        self.statements = StatementRegistry(owner=config.name)
        self.type_aliases: SymbolRegistry[str] = SymbolRegistry(str, owner=config.name)
        self.columns = ColumnFormatter(self)
        self.compiler = StatementCompiler(self)
        self.logger = get_logger("dialects")

        initialize_baseline(self)
        for initializer in initializers:
            initializer(self)
        for registry in (self.keywords, self.clauses, self.statements, self.type_aliases):
            registry.freeze()

        self.logger.debug(
            "Initialized %s dialect (%d keywords, %d clauses, %d statements)",
            self.name,
            len(self.keywords),
            len(self.clauses),
            len(self.statements),
        )

    @property
    def name(self) -> str:
        return self.config.name

    # Symbol lookups ------------------------------------------------------
    def get_keyword(self, keyword: Keyword) -> str:
        return self.keywords.lookup(keyword)

    def get_clause(self, clause: Clause) -> str:
        return self.clauses.lookup(clause)

    def format_clause(self, clause: Clause, *args: Any) -> str:
        template = self.get_clause(clause)
        return template % args if args else template

    def get_statement(self, kind: QueryKind) -> Statement:
        return self.statements.get(kind)

    def supports(self, kind: QueryKind) -> bool:
        return kind in self.statements

    # Identifiers ---------------------------------------------------------
    def quote_identifier(self, identifier: str) -> str:
        char = self.config.quote_character
        escaped = identifier.replace(char, char * 2)
        return f"{char}{escaped}{char}"

    def quote(self, name: str) -> str:
        """
        Quote a possibly dotted name, leaving ``*`` segments untouched.
        """
        return ".".join(
            segment if segment == "*" else self.quote_identifier(segment)
            for segment in name.split(".")
        )

    def quote_list(self, names: Iterable[str]) -> str:
        return ", ".join(self.quote(name) for name in names)

    def normalize_type(self, type_name: str, data_type: DataType) -> str:
        alias = self.type_aliases.get(type_name.lower())
        return alias if alias is not None else data_type.sql_token()

    # Rendering -----------------------------------------------------------
    def format_columns(self, schema: Schema) -> str:
        return self.columns.format_columns(schema)

    def compile(self, query: Query) -> Tuple[str, List[Any]]:
        return self.compiler.compile(query)

    def render(self, query: Query) -> str:
        sql, _ = self.compiler.compile(query)
        return sql

    def __repr__(self) -> str:
        return f"<Dialect {self.name}>"


def initialize_baseline(dialect: Dialect) -> None:
    """
    Register the ANSI-style defaults shared by most backends.

    TRUNCATE is intentionally absent; backends with native support add it.
    """

    dialect.keywords.add_many(
        {
            Keyword.ALL: "ALL",
            Keyword.AND: "AND",
            Keyword.ASC: "ASC",
            Keyword.CASCADE: "CASCADE",
            Keyword.DESC: "DESC",
            Keyword.NO_ACTION: "NO ACTION",
            Keyword.NOT_NULL: "NOT NULL",
            Keyword.NULL: "NULL",
            Keyword.OR: "OR",
            Keyword.RESTRICT: "RESTRICT",
            Keyword.SET_NULL: "SET NULL",
            Keyword.TEMPORARY: "TEMPORARY",
            Keyword.UNIQUE: "UNIQUE",
        }
    )

    dialect.clauses.add_many(
        {
            Clause.AS: "%s AS %s",
            Clause.BETWEEN: "%s BETWEEN ? AND ?",
            Clause.CHARACTER_SET: "CHARACTER SET %s",
            Clause.COLLATE: "COLLATE %s",
            Clause.CONSTRAINT: "CONSTRAINT %s",
            Clause.DEFAULT: "DEFAULT %s",
            Clause.DISTINCT: "DISTINCT",
            Clause.EQUALS: "%s = ?",
            Clause.EXCEPT: "EXCEPT %s",
            Clause.EXCEPT_ALL: "EXCEPT ALL %s",
            Clause.FOREIGN_KEY: "FOREIGN KEY (%s) REFERENCES %s(%s)",
            Clause.GREATER: "%s > ?",
            Clause.GREATER_EQUAL: "%s >= ?",
            Clause.GROUP_BY: "GROUP BY %s",
            Clause.HAVING: "HAVING %s",
            Clause.IN: "%s IN (%s)",
            Clause.INTERSECT: "INTERSECT %s",
            Clause.INTERSECT_ALL: "INTERSECT ALL %s",
            Clause.IS_NOT_NULL: "%s IS NOT NULL",
            Clause.IS_NULL: "%s IS NULL",
            Clause.JOIN: "JOIN %s ON %s",
            Clause.LEFT_JOIN: "LEFT JOIN %s ON %s",
            Clause.LESS: "%s < ?",
            Clause.LESS_EQUAL: "%s <= ?",
            Clause.LIKE: "%s LIKE ?",
            Clause.LIMIT: "LIMIT %s",
            Clause.LIMIT_OFFSET: "LIMIT %s OFFSET %s",
            Clause.NOT: "NOT (%s)",
            Clause.NOT_BETWEEN: "%s NOT BETWEEN ? AND ?",
            Clause.NOT_EQUALS: "%s != ?",
            Clause.NOT_IN: "%s NOT IN (%s)",
            Clause.NOT_LIKE: "%s NOT LIKE ?",
            Clause.NOT_REGEXP: "%s NOT REGEXP ?",
            Clause.OFFSET: "OFFSET %s",
            Clause.ON_DELETE: "ON DELETE %s",
            Clause.ON_UPDATE: "ON UPDATE %s",
            Clause.ORDER_BY: "ORDER BY %s",
            Clause.OUTER_JOIN: "FULL OUTER JOIN %s ON %s",
            Clause.PRIMARY_KEY: "PRIMARY KEY (%s)",
            Clause.REGEXP: "%s REGEXP ?",
            Clause.RIGHT_JOIN: "RIGHT JOIN %s ON %s",
            Clause.RLIKE: "%s REGEXP ?",
            Clause.STRAIGHT_JOIN: "STRAIGHT_JOIN %s ON %s",
            Clause.UNION: "UNION %s",
            Clause.UNION_ALL: "UNION ALL %s",
            Clause.UNIQUE_KEY: "UNIQUE (%s)",
            Clause.WHERE: "WHERE %s",
        }
    )

    dialect.statements.add_many(
        {
            QueryKind.INSERT: "INSERT INTO {table} {fields} VALUES {values}",
            QueryKind.SELECT: (
                "SELECT {distinct} {fields} FROM {table} {joins} {where} {group_by} {having} "
                "{compounds} {order_by} {limit}"
            ),
            QueryKind.UPDATE: "UPDATE {table} SET {fields} {where}",
            QueryKind.DELETE: "DELETE FROM {table} {where}",
            QueryKind.CREATE_TABLE: (
                "CREATE {temporary} TABLE IF NOT EXISTS {table} (\n{columns}{keys}\n) {options}"
            ),
            QueryKind.CREATE_INDEX: "CREATE {type} INDEX {index} ON {table} ({fields})",
            QueryKind.DROP_TABLE: "DROP TABLE IF EXISTS {table}",
            QueryKind.DROP_INDEX: "DROP INDEX IF EXISTS {index}",
        }
    )

    dialect.type_aliases.add_many({"int": "integer"})
