"""
Schema builder turning :class:`Schema` values into DDL statements.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List

from ..core.symbols import Keyword
from ..query.query import Query
from ..utils import get_logger
from .core import Schema

if TYPE_CHECKING:
    from ..dialects.base import Dialect


class SchemaBuilder:
    """
    Produces dialect-specific SQL for schema manipulation.
    """

    def __init__(self, dialect: "Dialect") -> None:
        self.dialect = dialect
        self.logger = get_logger("schema.builder")

    def create_table_sql(self, schema: Schema, **attributes: Any) -> str:
        return self.dialect.render(Query.create_table(schema, attributes=attributes))

    def create_indexes_sql(self, schema: Schema) -> List[str]:
        stmts: List[str] = []
        for index in schema.indexes.values():
            attributes = {"type": Keyword.UNIQUE} if index.unique else {}
            query = Query.create_index(schema.table, index.name, index.columns, attributes=attributes)
            stmts.append(self.dialect.render(query))
        return stmts

    def drop_table_sql(self, schema: Schema, **attributes: Any) -> str:
        sql = self.dialect.render(Query.drop_table(schema.table, attributes=attributes))
        self.logger.warning(
            "DROP TABLE generated for %s; confirm destructive migration before applying.",
            self.dialect.quote(schema.table),
        )
        return sql
