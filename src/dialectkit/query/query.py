"""
Abstract query values handed to a dialect for rendering.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Sequence, Tuple

from ..core.symbols import Clause, Keyword, QueryKind
from .expressions import Q

if TYPE_CHECKING:
    from ..schema.core import Schema


@dataclass(frozen=True)
class Join:
    """
    Join against ``table`` where each ``on`` item pairs a left column with a
    right column.
    """

    table: str
    on: Mapping[str, str]
    kind: Clause = Clause.JOIN


@dataclass
class Query:
    """
    Backend-agnostic description of one statement.

    ``fields`` holds the column list for SELECT and CREATE INDEX, and a
    column-to-value mapping (or a sequence of them) for INSERT and UPDATE.
    ``attributes`` feeds keyword slots such as ``{only}`` or ``{action}``.
    """

    kind: QueryKind
    table: Optional[str] = None
    fields: Any = ()
    distinct: bool | Sequence[str] = False
    joins: List[Join] = field(default_factory=list)
    where: Optional[Q] = None
    group_by: Sequence[Any] = ()
    having: Optional[Q] = None
    order_by: Sequence[Any] = ()
    limit: Optional[int] = None
    offset: Optional[int] = None
    lock: Optional[Keyword] = None
    compounds: List[Tuple[Clause, "Query"]] = field(default_factory=list)
    returning: Sequence[Any] = ()
    schema: Optional["Schema"] = None
    index: Optional[str] = None
    attributes: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def select(cls, table: str, fields: Sequence[Any] = ("*",), **kwargs: Any) -> "Query":
        return cls(QueryKind.SELECT, table=table, fields=fields, **kwargs)

    @classmethod
    def insert(
        cls, table: str, data: Mapping[str, Any] | Sequence[Mapping[str, Any]], **kwargs: Any
    ) -> "Query":
        return cls(QueryKind.INSERT, table=table, fields=data, **kwargs)

    @classmethod
    def update(cls, table: str, data: Mapping[str, Any], **kwargs: Any) -> "Query":
        return cls(QueryKind.UPDATE, table=table, fields=data, **kwargs)

    @classmethod
    def delete(cls, table: str, **kwargs: Any) -> "Query":
        return cls(QueryKind.DELETE, table=table, **kwargs)

    @classmethod
    def truncate(cls, table: str, **kwargs: Any) -> "Query":
        return cls(QueryKind.TRUNCATE, table=table, **kwargs)

    @classmethod
    def create_table(cls, schema: "Schema", **kwargs: Any) -> "Query":
        return cls(QueryKind.CREATE_TABLE, table=schema.table, schema=schema, **kwargs)

    @classmethod
    def create_index(
        cls, table: str, index: str, fields: Sequence[str], **kwargs: Any
    ) -> "Query":
        return cls(QueryKind.CREATE_INDEX, table=table, index=index, fields=fields, **kwargs)

    @classmethod
    def drop_table(cls, table: str, **kwargs: Any) -> "Query":
        return cls(QueryKind.DROP_TABLE, table=table, **kwargs)

    @classmethod
    def drop_index(cls, index: str, table: Optional[str] = None, **kwargs: Any) -> "Query":
        return cls(QueryKind.DROP_INDEX, table=table, index=index, **kwargs)

    def union(self, other: "Query", *, keep_duplicates: bool = False) -> "Query":
        self.compounds.append((Clause.UNION_ALL if keep_duplicates else Clause.UNION, other))
        return self
