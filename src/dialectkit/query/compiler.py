"""
Slot-by-slot rendering of abstract queries into statement templates.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Mapping, Tuple

from ..core.symbols import Clause, Keyword, QueryKind
from ..utils import get_logger, time_call
from .expressions import Q, Raw
from .query import Query

if TYPE_CHECKING:
    from ..dialects.base import Dialect


PLACEHOLDER = "?"

LOOKUP_CLAUSES = {
    "exact": Clause.EQUALS,
    "ne": Clause.NOT_EQUALS,
    "gt": Clause.GREATER,
    "gte": Clause.GREATER_EQUAL,
    "lt": Clause.LESS,
    "lte": Clause.LESS_EQUAL,
    "like": Clause.LIKE,
    "notlike": Clause.NOT_LIKE,
    "contains": Clause.LIKE,
    "regexp": Clause.REGEXP,
    "notregexp": Clause.NOT_REGEXP,
    "in": Clause.IN,
    "notin": Clause.NOT_IN,
    "between": Clause.BETWEEN,
    "notbetween": Clause.NOT_BETWEEN,
}


@dataclass
class Fragment:
    sql: str = ""
    params: List[Any] = field(default_factory=list)


class StatementCompiler:
    """
    Compile :class:`Query` values into SQL text and bound parameters.

    Each slot of the statement template is rendered by ``_render_<slot>``
    when such a method exists; any other slot is treated as a keyword
    attribute read from ``query.attributes``.
    """

    def __init__(self, dialect: "Dialect") -> None:
        self.dialect = dialect
        self.logger = get_logger("query.compiler")

    def compile(self, query: Query) -> Tuple[str, List[Any]]:
        statement = self.dialect.get_statement(query.kind)
        with time_call(f"render {query.kind}", self.logger):
            if query.lock is not None and "lock" not in statement.slots:
                self.logger.warning(
                    "Lock %s ignored: dialect %s has no lock slot for %s statements",
                    query.lock,
                    self.dialect.name,
                    query.kind,
                )
            fragments: Dict[str, str] = {}
            params: List[Any] = []
            for slot in statement.slots:
                fragment = self.render_slot(slot, query)
                fragments[slot] = fragment.sql
                params.extend(fragment.params)
            sql = statement.render(fragments)
        return sql, params

    def render_slot(self, slot: str, query: Query) -> Fragment:
        renderer: Callable[[Query], Fragment] | None = getattr(self, f"_render_{slot}", None)
        if renderer is None:
            return Fragment(self._attribute_keyword(slot, query.attributes.get(slot)))
        return renderer(query)

    # Slot renderers ----------------------------------------------------
    def _render_table(self, query: Query) -> Fragment:
        if not query.table:
            return Fragment()
        return Fragment(self.dialect.quote(query.table))

    def _render_index(self, query: Query) -> Fragment:
        if not query.index:
            return Fragment()
        return Fragment(self.dialect.quote(query.index))

    def _render_fields(self, query: Query) -> Fragment:
        if query.kind is QueryKind.INSERT:
            rows = self._insert_rows(query.fields)
            return Fragment(f"({self.dialect.quote_list(rows[0].keys())})")
        if query.kind is QueryKind.UPDATE:
            if not query.fields:
                raise ValueError("UPDATE requires at least one column assignment.")
            params: List[Any] = []
            assignments = [
                f"{self.dialect.quote(column)} = {self._placeholder(value, params)}"
                for column, value in query.fields.items()
            ]
            return Fragment(", ".join(assignments), params)
        columns = [self._select_field(item) for item in query.fields]
        return Fragment(", ".join(columns))

    def _render_values(self, query: Query) -> Fragment:
        rows = self._insert_rows(query.fields)
        columns = list(rows[0].keys())
        params: List[Any] = []
        groups: List[str] = []
        for row in rows:
            if list(row.keys()) != columns:
                raise ValueError("All inserted rows must provide the same columns in the same order.")
            values = ", ".join(self._placeholder(row[column], params) for column in columns)
            groups.append(f"({values})")
        return Fragment(", ".join(groups), params)

    def _render_distinct(self, query: Query) -> Fragment:
        if not query.distinct:
            return Fragment()
        if query.distinct is True:
            return Fragment(self.dialect.format_clause(Clause.DISTINCT))
        columns = [query.distinct] if isinstance(query.distinct, str) else query.distinct
        return Fragment(self.dialect.format_clause(Clause.DISTINCT_ON, self.dialect.quote_list(columns)))

    def _render_joins(self, query: Query) -> Fragment:
        joins: List[str] = []
        for join in query.joins:
            conditions = f" {self.dialect.get_keyword(Keyword.AND)} ".join(
                f"{self.dialect.quote(left)} = {self.dialect.quote(right)}"
                for left, right in join.on.items()
            )
            joins.append(self.dialect.format_clause(join.kind, self.dialect.quote(join.table), conditions))
        return Fragment(" ".join(joins))

    def _render_where(self, query: Query) -> Fragment:
        return self._predicate(Clause.WHERE, query.where)

    def _render_having(self, query: Query) -> Fragment:
        return self._predicate(Clause.HAVING, query.having)

    def _render_group_by(self, query: Query) -> Fragment:
        if not query.group_by:
            return Fragment()
        columns = ", ".join(self._column(item) for item in query.group_by)
        return Fragment(self.dialect.format_clause(Clause.GROUP_BY, columns))

    def _render_order_by(self, query: Query) -> Fragment:
        if not query.order_by:
            return Fragment()
        ordering = ", ".join(self._compile_ordering(item) for item in query.order_by)
        return Fragment(self.dialect.format_clause(Clause.ORDER_BY, ordering))

    def _render_limit(self, query: Query) -> Fragment:
        limit, offset = query.limit, query.offset
        if limit is not None and offset:
            return Fragment(self.dialect.format_clause(Clause.LIMIT_OFFSET, int(limit), int(offset)))
        if limit is not None:
            return Fragment(self.dialect.format_clause(Clause.LIMIT, int(limit)))
        if offset:
            return Fragment(self.dialect.format_clause(Clause.OFFSET, int(offset)))
        return Fragment()

    def _render_lock(self, query: Query) -> Fragment:
        if query.lock is None:
            return Fragment()
        return Fragment(self._slot_keyword("lock", query.lock))

    def _render_compounds(self, query: Query) -> Fragment:
        parts: List[str] = []
        params: List[Any] = []
        for clause, other in query.compounds:
            sql, other_params = self.compile(other)
            parts.append(self.dialect.format_clause(clause, sql))
            params.extend(other_params)
        return Fragment(" ".join(parts), params)

    def _render_returning(self, query: Query) -> Fragment:
        if not query.returning:
            return Fragment()
        columns = ", ".join(self._select_field(item) for item in query.returning)
        return Fragment(self.dialect.format_clause(Clause.RETURNING, columns))

    def _render_columns(self, query: Query) -> Fragment:
        if query.schema is None:
            return Fragment()
        return Fragment(self.dialect.format_columns(query.schema))

    def _render_keys(self, query: Query) -> Fragment:
        if query.schema is None:
            return Fragment()
        return Fragment(self.dialect.columns.format_keys(query.schema))

    def _render_options(self, query: Query) -> Fragment:
        if query.schema is None:
            return Fragment()
        return Fragment(self.dialect.columns.format_table_options(query.schema))

    def _attribute_keyword(self, slot: str, value: Any) -> str:
        if not value:
            return ""
        if isinstance(value, Keyword):
            return self._slot_keyword(slot, value)
        if value is True:
            try:
                keyword = Keyword(slot)
            except ValueError:
                self.logger.warning("Slot '%s' has no keyword of the same name; left empty", slot)
                return ""
            return self._slot_keyword(slot, keyword)
        if isinstance(value, Raw):
            return value.sql
        raise TypeError(f"Unsupported value {value!r} for attribute slot '{slot}'")

    def _slot_keyword(self, slot: str, keyword: Keyword) -> str:
        text = self.dialect.keywords.get(keyword)
        if text is None:
            self.logger.warning(
                "Keyword %s for slot '%s' is not registered on dialect %s; left empty",
                keyword,
                slot,
                self.dialect.name,
            )
            return ""
        return text

    # Helpers -----------------------------------------------------------
    def _insert_rows(self, data: Any) -> List[Mapping[str, Any]]:
        rows = [data] if isinstance(data, Mapping) else list(data or ())
        if not rows or not all(rows):
            raise ValueError("INSERT requires at least one row with at least one column.")
        return rows

    def _placeholder(self, value: Any, params: List[Any]) -> str:
        if isinstance(value, Raw):
            return value.sql
        params.append(value)
        return PLACEHOLDER

    def _column(self, item: Any) -> str:
        if isinstance(item, Raw):
            return item.sql
        return self.dialect.quote(item)

    def _select_field(self, item: Any) -> str:
        if isinstance(item, tuple):
            column, alias = item
            return self.dialect.format_clause(
                Clause.AS, self._column(column), self.dialect.quote_identifier(alias)
            )
        return self._column(item)

    def _compile_ordering(self, item: Any) -> str:
        if isinstance(item, Raw):
            return item.sql
        descending = item.startswith("-")
        name = item[1:] if descending else item
        clause = self.dialect.quote(name)
        if descending:
            clause += f" {self.dialect.get_keyword(Keyword.DESC)}"
        return clause

    def _predicate(self, clause: Clause, q: Q | None) -> Fragment:
        if q is None or q.is_empty():
            return Fragment()
        sql, params = self._compile_q(q)
        if not sql:
            return Fragment()
        return Fragment(self.dialect.format_clause(clause, sql), params)

    def _compile_q(self, q: Q) -> Tuple[str, List[Any]]:
        parts: List[str] = []
        params: List[Any] = []

        for child in q.children:
            if isinstance(child, Q):
                child_sql, child_params = self._compile_q(child)
                if child_sql:
                    parts.append(f"({child_sql})")
                    params.extend(child_params)
            elif isinstance(child, Raw):
                parts.append(child.sql)
            elif isinstance(child, tuple):
                field_lookup, value = child
                sql, child_params = self._compile_lookup(field_lookup, value)
                parts.append(sql)
                params.extend(child_params)
            else:
                raise TypeError(f"Unsupported predicate {child!r}")

        if not parts:
            return "", []

        separator = f" {self.dialect.get_keyword(q.connector)} "
        sql = separator.join(parts)
        if q.negated:
            sql = self.dialect.format_clause(Clause.NOT, sql)
        return sql, params

    def _compile_lookup(self, field_lookup: str, value: Any) -> Tuple[str, List[Any]]:
        field_name, lookup = field_lookup, "exact"
        if "__" in field_lookup:
            prefix, suffix = field_lookup.rsplit("__", 1)
            if suffix in LOOKUP_CLAUSES or suffix == "isnull":
                field_name, lookup = prefix, suffix

        column = self.dialect.quote(field_name)

        if lookup == "isnull":
            return self.dialect.format_clause(Clause.IS_NULL if value else Clause.IS_NOT_NULL, column), []
        if value is None:
            if lookup == "exact":
                return self.dialect.format_clause(Clause.IS_NULL, column), []
            if lookup == "ne":
                return self.dialect.format_clause(Clause.IS_NOT_NULL, column), []
            raise ValueError("NULL comparison only supported for equality.")

        clause = LOOKUP_CLAUSES[lookup]
        if clause in (Clause.IN, Clause.NOT_IN):
            values = list(value)
            if not values:
                raise ValueError(f"Lookup '{lookup}' requires at least one value.")
            params: List[Any] = []
            placeholders = ", ".join(self._placeholder(item, params) for item in values)
            return self.dialect.format_clause(clause, column, placeholders), params
        if clause in (Clause.BETWEEN, Clause.NOT_BETWEEN):
            low, high = value
            return self._bind(self.dialect.format_clause(clause, column), [low, high])
        if lookup == "contains" and not isinstance(value, Raw):
            value = f"%{value}%"
        return self._bind(self.dialect.format_clause(clause, column), [value])

    def _bind(self, sql: str, values: List[Any]) -> Tuple[str, List[Any]]:
        # clause markers trail the column, so split from the right
        pieces = sql.rsplit(PLACEHOLDER, len(values))
        params: List[Any] = []
        output = [pieces[0]]
        for value, piece in zip(values, pieces[1:]):
            output.append(self._placeholder(value, params))
            output.append(piece)
        return "".join(output), params
