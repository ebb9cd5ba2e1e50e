"""
Column, key and table-option fragments for CREATE TABLE statements.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any, List, Mapping

from ..core.errors import InvalidColumnTypeError
from ..core.symbols import Clause, Keyword
from ..query.expressions import Raw
from .core import Key, Schema

if TYPE_CHECKING:
    from ..dialects.base import Dialect


class ColumnFormatter:
    """
    Renders a schema's column definitions against one dialect.
    """

    def __init__(self, dialect: "Dialect") -> None:
        self.dialect = dialect

    def format_columns(self, schema: Schema) -> str:
        lines = [self.format_column(name, options) for name, options in schema.columns.items()]
        return ",\n".join(lines)

    def format_column(self, name: str, options: Mapping[str, Any]) -> str:
        dialect = self.dialect
        type_name = options.get("type")
        try:
            data_type = dialect.type_resolver.resolve(type_name)
        except (InvalidColumnTypeError, LookupError) as exc:
            raise InvalidColumnTypeError(type_name, column=name) from exc

        merged = data_type.default_options()
        merged.update(options)

        type_token = dialect.normalize_type(type_name, data_type)
        if merged.get("length"):
            type_token += f"({merged['length']})"

        output: List[str] = [dialect.quote_identifier(name), type_token]

        if merged.get("collate"):
            output.append(dialect.format_clause(Clause.COLLATE, merged["collate"]))

        if merged.get("constraint"):
            output.append(
                dialect.format_clause(Clause.CONSTRAINT, dialect.quote_identifier(merged["constraint"]))
            )

        # Primary and unique columns can't be null
        if merged.get("primary") or merged.get("unique"):
            output.append(dialect.get_keyword(Keyword.NOT_NULL))
        else:
            output.append(dialect.get_keyword(Keyword.NULL if merged.get("nullable") else Keyword.NOT_NULL))

        if "default" in merged:
            output.append(self.format_default(merged["default"]))

        return " ".join(output).strip()

    def format_default(self, value: Any) -> str:
        if callable(value):
            value = value(self.dialect)
        return self.dialect.format_clause(Clause.DEFAULT, self.format_value(value))

    def format_value(self, value: Any) -> str:
        if value is None:
            return self.dialect.get_keyword(Keyword.NULL)
        if isinstance(value, Raw):
            return value.sql
        if isinstance(value, bool):
            return "TRUE" if value else "FALSE"
        if isinstance(value, (int, float, Decimal)):
            return str(value)
        escaped = str(value).replace("'", "''")
        return f"'{escaped}'"

    def format_keys(self, schema: Schema) -> str:
        keys: List[str] = []
        if schema.primary_key:
            keys.append(self._format_key(Clause.PRIMARY_KEY, schema.primary_key))
        for key in schema.unique_keys.values():
            keys.append(self._format_key(Clause.UNIQUE_KEY, key))

        dialect = self.dialect
        for foreign in schema.foreign_keys:
            parts = [
                dialect.format_clause(
                    Clause.FOREIGN_KEY,
                    dialect.quote_list(foreign.columns),
                    dialect.quote(foreign.references),
                    dialect.quote_list(foreign.reference_columns),
                )
            ]
            if foreign.match:
                parts.append(dialect.format_clause(Clause.MATCH, dialect.get_keyword(foreign.match)))
            if foreign.on_delete:
                parts.append(dialect.format_clause(Clause.ON_DELETE, dialect.get_keyword(foreign.on_delete)))
            if foreign.on_update:
                parts.append(dialect.format_clause(Clause.ON_UPDATE, dialect.get_keyword(foreign.on_update)))
            keys.append(self._with_constraint(" ".join(parts), foreign.constraint))

        if not keys:
            return ""
        return ",\n" + ",\n".join(keys)

    def format_table_options(self, schema: Schema) -> str:
        dialect = self.dialect
        output: List[str] = []
        for key, value in schema.options.items():
            if value is None or value is False:
                continue
            if isinstance(key, Clause):
                output.append(dialect.format_clause(key, value))
                continue
            keyword = dialect.get_keyword(key)
            if value is True:
                output.append(keyword)
            elif key is Keyword.INHERITS:
                parents = [value] if isinstance(value, str) else value
                output.append(f"{keyword} ({dialect.quote_list(parents)})")
            elif isinstance(value, Keyword):
                output.append(f"{keyword} {dialect.get_keyword(value)}")
            else:
                output.append(f"{keyword} {value}")
        return " ".join(output)

    def _format_key(self, clause: Clause, key: Key) -> str:
        rendered = self.dialect.format_clause(clause, self.dialect.quote_list(key.columns))
        return self._with_constraint(rendered, key.constraint)

    def _with_constraint(self, rendered: str, constraint: str | None) -> str:
        if not constraint:
            return rendered
        name = self.dialect.format_clause(Clause.CONSTRAINT, self.dialect.quote_identifier(constraint))
        return f"{name} {rendered}"
