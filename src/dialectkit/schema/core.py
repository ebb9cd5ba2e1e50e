"""
Table schema values consumed by CREATE TABLE rendering.
"""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from ..core.symbols import Clause, Keyword

Columns = Union[str, Sequence[str]]


def _as_tuple(columns: Columns) -> Tuple[str, ...]:
    if isinstance(columns, str):
        return (columns,)
    return tuple(columns)


def _merge(existing: Tuple[str, ...], added: Tuple[str, ...]) -> Tuple[str, ...]:
    # redeclared columns keep their first position
    return tuple(dict.fromkeys(existing + added))


@dataclass(frozen=True)
class Key:
    """Primary or unique key, optionally named by a constraint."""

    columns: Tuple[str, ...]
    constraint: Optional[str] = None


@dataclass(frozen=True)
class ForeignKey:
    columns: Tuple[str, ...]
    references: str
    reference_columns: Tuple[str, ...]
    on_delete: Optional[Keyword] = None
    on_update: Optional[Keyword] = None
    match: Optional[Keyword] = None
    constraint: Optional[str] = None


@dataclass(frozen=True)
class Index:
    name: str
    columns: Tuple[str, ...]
    unique: bool = False


class Schema:
    """
    Ordered column definitions plus the keys, indexes and table options of
    one table.

    Column options follow the record ``{type, length, nullable, default,
    primary, unique, constraint, collate, index}``. Declaring ``primary``,
    ``unique`` or ``index`` on a column also registers the matching key; a
    string value groups columns under that key name.
    """

    def __init__(
        self,
        table: str,
        columns: Optional[Mapping[str, Mapping[str, Any]]] = None,
        *,
        options: Optional[Mapping[Union[Keyword, Clause], Any]] = None,
    ) -> None:
        self.table = table
        self.columns: "OrderedDict[str, Dict[str, Any]]" = OrderedDict()
        self.primary_key: Optional[Key] = None
        self.unique_keys: Dict[str, Key] = {}
        self.foreign_keys: List[ForeignKey] = []
        self.indexes: Dict[str, Index] = {}
        self.options: Dict[Union[Keyword, Clause], Any] = dict(options or {})
        for name, column_options in (columns or {}).items():
            self.add_column(name, column_options)

    def add_column(
        self, name: str, options: Optional[Mapping[str, Any]] = None, **extra: Any
    ) -> "Schema":
        column_options = dict(options or {})
        column_options.update(extra)
        self.columns[name] = column_options

        primary = column_options.get("primary")
        if primary:
            self.add_primary(name, constraint=primary if isinstance(primary, str) else None)
        unique = column_options.get("unique")
        if unique:
            self.add_unique(name, name=unique if isinstance(unique, str) else None)
        index = column_options.get("index")
        if index:
            self.add_index(name, name=index if isinstance(index, str) else None)
        return self

    def add_columns(self, columns: Mapping[str, Mapping[str, Any]]) -> "Schema":
        for name, options in columns.items():
            self.add_column(name, options)
        return self

    def add_primary(self, columns: Columns, *, constraint: Optional[str] = None) -> "Schema":
        existing = self.primary_key
        merged = _merge(existing.columns if existing else (), _as_tuple(columns))
        name = constraint or (existing.constraint if existing else None)
        self.primary_key = Key(merged, name)
        return self

    def add_unique(self, columns: Columns, *, name: Optional[str] = None) -> "Schema":
        cols = _as_tuple(columns)
        if name is None:
            self.unique_keys["_".join(cols)] = Key(cols)
            return self
        existing = self.unique_keys.get(name)
        merged = _merge(existing.columns if existing else (), cols)
        self.unique_keys[name] = Key(merged, name)
        return self

    def add_foreign(
        self,
        columns: Columns,
        references: str,
        reference_columns: Columns = "id",
        *,
        on_delete: Optional[Keyword] = None,
        on_update: Optional[Keyword] = None,
        match: Optional[Keyword] = None,
        constraint: Optional[str] = None,
    ) -> "Schema":
        self.foreign_keys.append(
            ForeignKey(
                columns=_as_tuple(columns),
                references=references,
                reference_columns=_as_tuple(reference_columns),
                on_delete=on_delete,
                on_update=on_update,
                match=match,
                constraint=constraint,
            )
        )
        return self

    def add_index(
        self, columns: Columns, *, name: Optional[str] = None, unique: bool = False
    ) -> "Schema":
        cols = _as_tuple(columns)
        index_name = name or f"{self.table}_{'_'.join(cols)}_idx"
        existing = self.indexes.get(index_name)
        merged = _merge(existing.columns if existing else (), cols)
        self.indexes[index_name] = Index(index_name, merged, unique or bool(existing and existing.unique))
        return self

    def get_column(self, name: str) -> Dict[str, Any]:
        try:
            return self.columns[name]
        except KeyError as exc:
            raise KeyError(f"Unknown column '{name}' on table '{self.table}'") from exc

    def column_names(self) -> Iterable[str]:
        return self.columns.keys()
