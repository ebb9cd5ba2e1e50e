"""
Logical column types and the resolver consulted by the column formatter.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Protocol

from .errors import InvalidColumnTypeError


@dataclass(frozen=True)
class DataType:
    """
    A logical column type with the option defaults it contributes.
    """

    name: str
    token: str | None = None
    defaults: Mapping[str, Any] = field(default_factory=dict)

    def sql_token(self) -> str:
        return self.token or self.name

    def default_options(self) -> Dict[str, Any]:
        return dict(self.defaults)


class TypeResolver(Protocol):
    def resolve(self, type_name: str) -> DataType: ...


class TypeRegistry:
    """
    Case-insensitive lookup table of :class:`DataType` definitions.
    """

    def __init__(self, types: Iterable[DataType] = ()) -> None:
        self._types: Dict[str, DataType] = {}
        for data_type in types:
            self.register(data_type)

    def register(self, data_type: DataType) -> None:
        self._types[data_type.name.lower()] = data_type

    def resolve(self, type_name: str) -> DataType:
        if not isinstance(type_name, str) or not type_name:
            raise InvalidColumnTypeError(type_name)
        try:
            return self._types[type_name.lower()]
        except KeyError as exc:
            raise InvalidColumnTypeError(type_name) from exc

    def __contains__(self, type_name: object) -> bool:
        return isinstance(type_name, str) and type_name.lower() in self._types


def default_type_registry() -> TypeRegistry:
    """
    Registry of the logical types understood by the bundled dialects.
    """

    return TypeRegistry(
        [
            DataType("bigint"),
            DataType("binary"),
            DataType("blob"),
            DataType("boolean"),
            DataType("char", defaults={"length": 1}),
            DataType("date"),
            DataType("datetime"),
            DataType("decimal", defaults={"length": "8,2"}),
            DataType("double"),
            DataType("float"),
            DataType("int"),
            DataType("integer"),
            DataType("serial", defaults={"primary": True}),
            DataType("smallint"),
            DataType("text"),
            DataType("time"),
            DataType("timestamp"),
            DataType("varchar", defaults={"length": 255}),
        ]
    )
