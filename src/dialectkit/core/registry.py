"""
Registries mapping abstract symbols and query kinds to dialect text.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import cached_property
from typing import Generic, Iterator, Mapping, Tuple, TypeVar

from .errors import FrozenRegistryError, UnknownSymbolError, UnsupportedStatementError
from .symbols import QueryKind

K = TypeVar("K")
V = TypeVar("V")

_SLOT_RE = re.compile(r"\{(\w+)\}")


class _Registry(Generic[K, V]):
    """
    Insertion-ordered mapping with last-write-wins registration and a
    one-way freeze.
    """

    def __init__(self, key_type: type, *, owner: str | None = None) -> None:
        self.key_type = key_type
        self.owner = owner
        self._entries: dict[K, V] = {}
        self._frozen = False

    def register(self, key: K, value: V) -> None:
        if self._frozen:
            raise FrozenRegistryError(
                f"Cannot register {key!s}: registry for '{self.owner}' is frozen"
            )
        if not isinstance(key, self.key_type):
            raise TypeError(
                f"Expected {self.key_type.__name__} key, received {type(key).__name__}"
            )
        self._entries[key] = self._coerce(value)

    def add_many(self, mapping: Mapping[K, V]) -> None:
        for key, value in mapping.items():
            self.register(key, value)

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def items(self) -> Iterator[Tuple[K, V]]:
        return iter(self._entries.items())

    def _coerce(self, value: V) -> V:
        return value

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[K]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


class SymbolRegistry(_Registry[K, str]):
    """
    Keyword, clause, or alias table for one dialect.
    """

    def lookup(self, symbol: K) -> str:
        try:
            return self._entries[symbol]
        except KeyError as exc:
            raise UnknownSymbolError(symbol, self.owner) from exc

    def get(self, symbol: K, default: str | None = None) -> str | None:
        return self._entries.get(symbol, default)


@dataclass(frozen=True)
class Statement:
    """
    Statement template containing ``{slot}`` placeholders.

    Slots missing from the rendered fragments, or rendered as empty text,
    disappear along with the doubled whitespace they would leave behind.
    """

    template: str

    @cached_property
    def _pieces(self) -> list[str]:
        # even indexes are literal text, odd indexes are slot names
        return _SLOT_RE.split(self.template)

    @property
    def slots(self) -> tuple[str, ...]:
        return tuple(self._pieces[1::2])

    def render(self, fragments: Mapping[str, str]) -> str:
        parts: list[str] = []
        for index, piece in enumerate(self._pieces):
            text = (fragments.get(piece) or "") if index % 2 else piece
            if not text:
                continue
            if parts and parts[-1].endswith(" ") and text.startswith(" "):
                text = text.lstrip(" ")
                if not text:
                    continue
            parts.append(text)
        return "".join(parts).strip()


class StatementRegistry(_Registry[QueryKind, Statement]):
    """
    Statement templates keyed by query kind.
    """

    def __init__(self, *, owner: str | None = None) -> None:
        super().__init__(QueryKind, owner=owner)

    def get(self, kind: QueryKind) -> Statement:
        try:
            return self._entries[kind]
        except KeyError as exc:
            raise UnsupportedStatementError(kind, self.owner) from exc

    def _coerce(self, value: Statement | str) -> Statement:
        if isinstance(value, Statement):
            return value
        return Statement(value)
