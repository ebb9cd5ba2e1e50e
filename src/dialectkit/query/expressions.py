"""
Expression primitives carried by queries: predicate trees and raw SQL.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List

from ..core.symbols import Keyword

AND = Keyword.AND
OR = Keyword.OR


@dataclass(frozen=True)
class Raw:
    """
    SQL text emitted verbatim, never quoted or bound as a parameter.
    """

    sql: str

    def __str__(self) -> str:
        return self.sql


@dataclass
class Q:
    """
    Boolean predicate tree with Django-style ``field__lookup`` keywords.

    Positional children must be other ``Q`` nodes or :class:`Raw` SQL;
    keyword arguments become ``(lookup, value)`` leaves. Combining with an
    empty ``Q`` yields a copy of the other operand.
    """

    children: List[Any] = field(default_factory=list)
    connector: Keyword = AND
    negated: bool = False

    def __init__(self, *children: Any, **lookups: Any) -> None:
        for child in children:
            if not isinstance(child, (Q, Raw)):
                raise TypeError(f"Q children must be Q or Raw, got {child!r}")
        self.children = [*children, *lookups.items()]
        self.connector = AND
        self.negated = False

    def __or__(self, other: "Q") -> "Q":
        return self._combine(other, OR)

    def __and__(self, other: "Q") -> "Q":
        return self._combine(other, AND)

    def __invert__(self) -> "Q":
        q = self._clone()
        q.negated = not q.negated
        return q

    def _clone(self) -> "Q":
        clone = Q()
        clone.children = list(self.children)
        clone.connector = self.connector
        clone.negated = self.negated
        return clone

    def _combine(self, other: "Q", connector: Keyword) -> "Q":
        if not isinstance(other, Q):
            return NotImplemented
        if other.is_empty():
            return self._clone()
        if self.is_empty():
            return other._clone()
        q = Q()
        q.children = [self._clone(), other._clone()]
        q.connector = connector
        return q

    def is_empty(self) -> bool:
        return not self.children
