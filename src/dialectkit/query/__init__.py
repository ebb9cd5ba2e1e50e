"""
Abstract query values and their slot compiler.
"""

from ..core.symbols import QueryKind
from .compiler import StatementCompiler
from .expressions import Q, Raw
from .query import Join, Query

__all__ = ["Join", "Q", "Query", "QueryKind", "Raw", "StatementCompiler"]
