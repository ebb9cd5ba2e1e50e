"""
Schema values, column formatting and DDL helpers.
"""

from .builder import SchemaBuilder
from .columns import ColumnFormatter
from .core import ForeignKey, Index, Key, Schema

__all__ = ["ColumnFormatter", "ForeignKey", "Index", "Key", "Schema", "SchemaBuilder"]
