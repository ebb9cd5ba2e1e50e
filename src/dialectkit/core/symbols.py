"""
Closed symbol sets for keywords and clauses.

Symbols name a SQL concept independently of how a backend spells it. The
text for each symbol lives in a dialect's registries.
"""

from __future__ import annotations

from enum import Enum


class Keyword(Enum):
    """Single-token (or fixed multi-token) SQL keywords."""

    ALL = "all"
    AND = "and"
    ASC = "asc"
    CASCADE = "cascade"
    CONCURRENTLY = "concurrently"
    CONTINUE_IDENTITY = "continue_identity"
    DELETE_ROWS = "delete_rows"
    DESC = "desc"
    DROP = "drop"
    ENGINE = "engine"
    FOR_SHARE_LOCK = "for_share_lock"
    FOR_UPDATE_LOCK = "for_update_lock"
    GLOBAL = "global"
    INHERITS = "inherits"
    LOCAL = "local"
    MATCH_FULL = "match_full"
    MATCH_PARTIAL = "match_partial"
    MATCH_SIMPLE = "match_simple"
    NO_ACTION = "no_action"
    NOT_NULL = "not_null"
    NULL = "null"
    ON_COMMIT = "on_commit"
    ONLY = "only"
    OR = "or"
    PRESERVE_ROWS = "preserve_rows"
    RESTART_IDENTITY = "restart_identity"
    RESTRICT = "restrict"
    SET_DEFAULT = "set_default"
    SET_NULL = "set_null"
    TABLESPACE = "tablespace"
    TEMPORARY = "temporary"
    UNIQUE = "unique"
    UNLOGGED = "unlogged"
    WITH_OIDS = "with_oids"
    WITHOUT_OIDS = "without_oids"

    def __str__(self) -> str:
        return f"Keyword.{self.name}"


class Clause(Enum):
    """
    Clause symbols rendered from ``%s`` format strings.

    The number of placeholders is fixed per symbol; every backend that
    overrides a clause keeps that arity.
    """

    AS = "as"
    BETWEEN = "between"
    CHARACTER_SET = "character_set"
    COLLATE = "collate"
    CONSTRAINT = "constraint"
    DEFAULT = "default"
    DISTINCT = "distinct"
    DISTINCT_ON = "distinct_on"
    EQUALS = "equals"
    EXCEPT = "except"
    EXCEPT_ALL = "except_all"
    FOREIGN_KEY = "foreign_key"
    GREATER = "greater"
    GREATER_EQUAL = "greater_equal"
    GROUP_BY = "group_by"
    HAVING = "having"
    IN = "in"
    INTERSECT = "intersect"
    INTERSECT_ALL = "intersect_all"
    IS_NOT_NULL = "is_not_null"
    IS_NULL = "is_null"
    JOIN = "join"
    LEFT_JOIN = "left_join"
    LESS = "less"
    LESS_EQUAL = "less_equal"
    LIKE = "like"
    LIMIT = "limit"
    LIMIT_OFFSET = "limit_offset"
    MATCH = "match"
    NOT = "not"
    NOT_BETWEEN = "not_between"
    NOT_EQUALS = "not_equals"
    NOT_IN = "not_in"
    NOT_LIKE = "not_like"
    NOT_REGEXP = "not_regexp"
    OFFSET = "offset"
    ON_DELETE = "on_delete"
    ON_UPDATE = "on_update"
    ORDER_BY = "order_by"
    OUTER_JOIN = "outer_join"
    PRIMARY_KEY = "primary_key"
    REGEXP = "regexp"
    RETURNING = "returning"
    RIGHT_JOIN = "right_join"
    RLIKE = "rlike"
    STRAIGHT_JOIN = "straight_join"
    UNION = "union"
    UNION_ALL = "union_all"
    UNIQUE_KEY = "unique_key"
    WHERE = "where"
    WITH = "with"

    def __str__(self) -> str:
        return f"Clause.{self.name}"


class QueryKind(Enum):
    """Statement kinds a dialect may provide templates for."""

    SELECT = "select"
    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"
    TRUNCATE = "truncate"
    CREATE_TABLE = "create_table"
    CREATE_INDEX = "create_index"
    DROP_TABLE = "drop_table"
    DROP_INDEX = "drop_index"

    def __str__(self) -> str:
        return self.name
