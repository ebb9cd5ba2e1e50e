import pytest

from dialectkit.core import (
    Clause,
    FrozenRegistryError,
    Keyword,
    QueryKind,
    Statement,
    StatementRegistry,
    SymbolRegistry,
    UnknownSymbolError,
    UnsupportedStatementError,
)


def test_lookup_returns_registered_value():
    registry = SymbolRegistry(Keyword, owner="test")
    registry.add_many({Keyword.NOT_NULL: "NOT NULL", Keyword.NULL: "NULL"})
    assert registry.lookup(Keyword.NOT_NULL) == "NOT NULL"
    assert registry.lookup(Keyword.NULL) == "NULL"
    assert len(registry) == 2


def test_later_add_many_replaces_value():
    registry = SymbolRegistry(Clause, owner="test")
    registry.add_many({Clause.REGEXP: "%s REGEXP ?"})
    registry.add_many({Clause.REGEXP: "%s ~* ?"})
    assert registry.lookup(Clause.REGEXP) == "%s ~* ?"
    assert len(registry) == 1


def test_collision_inside_one_mapping_keeps_last_entry():
    registry = SymbolRegistry(Keyword)
    registry.register(Keyword.FOR_UPDATE_LOCK, "FOR UPDATE")
    registry.register(Keyword.FOR_UPDATE_LOCK, "FOR NO KEY UPDATE")
    assert registry.lookup(Keyword.FOR_UPDATE_LOCK) == "FOR NO KEY UPDATE"


def test_unknown_symbol_raises():
    registry = SymbolRegistry(Keyword, owner="ansi")
    with pytest.raises(UnknownSymbolError) as excinfo:
        registry.lookup(Keyword.MATCH_FULL)
    assert excinfo.value.symbol is Keyword.MATCH_FULL
    assert "ansi" in str(excinfo.value)
    assert isinstance(excinfo.value, KeyError)


def test_get_tolerates_missing_symbol():
    registry = SymbolRegistry(Keyword)
    assert registry.get(Keyword.ONLY) is None
    assert registry.get(Keyword.ONLY, "") == ""


def test_register_rejects_foreign_symbol_type():
    registry = SymbolRegistry(Keyword)
    with pytest.raises(TypeError):
        registry.register(Clause.WHERE, "WHERE %s")


def test_frozen_registry_rejects_writes():
    registry = SymbolRegistry(Keyword, owner="postgresql")
    registry.register(Keyword.ONLY, "ONLY")
    registry.freeze()
    assert registry.frozen
    with pytest.raises(FrozenRegistryError):
        registry.register(Keyword.ONLY, "ONLY")
    with pytest.raises(FrozenRegistryError):
        registry.add_many({Keyword.DROP: "DROP"})
    assert registry.lookup(Keyword.ONLY) == "ONLY"


def test_statement_slots_follow_template_order():
    statement = Statement("UPDATE {only} {table} SET {fields} {where}")
    assert statement.slots == ("only", "table", "fields", "where")


def test_statement_render_drops_empty_slots():
    statement = Statement("SELECT {distinct} {fields} FROM {table} {where} {having} {limit}")
    sql = statement.render({"fields": '"id"', "table": '"users"', "having": ""})
    assert sql == 'SELECT "id" FROM "users"'


def test_statement_render_keeps_fragment_whitespace():
    statement = Statement("INSERT INTO {table} {fields} VALUES {values}")
    sql = statement.render({"table": '"t"', "fields": '("a")', "values": "('a  b')"})
    assert sql == "INSERT INTO \"t\" (\"a\") VALUES ('a  b')"


def test_statement_render_preserves_newlines():
    statement = Statement("CREATE {temporary} TABLE {table} (\n{columns}{keys}\n) {options}")
    sql = statement.render({"table": '"t"', "columns": '"id" integer NOT NULL'})
    assert sql == 'CREATE TABLE "t" (\n"id" integer NOT NULL\n)'


def test_statement_registry_coerces_strings():
    registry = StatementRegistry(owner="test")
    registry.add_many({QueryKind.DROP_TABLE: "DROP TABLE {table}"})
    statement = registry.get(QueryKind.DROP_TABLE)
    assert isinstance(statement, Statement)
    assert statement.slots == ("table",)


def test_statement_registry_reports_unsupported_kind():
    registry = StatementRegistry(owner="sqlite")
    with pytest.raises(UnsupportedStatementError) as excinfo:
        registry.get(QueryKind.TRUNCATE)
    assert excinfo.value.kind is QueryKind.TRUNCATE
    assert "sqlite" in str(excinfo.value)
