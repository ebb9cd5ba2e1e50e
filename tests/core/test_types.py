import pytest

from dialectkit.core import DataType, InvalidColumnTypeError, TypeRegistry, default_type_registry


def test_resolve_is_case_insensitive():
    registry = default_type_registry()
    assert registry.resolve("VARCHAR").name == "varchar"
    assert "Int" in registry


def test_default_options_are_copies():
    data_type = default_type_registry().resolve("varchar")
    options = data_type.default_options()
    options["length"] = 10
    assert data_type.default_options() == {"length": 255}


def test_sql_token_prefers_explicit_token():
    assert DataType("uuid").sql_token() == "uuid"
    assert DataType("money", token="numeric").sql_token() == "numeric"


def test_unknown_type_raises():
    registry = TypeRegistry([DataType("int")])
    with pytest.raises(InvalidColumnTypeError):
        registry.resolve("geometry")
    with pytest.raises(InvalidColumnTypeError):
        registry.resolve(None)


def test_register_replaces_existing_type():
    registry = TypeRegistry([DataType("varchar", defaults={"length": 255})])
    registry.register(DataType("varchar", defaults={"length": 64}))
    assert registry.resolve("varchar").default_options() == {"length": 64}
