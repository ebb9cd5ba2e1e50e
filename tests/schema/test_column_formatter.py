import pytest

from dialectkit import (
    Clause,
    DataType,
    InvalidColumnTypeError,
    Keyword,
    Raw,
    Schema,
    UnknownSymbolError,
    get_mysql_dialect,
    get_postgres_dialect,
    get_sqlite_dialect,
)

dialect = get_postgres_dialect()


def format_one(options):
    return dialect.format_columns(Schema("t", {"col": options}))


def test_primary_overrides_explicit_nullable():
    assert format_one({"type": "int", "primary": True, "nullable": True}) == '"col" integer NOT NULL'


def test_unique_overrides_explicit_nullable():
    assert format_one({"type": "text", "unique": True, "nullable": True}) == '"col" text NOT NULL'


def test_nullable_flag():
    assert format_one({"type": "text", "nullable": True}) == '"col" text NULL'
    assert format_one({"type": "text", "nullable": False}) == '"col" text NOT NULL'
    assert format_one({"type": "text"}) == '"col" text NOT NULL'


def test_default_values():
    assert format_one({"type": "int", "default": 0}) == '"col" integer NOT NULL DEFAULT 0'
    assert format_one({"type": "int", "nullable": True, "default": None}) == '"col" integer NULL DEFAULT NULL'
    assert "DEFAULT" not in format_one({"type": "int"})


def test_default_literal_rendering():
    assert format_one({"type": "text", "default": "it's"}) == "\"col\" text NOT NULL DEFAULT 'it''s'"
    assert format_one({"type": "boolean", "default": True}) == '"col" boolean NOT NULL DEFAULT TRUE'
    assert format_one({"type": "timestamp", "default": Raw("CURRENT_TIMESTAMP")}) == (
        '"col" timestamp NOT NULL DEFAULT CURRENT_TIMESTAMP'
    )
    assert format_one({"type": "timestamp", "default": lambda d: Raw("now()")}) == (
        '"col" timestamp NOT NULL DEFAULT now()'
    )


def test_columns_keep_declaration_order():
    schema = Schema("users")
    schema.add_column("id", {"type": "int", "primary": True})
    schema.add_column("name", type="varchar")
    assert dialect.format_columns(schema) == '"id" integer NOT NULL,\n"name" varchar(255) NOT NULL'


def test_length_from_options_overrides_type_default():
    assert format_one({"type": "varchar", "length": 50}) == '"col" varchar(50) NOT NULL'
    assert format_one({"type": "decimal"}) == '"col" decimal(8,2) NOT NULL'


def test_collate_and_constraint():
    rendered = format_one({"type": "varchar", "length": 100, "collate": '"C"', "constraint": "name_chk"})
    assert rendered == '"col" varchar(100) COLLATE "C" CONSTRAINT "name_chk" NOT NULL'


def test_type_default_options_merge_under_explicit_options():
    # serial defaults to primary, which forces NOT NULL
    assert format_one({"type": "serial", "nullable": True}) == '"col" serial NOT NULL'


def test_invalid_type_aborts_whole_schema():
    schema = Schema("t", {"ok": {"type": "int"}, "bad": {"type": "geometry"}})
    with pytest.raises(InvalidColumnTypeError) as excinfo:
        dialect.format_columns(schema)
    assert excinfo.value.column == "bad"
    assert excinfo.value.type_name == "geometry"


def test_missing_type_is_invalid():
    with pytest.raises(InvalidColumnTypeError):
        format_one({"nullable": True})


def test_custom_resolver_lookup_errors_surface_as_invalid_type():
    class MappingResolver:
        types = {"uuid": DataType("uuid")}

        def resolve(self, type_name):
            return self.types[type_name]

    custom = get_postgres_dialect(type_resolver=MappingResolver())
    assert custom.format_columns(Schema("t", {"id": {"type": "uuid", "primary": True}})) == '"id" uuid NOT NULL'
    with pytest.raises(InvalidColumnTypeError):
        custom.format_columns(Schema("t", {"id": {"type": "int"}}))


def test_foreign_keys():
    schema = Schema("posts", {"user_id": {"type": "int"}})
    schema.add_foreign(
        "user_id",
        "users",
        "id",
        on_delete=Keyword.CASCADE,
        match=Keyword.MATCH_FULL,
        constraint="posts_user_fk",
    )
    assert dialect.columns.format_keys(schema) == (
        ',\nCONSTRAINT "posts_user_fk" FOREIGN KEY ("user_id") REFERENCES "users"("id") '
        "MATCH FULL ON DELETE CASCADE"
    )


def test_match_is_postgres_only():
    schema = Schema("posts", {"user_id": {"type": "int"}})
    schema.add_foreign("user_id", "users", match=Keyword.MATCH_SIMPLE)
    with pytest.raises(UnknownSymbolError):
        get_sqlite_dialect().columns.format_keys(schema)


def test_named_composite_keys():
    schema = Schema(
        "memberships",
        {
            "user_id": {"type": "int", "primary": "memberships_pk"},
            "group_id": {"type": "int", "primary": True, "unique": "user_group"},
            "role": {"type": "varchar", "unique": "user_group"},
        },
    )
    assert dialect.columns.format_keys(schema) == (
        ',\nCONSTRAINT "memberships_pk" PRIMARY KEY ("user_id", "group_id"),\n'
        'CONSTRAINT "user_group" UNIQUE ("group_id", "role")'
    )


def test_no_keys_renders_empty():
    assert dialect.columns.format_keys(Schema("t", {"a": {"type": "int"}})) == ""


def test_table_options():
    mysql = get_mysql_dialect()
    schema = Schema(
        "t",
        {"a": {"type": "int"}},
        options={Keyword.ENGINE: "InnoDB", Clause.CHARACTER_SET: "utf8mb4", Clause.COLLATE: None},
    )
    assert mysql.columns.format_table_options(schema) == "ENGINE InnoDB CHARACTER SET utf8mb4"
