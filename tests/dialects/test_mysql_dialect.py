from dialectkit import Keyword, Q, Query, QueryKind, Schema, get_mysql_dialect

dialect = get_mysql_dialect()


def test_mysql_dialect_quotes_identifiers():
    assert dialect.quote_identifier("user`name") == "`user``name`"
    assert dialect.quote("analytics.events") == "`analytics`.`events`"


def test_mysql_limit_clause():
    assert dialect.render(Query.select("events", limit=10)) == "SELECT * FROM `events` LIMIT 10"
    assert dialect.render(Query.select("events", offset=5)) == (
        "SELECT * FROM `events` LIMIT 18446744073709551615 OFFSET 5"
    )
    assert dialect.render(Query.select("events", limit=10, offset=5)) == (
        "SELECT * FROM `events` LIMIT 10 OFFSET 5"
    )


def test_mysql_share_lock():
    sql = dialect.render(Query.select("jobs", where=Q(id=3), lock=Keyword.FOR_SHARE_LOCK))
    assert sql == "SELECT * FROM `jobs` WHERE `id` = ? LOCK IN SHARE MODE"


def test_mysql_update_with_order_and_limit():
    query = Query.update("users", {"active": False}, where=Q(age__lt=18), order_by=["id"], limit=100)
    sql, params = dialect.compile(query)
    assert sql == "UPDATE `users` SET `active` = ? WHERE `age` < ? ORDER BY `id` LIMIT 100"
    assert params == [False, 18]


def test_mysql_truncate_and_drop_index():
    assert dialect.supports(QueryKind.TRUNCATE)
    assert dialect.render(Query.truncate("users")) == "TRUNCATE TABLE `users`"
    assert dialect.render(Query.drop_index("users_email_idx", table="users")) == (
        "DROP INDEX `users_email_idx` ON `users`"
    )


def test_mysql_drop_temporary_table():
    query = Query.drop_table("scratch", attributes={"temporary": True})
    assert dialect.render(query) == "DROP TEMPORARY TABLE IF EXISTS `scratch`"


def test_mysql_create_table_with_unique_key_and_options():
    schema = Schema(
        "users",
        {"email": {"type": "varchar", "unique": True}},
        options={Keyword.ENGINE: "InnoDB"},
    )
    assert dialect.render(Query.create_table(schema)) == (
        "CREATE TABLE IF NOT EXISTS `users` (\n"
        "`email` varchar(255) NOT NULL,\n"
        "UNIQUE KEY (`email`)\n"
        ") ENGINE InnoDB"
    )
