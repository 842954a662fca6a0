from employee_management.database.bootstrap import iter_sql_statements


def test_splitter_ignores_semicolons_inside_quotes():
    sql = "INSERT INTO t VALUES ('a;b'); INSERT INTO t VALUES (\"c;d\");\nSELECT 1"

    assert list(iter_sql_statements(sql)) == [
        "INSERT INTO t VALUES ('a;b')",
        'INSERT INTO t VALUES ("c;d")',
        "SELECT 1",
    ]


def test_splitter_skips_empty_statements():
    assert list(iter_sql_statements(" ;; SELECT 1; ")) == ["SELECT 1"]
