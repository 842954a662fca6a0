import mysql.connector

from employee_management.container import build_container


def _db(name: str) -> dict:
    return {"host": "db.local", "port": "3307", "user": "app", "password": "pw", "database": name}


def test_each_container_connects_to_its_own_database(monkeypatch):
    seen = []
    monkeypatch.setattr(mysql.connector, "connect", lambda **kwargs: seen.append(kwargs))

    first = build_container(db_config=_db("payroll_a"), secret_key="s")
    second = build_container(db_config=_db("payroll_b"), secret_key="s")
    first.conn.connect()
    second.conn.connect()

    assert first.conn is not second.conn
    assert [c["database"] for c in seen] == ["payroll_a", "payroll_b"]
    assert seen[0]["port"] == 3307
