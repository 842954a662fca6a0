from __future__ import annotations


def _create(client, headers, payload) -> dict:
    resp = client.post("/api/salary", json=payload, headers=headers)
    assert resp.status_code == 201, resp.get_json()
    return resp.get_json()["salary"]


def test_add_then_get_round_trips(client, admin_headers, sample_salary):
    created = _create(client, admin_headers, sample_salary)

    resp = client.get(f"/api/salary/{created['id']}", headers=admin_headers)

    salary = resp.get_json()["salary"]
    assert resp.status_code == 200
    for key, value in sample_salary.items():
        assert salary[key] == value


def test_status_patch_keeps_net_salary(client, admin_headers, sample_salary):
    created = _create(client, admin_headers, sample_salary)

    resp = client.patch(f"/api/salary/{created['id']}/status", json={"status": "paid"}, headers=admin_headers)
    assert resp.status_code == 200

    salary = client.get(f"/api/salary/{created['id']}", headers=admin_headers).get_json()["salary"]
    assert salary["status"] == "paid"
    assert salary["netSalary"] == 55000


def test_status_patch_with_unknown_status_is_400(client, admin_headers, sample_salary):
    created = _create(client, admin_headers, sample_salary)
    resp = client.patch(f"/api/salary/{created['id']}/status", json={"status": "cancelled"}, headers=admin_headers)
    assert resp.status_code == 400


def test_delete_then_get_is_404(client, admin_headers, sample_salary):
    created = _create(client, admin_headers, sample_salary)

    assert client.delete(f"/api/salary/{created['id']}", headers=admin_headers).status_code == 200

    resp = client.get(f"/api/salary/{created['id']}", headers=admin_headers)
    assert resp.status_code == 404
    assert resp.get_json() == {"success": False, "message": "Salary record not found"}


def test_put_replaces_record(client, admin_headers, sample_salary):
    created = _create(client, admin_headers, sample_salary)

    resp = client.put(
        f"/api/salary/{created['id']}",
        json={**sample_salary, "basicSalary": 52000, "netSalary": 57000},
        headers=admin_headers,
    )

    assert resp.status_code == 200
    assert resp.get_json()["salary"]["netSalary"] == 57000


def test_put_missing_record_is_404(client, admin_headers, sample_salary):
    assert client.put("/api/salary/404", json=sample_salary, headers=admin_headers).status_code == 404


def test_list_all_and_by_employee(client, admin_headers, staff_headers, sample_salary):
    _create(client, admin_headers, sample_salary)
    _create(client, admin_headers, {**sample_salary, "employeeId": "E2"})

    everything = client.get("/api/salary", headers=admin_headers).get_json()["salaries"]
    mine = client.get("/api/salary/employee/E1", headers=staff_headers).get_json()["salaries"]

    assert len(everything) == 2
    assert [s["employeeId"] for s in mine] == ["E1"]


def test_employee_cannot_read_other_history(client, staff_headers):
    assert client.get("/api/salary/employee/E2", headers=staff_headers).status_code == 403


def test_invalid_body_is_400(client, admin_headers, sample_salary):
    resp = client.post("/api/salary", json={**sample_salary, "month": 14}, headers=admin_headers)
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_employee_cannot_create_salary(client, staff_headers, sample_salary):
    assert client.post("/api/salary", json=sample_salary, headers=staff_headers).status_code == 403


def test_unstorable_amounts_and_odd_digits_are_400(client, admin_headers, sample_salary):
    for override in ({"month": "²"}, {"basicSalary": 10**400}, {"basicSalary": 1234.567}, {"basicSalary": 1e10}):
        resp = client.post("/api/salary", json={**sample_salary, **override}, headers=admin_headers)
        assert resp.status_code == 400, override
        assert resp.get_json()["success"] is False
