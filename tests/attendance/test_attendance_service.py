from __future__ import annotations

from datetime import date

import pytest

from employee_management.attendance.service import AttendanceService
from employee_management.core.enums import AttendanceStatus
from employee_management.core.exceptions import AuthorizationError, ValidationError


def _records(*pairs):
    return [{"employee": e, "status": s} for e, s in pairs]


def test_save_then_get_returns_exactly_saved_records(attendance_repo, admin):
    svc = AttendanceService(attendance_repo)

    svc.save_attendance(actor=admin, date="2024-01-15", records=_records(("E1", "present"), ("E2", "absent")))
    sheet = svc.get_attendance_by_date(actor=admin, date="2024-01-15")

    assert sheet is not None
    assert sheet.work_date == date(2024, 1, 15)
    assert [(r.employee_id, r.status) for r in sheet.records] == [
        ("E1", AttendanceStatus.PRESENT),
        ("E2", AttendanceStatus.ABSENT),
    ]


def test_resave_replaces_instead_of_merging(attendance_repo, admin):
    svc = AttendanceService(attendance_repo)

    first_id = svc.save_attendance(actor=admin, date="2024-01-15", records=_records(("E1", "present"), ("E2", "absent")))
    second_id = svc.save_attendance(actor=admin, date="2024-01-15", records=_records(("E2", "present")))

    sheet = svc.get_attendance_by_date(actor=admin, date="2024-01-15")
    assert first_id == second_id
    assert [(r.employee_id, r.status) for r in sheet.records] == [("E2", AttendanceStatus.PRESENT)]


def test_report_counts_match_submitted_records(attendance_repo, admin):
    svc = AttendanceService(attendance_repo)
    svc.save_attendance(actor=admin, date="2024-01-16", records=_records(("E1", "absent"), ("E2", "absent")))
    svc.save_attendance(actor=admin, date="2024-01-15", records=_records(("E1", "present"), ("E2", "absent")))

    report = [r.to_dict() for r in svc.get_report(actor=admin)]

    assert report == [
        {"date": "2024-01-15", "present": 1, "absent": 1},
        {"date": "2024-01-16", "present": 0, "absent": 2},
    ]


def test_get_by_date_resolves_employee_details(attendance_repo, admin):
    svc = AttendanceService(attendance_repo)
    svc.save_attendance(actor=admin, date="2024-01-15", records=_records(("E1", "present"), ("X9", "absent")))

    records = svc.get_attendance_by_date(actor=admin, date="2024-01-15").to_dict()["records"]

    assert records[0]["employee"] == {
        "employeeId": "E1",
        "name": "Asha Menon",
        "department": {"id": 1, "name": "Engineering"},
    }
    # unknown codes are kept but not resolved
    assert records[1] == {"employeeId": "X9", "employee": None, "status": "absent"}


def test_get_by_date_without_sheet_returns_none(attendance_repo, staff):
    assert AttendanceService(attendance_repo).get_attendance_by_date(actor=staff, date="2024-03-01") is None


def test_employee_object_is_accepted_as_reference(attendance_repo, admin):
    svc = AttendanceService(attendance_repo)
    svc.save_attendance(
        actor=admin,
        date="2024-01-15",
        records=[{"employee": {"employeeId": "E2", "name": "Ravi Kumar"}, "status": "present"}],
    )
    assert svc.get_attendance_by_date(actor=admin, date="2024-01-15").records[0].employee_id == "E2"


def test_empty_record_list_is_a_valid_sheet(attendance_repo, admin):
    svc = AttendanceService(attendance_repo)
    svc.save_attendance(actor=admin, date="2024-01-15", records=[])

    assert svc.get_attendance_by_date(actor=admin, date="2024-01-15").records == []
    assert [r.to_dict() for r in svc.get_report(actor=admin)] == [{"date": "2024-01-15", "present": 0, "absent": 0}]


@pytest.mark.parametrize(
    "day, records",
    [
        (None, []),
        ("", []),
        ("2024-01-15", None),
        ("2024-01-15", {"employee": "E1", "status": "present"}),
        ("15/01/2024", []),
        ("2024-01-15", [{"employee": "E1", "status": "late"}]),
        ("2024-01-15", [{"employee": "", "status": "present"}]),
        ("2024-01-15", ["E1"]),
    ],
)
def test_save_rejects_missing_or_malformed_input(attendance_repo, admin, day, records):
    svc = AttendanceService(attendance_repo)
    with pytest.raises(ValidationError):
        svc.save_attendance(actor=admin, date=day, records=records)
    assert attendance_repo.daily_report() == []


def test_get_by_date_requires_date(attendance_repo, admin):
    with pytest.raises(ValidationError):
        AttendanceService(attendance_repo).get_attendance_by_date(actor=admin, date=None)


def test_only_admin_can_save(attendance_repo, staff):
    with pytest.raises(AuthorizationError):
        AttendanceService(attendance_repo).save_attendance(
            actor=staff, date="2024-01-15", records=_records(("E1", "present"))
        )
