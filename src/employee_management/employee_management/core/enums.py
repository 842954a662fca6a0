from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles used for authorization."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class AttendanceStatus(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"


class SalaryStatus(str, Enum):
    """Payment status of a salary record.

    pending -> processing -> paid is the usual order, but any transition is accepted.
    """

    PENDING = "pending"
    PROCESSING = "processing"
    PAID = "paid"
