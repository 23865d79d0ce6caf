"""Conversions between stored employee records and their API representation."""

from __future__ import annotations

from app.models.employee import Employee
from app.models.employee_record import EmployeeRecord

# Fields a partial update may overwrite; None on the incoming side keeps the stored value.
MERGEABLE_FIELDS: tuple[str, ...] = (
    "first_name",
    "middle_name",
    "last_name_father",
    "last_name_mother",
    "age",
    "gender",
    "birth_date",
    "position",
)


def to_representation(record: EmployeeRecord) -> Employee:
    return Employee(
        id=record.id,
        first_name=record.first_name,
        middle_name=record.middle_name,
        last_name_father=record.last_name_father,
        last_name_mother=record.last_name_mother,
        age=record.age,
        gender=record.gender,
        birth_date=record.birth_date,
        position=record.position,
        created_at=record.created_at,
        active=bool(record.active),
    )


def to_record(employee: Employee) -> EmployeeRecord:
    """Build a new, unsaved record. ``id`` and ``created_at`` are left unset."""
    return EmployeeRecord(
        first_name=employee.first_name,
        middle_name=employee.middle_name,
        last_name_father=employee.last_name_father,
        last_name_mother=employee.last_name_mother,
        age=employee.age,
        gender=employee.gender,
        birth_date=employee.birth_date,
        position=employee.position,
        active=employee.active,
    )


def apply_partial_update(employee: Employee, record: EmployeeRecord) -> EmployeeRecord:
    """Merge ``employee`` into ``record`` in place.

    An omitted field and an explicit null are treated alike and keep the
    stored value. ``active`` is always taken from ``employee``, so leaving it
    out of an update resets it to false. ``id`` and ``created_at`` are never
    touched.
    """
    for field in MERGEABLE_FIELDS:
        value = getattr(employee, field)
        if value is not None:
            setattr(record, field, value)
    record.active = employee.active
    return record
