from __future__ import annotations

from app.services.employee_service import EmployeeService, employee_service


def get_employee_service() -> EmployeeService:
    return employee_service
