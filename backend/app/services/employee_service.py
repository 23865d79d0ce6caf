"""Employee use cases on top of the persistence gateway."""

from __future__ import annotations

import logging
from datetime import datetime

from app.models.employee import Employee
from app.services.employee_mapper import apply_partial_update, to_record, to_representation
from app.services.employee_repository import EmployeeRepository, employee_repository

logger = logging.getLogger(__name__)


class EmployeeService:
    def __init__(self, repository: EmployeeRepository) -> None:
        self.repository = repository

    async def get_all_employees(self) -> list[Employee]:
        records = await self.repository.find_all()
        return [to_representation(record) for record in records]

    async def get_employee_by_id(self, employee_id: int) -> Employee | None:
        record = await self.repository.find_by_id(employee_id)
        if record is None:
            logger.info("Employee %s not found", employee_id)
            return None
        return to_representation(record)

    async def search_employees_by_name(self, name: str) -> list[Employee]:
        records = await self.repository.search_by_name(name)
        return [to_representation(record) for record in records]

    async def create_multiple_employees(self, employees: list[Employee]) -> list[Employee]:
        records = []
        for employee in employees:
            record = to_record(employee)
            record.created_at = datetime.now()  # noqa: DTZ005
            records.append(record)

        saved = await self.repository.save_all(records)
        logger.info("Created %d employees", len(saved))
        return [to_representation(record) for record in saved]

    async def update_employee(self, employee_id: int, employee: Employee) -> Employee | None:
        record = await self.repository.find_by_id(employee_id)
        if record is None:
            logger.info("Employee %s not found, nothing to update", employee_id)
            return None

        apply_partial_update(employee, record)
        saved = await self.repository.save(record)
        logger.info("Updated employee %s", employee_id)
        return to_representation(saved)

    async def delete_employee(self, employee_id: int) -> bool:
        record = await self.repository.find_by_id(employee_id)
        if record is None:
            logger.info("Employee %s not found, nothing to delete", employee_id)
            return False

        await self.repository.delete(record)
        logger.info("Deleted employee %s", employee_id)
        return True


employee_service = EmployeeService(employee_repository)
