from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response, status

from app.core.dependencies import get_employee_service
from app.models.employee import Employee, EmployeeCreate
from app.services.employee_service import EmployeeService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"description": "Employee not found"}}
_INVALID = {status.HTTP_400_BAD_REQUEST: {"description": "Invalid input data"}}

# Ids are 64-bit integers in the store.
EmployeeId = Annotated[int, Path(ge=-(2**63), le=2**63 - 1, description="ID of the employee")]


def _not_found(employee_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Employee not found with id {employee_id}",
    )


@router.get(
    "",
    response_model=list[Employee],
    summary="Get all employees",
    description="Retrieves a list of all employees",
)
async def list_employees(
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    try:
        return await service.get_all_employees()
    except Exception as err:
        logger.exception("Failed to list employees")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve employees",
        ) from err


@router.get(
    "/search",
    response_model=list[Employee],
    summary="Search employees by name",
    description="Retrieves a list of employees whose names match the search criteria",
)
async def search_employees(
    name: str = Query(..., description="Name to search for"),
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    return await service.search_employees_by_name(name)


@router.get(
    "/{employee_id}",
    response_model=Employee,
    responses=_NOT_FOUND,
    summary="Get an employee by ID",
    description="Retrieves an employee by their ID",
)
async def get_employee(
    employee_id: EmployeeId,
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    try:
        employee = await service.get_employee_by_id(employee_id)
    except Exception as err:
        logger.exception("Failed to get employee %s", employee_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve employee",
        ) from err

    if employee is None:
        raise _not_found(employee_id)

    return employee


@router.post(
    "",
    response_model=list[Employee],
    responses=_INVALID,
    summary="Create multiple employees",
    description="Creates a list of new employees",
)
async def create_employees(
    employees: list[EmployeeCreate],
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    return await service.create_multiple_employees(employees)


@router.put(
    "/{employee_id}",
    response_model=Employee,
    responses={**_NOT_FOUND, **_INVALID},
    summary="Update an employee",
    description="Updates an existing employee by their ID",
)
async def update_employee(
    employee_id: EmployeeId,
    employee: Employee,
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    updated = await service.update_employee(employee_id, employee)
    if updated is None:
        raise _not_found(employee_id)
    return updated


@router.delete(
    "/{employee_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_NOT_FOUND,
    summary="Delete an employee",
    description="Deletes an employee by their ID",
)
async def delete_employee(
    employee_id: EmployeeId,
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    if not await service.delete_employee(employee_id):
        raise _not_found(employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
