"""Dependency providers wiring repositories into services per request."""

from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.orm import Session

from app.exceptions import InvalidParameter
from config.database import get_db
from repositories.department_repository import DepartmentRepository
from repositories.employee_repository import EmployeeRepository
from schemas.employee import EmployeeFilter
from services.department_service import DepartmentService
from services.employee_service import EmployeeService


def get_department_service(db: Annotated[Session, Depends(get_db)]) -> DepartmentService:
    return DepartmentService(DepartmentRepository(db), EmployeeRepository(db))


def get_employee_service(db: Annotated[Session, Depends(get_db)]) -> EmployeeService:
    return EmployeeService(EmployeeRepository(db), DepartmentRepository(db))


def get_employee_filter(
    employee_id: Annotated[
        str | None, Query(alias="id", description="Exact employee id")
    ] = None,
    name: Annotated[str | None, Query(description="Substring of the employee name")] = None,
    department: Annotated[str | None, Query(description="Exact department code")] = None,
) -> EmployeeFilter:
    """Build an EmployeeFilter from query parameters.

    Empty parameters are treated as absent.

    Raises:
        InvalidParameter: If ``id`` is not an integer.
    """
    parsed_id = None
    if employee_id:
        try:
            parsed_id = int(employee_id)
        except ValueError as e:
            raise InvalidParameter("id") from e

    return EmployeeFilter(
        id=parsed_id,
        name=name or None,
        department=department or None,
    )
