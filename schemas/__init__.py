"""Schemas package."""

from schemas.common import ErrorResponse, MessageResponse
from schemas.department import DepartmentCreate, DepartmentSchema, DepartmentUpdate
from schemas.employee import (
    EmployeeCreate,
    EmployeeFilter,
    EmployeeListResponse,
    EmployeeSchema,
    EmployeeUpdate,
)

__all__ = [
    "DepartmentCreate",
    "DepartmentSchema",
    "DepartmentUpdate",
    "EmployeeCreate",
    "EmployeeFilter",
    "EmployeeListResponse",
    "EmployeeSchema",
    "EmployeeUpdate",
    "ErrorResponse",
    "MessageResponse",
]
