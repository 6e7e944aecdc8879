"""Services package."""

from services.department_service import DepartmentService
from services.employee_service import DepartmentLookup, EmployeeService

__all__ = ["DepartmentLookup", "DepartmentService", "EmployeeService"]
