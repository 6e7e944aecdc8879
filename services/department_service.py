"""Business rules for departments."""

import logging
from typing import Protocol

from app.exceptions import DepartmentHasEmployees, EntityAlreadyExists, InvalidParameter
from models.department import Department, is_valid_code
from repositories.department_repository import DepartmentRepository
from schemas.department import DepartmentCreate, DepartmentUpdate

logger = logging.getLogger(__name__)


class EmployeeCounter(Protocol):
    """Anything able to count the active employees of a department."""

    def count_by_department(self, code: str) -> int: ...


class DepartmentService:
    """Service validating department writes before they reach the repository."""

    def __init__(self, repository: DepartmentRepository, employees: EmployeeCounter):
        """Initialize the service.

        Args:
            repository: Department data access.
            employees: Used to block deletion of departments still in use.
        """
        self.repository = repository
        self.employees = employees

    def create(self, department: DepartmentCreate) -> Department:
        """Create a department after checking its code and name.

        Raises:
            InvalidParameter: If the code is not an allowed department code.
            EntityAlreadyExists: If another department already has the name.
        """
        if not is_valid_code(department.code):
            logger.info("Rejected department with invalid code=%s", department.code)
            raise InvalidParameter("code")

        if self.repository.exists_by_name(department.name):
            raise EntityAlreadyExists("department", "name", department.name)

        return self.repository.create(department)

    def get(self) -> list[Department]:
        return self.repository.get()

    def get_by_code(self, code: str) -> Department:
        return self.repository.get_by_code(code)

    def update(self, code: str, patch: DepartmentUpdate) -> Department:
        """Update name, floor and description of a department.

        Raises:
            EntityAlreadyExists: If the new name belongs to another department.
            EntityNotFound: If the department does not exist.
        """
        if patch.name and self.repository.exists_by_name(patch.name, exclude_code=code):
            raise EntityAlreadyExists("department", "name", patch.name)

        return self.repository.update(code, patch)

    def delete(self, code: str) -> str:
        """Delete a department that no active employee references.

        Raises:
            DepartmentHasEmployees: If employees are still mapped to it.
            EntityNotFound: If the department does not exist.
        """
        count = self.employees.count_by_department(code)
        if count > 0:
            logger.info("Refusing to delete department=%s with %d employees", code, count)
            raise DepartmentHasEmployees(code, count)

        self.repository.delete(code)
        return "Department deleted successfully"
