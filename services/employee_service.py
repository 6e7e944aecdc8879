"""Business rules for employees."""

import logging
from datetime import date, datetime
from typing import Protocol

import pytz

from app.exceptions import EntityAlreadyExists, EntityNotFound, InvalidParameter
from config.settings import settings
from models.department import Department, is_valid_code
from models.employee import Employee
from repositories.employee_repository import EmployeeRepository
from schemas.employee import EmployeeCreate, EmployeeFilter, EmployeeUpdate

logger = logging.getLogger(__name__)


class DepartmentLookup(Protocol):
    """Read access to departments needed by the employee rules."""

    def get_by_code(self, code: str) -> Department: ...


def today() -> date:
    """Current date in the configured timezone."""
    return datetime.now(pytz.timezone(settings.timezone)).date()


class EmployeeService:
    """Service validating employee writes before they reach the repository."""

    def __init__(self, repository: EmployeeRepository, departments: DepartmentLookup):
        """Initialize the service.

        Args:
            repository: Employee data access.
            departments: Used to confirm that referenced departments exist.
        """
        self.repository = repository
        self.departments = departments

    def _require_department(self, code: str) -> None:
        """Ensure ``code`` is allowed and stored.

        Raises:
            InvalidParameter: If the code is not an allowed department code.
            EntityNotFound: If the department has not been created.
        """
        if not is_valid_code(code):
            logger.info("Rejected employee department=%s: invalid code", code)
            raise InvalidParameter("department")
        self.departments.get_by_code(code)

    def create(self, employee: EmployeeCreate) -> Employee:
        """Create an employee in an existing department with a free email.

        Raises:
            InvalidParameter: If the department code is not allowed.
            EntityNotFound: If the department does not exist.
            EntityAlreadyExists: If an active employee already uses the email.
        """
        self._require_department(employee.department)

        if self.repository.exists_by_email(employee.email):
            raise EntityAlreadyExists("employee", "email", employee.email)

        return self.repository.create(employee)

    def get(self, filters: EmployeeFilter) -> list[Employee]:
        """List active employees matching the filters.

        Raises:
            EntityNotFound: If the department filter names an unknown department.
        """
        if filters.department is not None:
            if not is_valid_code(filters.department):
                raise EntityNotFound("department", filters.department)
            self.departments.get_by_code(filters.department)

        return self.repository.get(filters)

    def get_by_id(self, employee_id: int) -> Employee:
        return self.repository.get_by_id(employee_id)

    def update(self, employee_id: int, patch: EmployeeUpdate) -> Employee:
        """Apply a partial update to an active employee.

        Only fields carrying a value are checked and written.

        Raises:
            InvalidParameter: If the new department code is not allowed, or
                the patch is empty.
            EntityNotFound: If the new department or the employee does not exist.
            EntityAlreadyExists: If another active employee uses the new email.
        """
        if patch.department:
            self._require_department(patch.department)

        if patch.email and self.repository.exists_by_email(patch.email, exclude_id=employee_id):
            raise EntityAlreadyExists("employee", "email", patch.email)

        return self.repository.update(employee_id, patch)

    def delete(self, employee_id: int) -> str:
        """Soft-delete an employee.

        Raises:
            EntityNotFound: If the employee does not exist or is already deleted.
        """
        record = self.repository.get_by_id(employee_id, include_deleted=True)
        if record.deleted_at is not None:
            logger.info("Employee id=%s already deleted on %s", employee_id, record.deleted_at)
            raise EntityNotFound("employee", employee_id)

        self.repository.delete(employee_id, today())
        return "Employee deleted successfully"
