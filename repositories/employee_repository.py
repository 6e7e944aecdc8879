"""Repository for employee database operations.

Every read and write is restricted to active rows (``deleted_at IS NULL``)
unless explicitly asked otherwise.
"""

import logging
from collections.abc import Callable
from datetime import date

from sqlalchemy import ColumnElement, func, select, update
from sqlalchemy.orm import Session

from app.exceptions import EntityNotFound, InvalidParameter
from models.employee import Employee
from repositories.base import changed_fields, database_errors
from schemas.employee import EmployeeCreate, EmployeeFilter, EmployeeUpdate

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = (
    "name",
    "email",
    "phone_number",
    "dob",
    "major",
    "city",
    "department",
)

FILTER_CLAUSES: dict[str, Callable[[object], ColumnElement[bool]]] = {
    "id": lambda value: Employee.id == value,
    "name": lambda value: Employee.name.contains(value, autoescape=True),
    "department": lambda value: Employee.department == value,
}

ACTIVE = Employee.deleted_at.is_(None)


class EmployeeRepository:
    """Data access layer for the employees table."""

    def __init__(self, db: Session):
        """Initialize repository with database session.

        Args:
            db: SQLAlchemy database session.
        """
        self.db = db

    def create(self, employee: EmployeeCreate) -> Employee:
        """Insert a new employee.

        Args:
            employee: Validated employee payload.

        Returns:
            The persisted Employee record, including its assigned id.
        """
        record = Employee(**employee.model_dump())
        with database_errors(self.db, "creating employee"):
            self.db.add(record)
            self.db.commit()
            self.db.refresh(record)
        logger.info(
            "Created employee: id=%s department=%s",
            record.id,
            record.department,
        )
        return record

    def get(self, filters: EmployeeFilter) -> list[Employee]:
        """List active employees matching every supplied filter.

        Args:
            filters: Optional id, name (substring) and department predicates.

        Returns:
            Matching Employee records ordered by id.
        """
        conditions = [ACTIVE]
        for field, clause in FILTER_CLAUSES.items():
            value = getattr(filters, field)
            if value is not None:
                conditions.append(clause(value))

        statement = select(Employee).where(*conditions).order_by(Employee.id)
        with database_errors(self.db, "listing employees"):
            return list(self.db.scalars(statement))

    def get_by_id(self, employee_id: int, include_deleted: bool = False) -> Employee:
        """Get an employee by id.

        Args:
            employee_id: The employee's id.
            include_deleted: Also return soft-deleted rows.

        Raises:
            EntityNotFound: If no matching employee exists.
        """
        statement = select(Employee).where(Employee.id == employee_id)
        if not include_deleted:
            statement = statement.where(ACTIVE)
        with database_errors(self.db, "reading employee"):
            record = self.db.scalars(statement).first()
        if record is None:
            raise EntityNotFound("employee", employee_id)
        return record

    def update(self, employee_id: int, patch: EmployeeUpdate) -> Employee:
        """Overwrite the supplied fields of an active employee.

        Args:
            employee_id: The employee's id.
            patch: Fields to change; missing or empty fields are left alone.

        Returns:
            The employee as stored after the update.

        Raises:
            InvalidParameter: If the patch carries no field to update.
            EntityNotFound: If no active employee has this id.
        """
        values = changed_fields(patch, UPDATABLE_FIELDS)
        if not values:
            raise InvalidParameter("update_fields")

        statement = (
            update(Employee)
            .where(Employee.id == employee_id, ACTIVE)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        with database_errors(self.db, "updating employee"):
            result = self.db.execute(statement)
            if result.rowcount == 0:
                self.db.rollback()
                raise EntityNotFound("employee", employee_id)
            self.db.commit()
        logger.info("Updated employee: id=%s fields=%s", employee_id, sorted(values))
        return self.get_by_id(employee_id)

    def delete(self, employee_id: int, deleted_at: date) -> None:
        """Soft-delete an active employee by stamping ``deleted_at``.

        Raises:
            EntityNotFound: If no active employee has this id.
        """
        statement = (
            update(Employee)
            .where(Employee.id == employee_id, ACTIVE)
            .values(deleted_at=deleted_at)
            .execution_options(synchronize_session=False)
        )
        with database_errors(self.db, "deleting employee"):
            result = self.db.execute(statement)
            if result.rowcount == 0:
                self.db.rollback()
                raise EntityNotFound("employee", employee_id)
            self.db.commit()
        logger.info("Soft-deleted employee: id=%s on %s", employee_id, deleted_at)

    def exists_by_email(self, email: str, exclude_id: int | None = None) -> bool:
        """Check whether an active employee already uses ``email``.

        Args:
            email: Email address to look for.
            exclude_id: Employee to ignore, used when updating that employee.
        """
        statement = (
            select(func.count())
            .select_from(Employee)
            .where(Employee.email == email, ACTIVE)
        )
        if exclude_id is not None:
            statement = statement.where(Employee.id != exclude_id)
        with database_errors(self.db, "checking employee email"):
            return self.db.execute(statement).scalar_one() > 0

    def count_by_department(self, code: str) -> int:
        """Count active employees assigned to a department."""
        statement = (
            select(func.count())
            .select_from(Employee)
            .where(Employee.department == code, ACTIVE)
        )
        with database_errors(self.db, "counting department employees"):
            return self.db.execute(statement).scalar_one()
