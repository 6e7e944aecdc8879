"""Repository for department database operations."""

import logging

from sqlalchemy import delete, func, select, update
from sqlalchemy.orm import Session

from app.exceptions import EntityNotFound, InvalidParameter
from models.department import Department
from repositories.base import changed_fields, database_errors
from schemas.department import DepartmentCreate, DepartmentUpdate

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("name", "floor", "description")


class DepartmentRepository:
    """Data access layer for the departments table."""

    def __init__(self, db: Session):
        """Initialize repository with database session.

        Args:
            db: SQLAlchemy database session.
        """
        self.db = db

    def create(self, department: DepartmentCreate) -> Department:
        """Insert a new department.

        Args:
            department: Validated department payload.

        Returns:
            The persisted Department record.
        """
        record = Department(**department.model_dump())
        with database_errors(self.db, "creating department"):
            self.db.add(record)
            self.db.commit()
            self.db.refresh(record)
        logger.info("Created department: code=%s", record.code)
        return record

    def get(self) -> list[Department]:
        """Return every department ordered by code."""
        statement = select(Department).order_by(Department.code)
        with database_errors(self.db, "listing departments"):
            return list(self.db.scalars(statement))

    def get_by_code(self, code: str) -> Department:
        """Get a department by its code.

        Raises:
            EntityNotFound: If no department has this code.
        """
        statement = select(Department).where(Department.code == code)
        with database_errors(self.db, "reading department"):
            record = self.db.scalars(statement).first()
        if record is None:
            raise EntityNotFound("department", code)
        return record

    def update(self, code: str, patch: DepartmentUpdate) -> Department:
        """Overwrite the supplied name/floor/description of a department.

        Args:
            code: Code of the department to update.
            patch: Fields to change; missing or empty fields are left alone.

        Returns:
            The department as stored after the update.

        Raises:
            InvalidParameter: If the patch carries no field to update.
            EntityNotFound: If no department has this code.
        """
        values = changed_fields(patch, UPDATABLE_FIELDS)
        if not values:
            raise InvalidParameter("update_fields")

        statement = (
            update(Department)
            .where(Department.code == code)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        with database_errors(self.db, "updating department"):
            result = self.db.execute(statement)
            if result.rowcount == 0:
                self.db.rollback()
                raise EntityNotFound("department", code)
            self.db.commit()
        logger.info("Updated department: code=%s fields=%s", code, sorted(values))
        return self.get_by_code(code)

    def delete(self, code: str) -> None:
        """Physically remove a department.

        Raises:
            EntityNotFound: If no row was removed.
        """
        statement = (
            delete(Department)
            .where(Department.code == code)
            .execution_options(synchronize_session=False)
        )
        with database_errors(self.db, "deleting department"):
            result = self.db.execute(statement)
            if result.rowcount == 0:
                self.db.rollback()
                raise EntityNotFound("department", code)
            self.db.commit()
        logger.info("Deleted department: code=%s", code)

    def exists_by_name(self, name: str, exclude_code: str | None = None) -> bool:
        """Check whether a department already uses ``name``.

        Args:
            name: Display name to look for.
            exclude_code: Department to ignore, used when renaming.

        Returns:
            True if another department has this name.
        """
        statement = select(func.count()).select_from(Department).where(Department.name == name)
        if exclude_code is not None:
            statement = statement.where(Department.code != exclude_code)
        with database_errors(self.db, "checking department name"):
            return self.db.execute(statement).scalar_one() > 0
