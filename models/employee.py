"""Employee model.

Rows are never physically removed: deleting an employee stamps
``deleted_at`` and every query filters on ``deleted_at IS NULL``.
"""

from sqlalchemy import Column, Date, ForeignKey, Integer, String

from models.base import Base


class Employee(Base):
    """Employee model mapping to the employees table."""

    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    email = Column(String(100), unique=True, nullable=False)
    phone_number = Column(String(10))
    dob = Column(Date)
    major = Column(String(100))
    city = Column(String(100))
    department = Column(
        String(10),
        ForeignKey("departments.code", name="fk_employee_department"),
        nullable=False,
        index=True,
    )
    deleted_at = Column(Date, nullable=True)
