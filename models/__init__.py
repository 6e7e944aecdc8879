"""Models package."""

from models.base import Base
from models.department import ALLOWED_CODES, Department, is_valid_code
from models.employee import Employee

__all__ = [
    "Base",
    "ALLOWED_CODES",
    "Department",
    "Employee",
    "is_valid_code",
]
