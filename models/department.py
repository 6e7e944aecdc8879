"""Department model and the closed set of department codes."""

from sqlalchemy import Column, Integer, String, Text

from models.base import Base

# Department codes accepted by the service, independent of what is stored.
ALLOWED_CODES = frozenset({"CSE", "IT", "ECE", "EEE", "ME"})


def is_valid_code(code: str | None) -> bool:
    """Return True if ``code`` belongs to the allowed department codes."""
    return code in ALLOWED_CODES


class Department(Base):
    """Department model mapping to the departments table."""

    __tablename__ = "departments"

    code = Column(String(10), primary_key=True)
    name = Column(String(100), unique=True, nullable=False)
    floor = Column(Integer, nullable=False)
    description = Column(Text, nullable=False, default="")
