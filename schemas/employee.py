"""Pydantic schemas for employee request/response payloads."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class EmployeeCreate(BaseModel):
    """Payload for creating an employee."""

    name: str = Field(min_length=1, max_length=100)
    email: str = Field(min_length=3, max_length=100)
    phone_number: str | None = Field(default=None, max_length=10)
    dob: date | None = Field(
        default=None,
        description="Date of birth (YYYY-MM-DD)",
    )
    major: str | None = Field(default=None, max_length=100)
    city: str | None = Field(default=None, max_length=100)
    department: str = Field(
        description="Code of an existing department",
    )

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "name": "Asha Rao",
                "email": "asha.rao@example.com",
                "phone_number": "9876543210",
                "dob": "1996-04-12",
                "major": "Computer Science",
                "city": "Bengaluru",
                "department": "CSE",
            }
        },
    )


class EmployeeUpdate(BaseModel):
    """Partial update payload; omitted or empty fields keep their value."""

    name: str | None = Field(default=None, max_length=100)
    email: str | None = Field(default=None, max_length=100)
    phone_number: str | None = Field(default=None, max_length=10)
    dob: date | None = None
    major: str | None = Field(default=None, max_length=100)
    city: str | None = Field(default=None, max_length=100)
    department: str | None = None

    model_config = ConfigDict(extra="forbid")


class EmployeeFilter(BaseModel):
    """Optional predicates for listing employees, combined with AND."""

    id: int | None = None
    name: str | None = None
    department: str | None = None


class EmployeeSchema(BaseModel):
    """Employee as returned by the API."""

    id: int
    name: str
    email: str
    phone_number: str | None = None
    dob: date | None = None
    major: str | None = None
    city: str | None = None
    department: str
    deleted_at: date | None = None

    model_config = ConfigDict(from_attributes=True)


class EmployeeListResponse(BaseModel):
    """Envelope for the employee listing endpoint."""

    employees: list[EmployeeSchema]
