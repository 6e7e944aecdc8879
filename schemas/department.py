"""Pydantic schemas for department request/response payloads."""

from pydantic import BaseModel, ConfigDict, Field


class DepartmentCreate(BaseModel):
    """Payload for creating a department."""

    code: str = Field(
        description="Department code, one of CSE, IT, ECE, EEE, ME",
    )
    name: str = Field(
        min_length=1,
        max_length=100,
        description="Unique display name",
    )
    floor: int = Field(
        gt=0,
        description="Floor the department sits on",
    )
    description: str = Field(
        default="",
        description="Free text description",
    )

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "code": "IT",
                "name": "Information Technology",
                "floor": 1,
                "description": "",
            }
        },
    )


class DepartmentUpdate(BaseModel):
    """Payload for updating a department. The code itself is immutable."""

    name: str | None = Field(default=None, max_length=100)
    floor: int | None = Field(default=None, gt=0)
    description: str | None = None

    model_config = ConfigDict(extra="forbid")


class DepartmentSchema(BaseModel):
    """Department as returned by the API."""

    code: str
    name: str
    floor: int
    description: str = ""

    model_config = ConfigDict(from_attributes=True)
