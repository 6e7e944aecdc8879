"""Employee API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status

from routers.v1.dependencies import get_employee_filter, get_employee_service
from schemas.common import ErrorResponse, MessageResponse
from schemas.employee import (
    EmployeeCreate,
    EmployeeFilter,
    EmployeeListResponse,
    EmployeeSchema,
    EmployeeUpdate,
)
from services.employee_service import EmployeeService

logger = logging.getLogger(__name__)

router = APIRouter()

Service = Annotated[EmployeeService, Depends(get_employee_service)]


@router.get(
    "",
    response_model=EmployeeListResponse,
    summary="List employees",
    responses={
        400: {"model": ErrorResponse, "description": "Non-numeric id filter"},
        404: {"model": ErrorResponse, "description": "Unknown department filter"},
    },
)
def list_employees(
    filters: Annotated[EmployeeFilter, Depends(get_employee_filter)],
    service: Service,
):
    """List active employees, optionally filtered by id, name or department."""
    return EmployeeListResponse(employees=service.get(filters))


@router.get(
    "/{employee_id}",
    response_model=EmployeeSchema,
    summary="Get employee",
    responses={404: {"model": ErrorResponse}},
)
def get_employee(employee_id: int, service: Service):
    return service.get_by_id(employee_id)


@router.post(
    "",
    response_model=EmployeeSchema,
    status_code=status.HTTP_201_CREATED,
    summary="Create employee",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid department code"},
        404: {"model": ErrorResponse, "description": "Department does not exist"},
        409: {"model": ErrorResponse, "description": "Email already used"},
    },
)
def create_employee(payload: EmployeeCreate, service: Service):
    employee = service.create(payload)
    logger.info("Employee created via API: id=%s", employee.id)
    return employee


@router.put(
    "/{employee_id}",
    response_model=EmployeeSchema,
    summary="Update employee",
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
def update_employee(employee_id: int, payload: EmployeeUpdate, service: Service):
    """Partially update an employee; omitted or empty fields are kept."""
    return service.update(employee_id, payload)


@router.delete(
    "/{employee_id}",
    response_model=MessageResponse,
    summary="Delete employee",
    responses={404: {"model": ErrorResponse}},
)
def delete_employee(employee_id: int, service: Service):
    return MessageResponse(message=service.delete(employee_id))
