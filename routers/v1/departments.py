"""Department API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status

from routers.v1.dependencies import get_department_service
from schemas.common import ErrorResponse, MessageResponse
from schemas.department import DepartmentCreate, DepartmentSchema, DepartmentUpdate
from services.department_service import DepartmentService

logger = logging.getLogger(__name__)

router = APIRouter()

Service = Annotated[DepartmentService, Depends(get_department_service)]


@router.get("", response_model=list[DepartmentSchema], summary="List departments")
def list_departments(service: Service):
    return service.get()


@router.get(
    "/{code}",
    response_model=DepartmentSchema,
    summary="Get department",
    responses={404: {"model": ErrorResponse}},
)
def get_department(code: str, service: Service):
    return service.get_by_code(code)


@router.post(
    "",
    response_model=DepartmentSchema,
    status_code=status.HTTP_201_CREATED,
    summary="Create department",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid department code"},
        409: {"model": ErrorResponse, "description": "Department name already used"},
    },
)
def create_department(payload: DepartmentCreate, service: Service):
    """Create a department.

    The code must be one of CSE, IT, ECE, EEE or ME and the name must not be
    used by another department.
    """
    department = service.create(payload)
    logger.info("Department created via API: code=%s", department.code)
    return department


@router.put(
    "/{code}",
    response_model=DepartmentSchema,
    summary="Update department",
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
def update_department(code: str, payload: DepartmentUpdate, service: Service):
    return service.update(code, payload)


@router.delete(
    "/{code}",
    response_model=MessageResponse,
    summary="Delete department",
    responses={
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse, "description": "Employees still mapped"},
    },
)
def delete_department(code: str, service: Service):
    return MessageResponse(message=service.delete(code))
