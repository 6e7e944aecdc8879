"""Application error taxonomy.

Repositories and services raise these exceptions; the handlers in
``app.exception_handlers`` turn them into HTTP responses.
"""


class AppError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = 500
    error_code = "INTERNAL_ERROR"

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class InvalidParameter(AppError):
    """A request value is malformed or not allowed."""

    status_code = 400
    error_code = "INVALID_PARAMETER"

    def __init__(self, param: str):
        super().__init__(f"Incorrect value for parameter: {param}")
        self.param = param


class BindingFailure(AppError):
    """The request payload or parameters could not be bound."""

    status_code = 400
    error_code = "BINDING_FAILURE"


class EntityNotFound(AppError):
    """A referenced row does not exist (or was soft-deleted)."""

    status_code = 404
    error_code = "ENTITY_NOT_FOUND"

    def __init__(self, entity: str, value: object | None = None):
        if value is None:
            detail = f"No '{entity}' found"
        else:
            detail = f"No '{entity}' found for '{value}'"
        super().__init__(detail)
        self.entity = entity
        self.value = value


class EntityAlreadyExists(AppError):
    """A unique value is already taken."""

    status_code = 409
    error_code = "ENTITY_ALREADY_EXISTS"

    def __init__(self, entity: str, field: str, value: object):
        super().__init__(f"{entity} with {field} '{value}' already exists")
        self.entity = entity
        self.field = field
        self.value = value


class DepartmentHasEmployees(AppError):
    """A department cannot be removed while employees reference it."""

    status_code = 409
    error_code = "DEPARTMENT_HAS_EMPLOYEES"

    def __init__(self, code: str, count: int):
        super().__init__("department has employees mapped")
        self.code = code
        self.count = count


class DatabaseError(AppError):
    """The database driver or query failed."""

    status_code = 500
    error_code = "DATABASE_ERROR"


class ConstraintViolation(DatabaseError):
    """The database rejected a write on an integrity constraint."""

    status_code = 409
    error_code = "CONSTRAINT_VIOLATION"
