"""Service level exceptions shared by all apps."""

from typing import List, Optional

from src.core.response.schemas import ErrorDetail


class ServiceException(Exception):
    """Base exception raised by services."""

    error_code = "SERVICE_ERROR"

    def __init__(
        self,
        detail: str = "Service error",
        error_details: Optional[List[ErrorDetail]] = None,
    ):
        super().__init__(detail)
        self.detail = detail
        self.error_details = error_details or []


class NotFoundException(ServiceException):
    """Requested item does not exist (or is hidden by a filter)."""

    error_code = "NOT_FOUND"

    def __init__(self, detail: str = "Item not found", **kwargs):
        super().__init__(detail, **kwargs)


class ConflictException(ServiceException):
    """Operation conflicts with the current state of stored data."""

    error_code = "CONFLICT"

    def __init__(self, detail: str = "Conflict", **kwargs):
        super().__init__(detail, **kwargs)
