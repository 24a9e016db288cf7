import logging
from typing import Annotated, Callable, List, Optional
from fastapi import APIRouter, Path, status
from fastapi.responses import JSONResponse

from src.core import exceptions
from src.core.response.handlers import error_response

logger = logging.getLogger(__name__)

# Ids beyond a signed 64-bit INTEGER never exist and overflow the driver
MAX_ID = 2**63 - 1
ItemId = Annotated[int, Path(ge=1, le=MAX_ID)]


class BaseRouter:
    """Base router class; subclasses register their routes in ``_register_routes``."""

    def __init__(
        self,
        tags: Optional[List[str]] = None,
        prefix: str = "",
        dependencies: Optional[List[Callable]] = None
    ):
        self.tags = tags or [self.__class__.__name__.replace("Router", "")]
        self.prefix = prefix

        # Create router
        self.router = APIRouter(
            prefix=self.prefix,
            tags=self.tags, #type:ignore
            dependencies=dependencies or [] #type:ignore
        )

        # Register routes
        self._register_routes()

    def _register_routes(self) -> None:
        raise NotImplementedError

    @staticmethod
    def _service_error(e: exceptions.ServiceException) -> JSONResponse:
        """Turn a service exception into the matching error response."""
        if isinstance(e, exceptions.NotFoundException):
            status_code = status.HTTP_404_NOT_FOUND
        elif isinstance(e, exceptions.ConflictException):
            status_code = status.HTTP_409_CONFLICT
        else:
            status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        logger.warning(
            "Service error: %s", e.detail, extra={"error_code": e.error_code}
        )
        return error_response(
            error_code=e.error_code,
            message=str(e.detail),
            status_code=status_code,
            details=[detail.model_dump() for detail in e.error_details]
        )

    def get_router(self) -> APIRouter:
        """Get the FastAPI router instance."""
        return self.router
