# storefront/api/errors.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.domain.errors import InternalError, InvalidArgument, NotFound, ServiceError
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

_STATUS_BY_ERROR = (
    (InvalidArgument, 400),
    (NotFound, 404),
    (InternalError, 500),
)


def status_for(error: ServiceError) -> int:
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return 500


def install_error_handlers(app: FastAPI) -> None:
    """Every error body is {"error": "<message>"}."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def invalid_body(request: Request, exc: RequestValidationError):
        logger.info(f"Rejected request to {request.url.path}: {exc.errors()}")
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})
