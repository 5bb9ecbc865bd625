import logging

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.api.middleware import request_id_ctx
from src.libs.result import Error

logger = logging.getLogger(__name__)


class ClientError(Exception):
    """4xx failure carrying a business error; raised by routes after mapping the code"""

    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    """Failure of a dependency (store, mail relay, image storage); always 500"""

    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def _error_body(code: str, message: str, **extra) -> dict:
    error_dict = {"code": code, "message": message, **extra}
    request_id = request_id_ctx.get()
    if request_id:
        error_dict["request_id"] = request_id
    return {"error": error_dict}


async def handle_client_error(request: Request, exc: ClientError):
    logger.warning(
        f"Client error on {request.method} {request.url.path}: "
        f"{exc.base_error.code} ({exc.status_code})"
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.base_error.code, exc.base_error.message),
    )


async def handle_server_error(request: Request, exc: ServerError):
    logger.error(f"Server error on {request.method} {request.url.path}: {exc.base_error.code}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(exc.base_error.code, exc.base_error.message),
    )


async def handle_validation_error(request: Request, exc: RequestValidationError):
    errors = jsonable_encoder(exc.errors())
    message = "Please fill in all required fields"
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ())[1:])
        message = f"{field}: {first.get('msg')}" if field else first.get("msg", message)
    logger.warning(f"Validation error on {request.method} {request.url.path}: {message}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body("VALIDATION_ERROR", message, details=errors),
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("INTERNAL_ERROR", "Internal server error"),
    )
