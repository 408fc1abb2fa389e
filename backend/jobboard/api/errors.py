"""Translate domain errors into HTTP responses."""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from jobboard.core import errors
from jobboard.core.logging import get_logger

logger = get_logger("api")

# Subclasses without an entry use their parent's code.
STATUS_CODES: dict[type[errors.JobBoardError], int] = {
    errors.Conflict: status.HTTP_400_BAD_REQUEST,
    errors.InvalidCredentials: status.HTTP_400_BAD_REQUEST,
    errors.Unauthenticated: status.HTTP_401_UNAUTHORIZED,
    errors.Unauthorized: status.HTTP_401_UNAUTHORIZED,
    errors.Forbidden: status.HTTP_403_FORBIDDEN,
    errors.NotFound: status.HTTP_404_NOT_FOUND,
    errors.ValidationError: status.HTTP_400_BAD_REQUEST,
    errors.PreconditionFailed: status.HTTP_400_BAD_REQUEST,
    errors.SelfModification: status.HTTP_400_BAD_REQUEST,
    errors.StorageError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_code_for(exc: errors.JobBoardError) -> int:
    for cls in type(exc).__mro__:
        if cls in STATUS_CODES:
            return STATUS_CODES[cls]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def jobboard_error_handler(request: Request, exc: errors.JobBoardError) -> JSONResponse:
    code = status_code_for(exc)
    if code >= 500:
        # Details were logged where the failure happened
        return JSONResponse(status_code=code, content={"msg": errors.StorageError.default_message})

    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, errors.Unauthenticated) else None
    return JSONResponse(status_code=code, content={"msg": exc.message}, headers=headers)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"msg": errors.StorageError.default_message},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(errors.JobBoardError, jobboard_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
