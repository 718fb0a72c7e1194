import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

def register_error_handlers(app: FastAPI) -> None:
    """Install the global handlers: request validation -> 400, anything else -> 500."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = validation_messages(exc)
        logger.info("Validation errors on %s: %s", request.url.path, errors)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Validation failed", "errors": errors},
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        # Details stay in the server log
        logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal server error"},
        )

def validation_messages(exc: RequestValidationError) -> list[dict]:
    """One {field, message} entry per failing field, named without the "body" prefix."""
    messages = []
    for error in exc.errors():
        loc = [str(part) for part in error["loc"] if part != "body"]
        messages.append({
            "field": ".".join(loc) or "body",
            "message": error["msg"],
        })
    return messages
