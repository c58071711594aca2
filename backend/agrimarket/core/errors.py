# backend/agrimarket/core/errors.py

"""
Error kinds raised by the marketplace services and how the API answers them.

 - InvalidInput: the caller sent something unusable (400)
 - RecordNotFound: an id did not resolve (404)
 - ImmutableRecord: an update was attempted on append-only data (400)
 - InternalFailure: something unexpected broke during a computation (500);
   the original exception is logged, the caller only sees a generic message
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from agrimarket.core.logger import logger


class MarketplaceError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(MarketplaceError):
    status_code = 400


class RecordNotFound(MarketplaceError):
    status_code = 404


class ImmutableRecord(MarketplaceError):
    status_code = 400


class InternalFailure(MarketplaceError):
    status_code = 500

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)


def _format_validation_error(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else err.get("msg", "invalid"))
    return "; ".join(parts) or "Invalid request"


async def marketplace_error_handler(request: Request, exc: MarketplaceError):
    if exc.status_code >= 500:
        logger.error(
            exc.message,
            extra={"request_id": request.scope.get("request_id"), "path": request.url.path},
        )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"detail": _format_validation_error(exc)})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(MarketplaceError, marketplace_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
