"""Exception handlers that give every failure the same JSON body"""

import logging

from bson.errors import InvalidId
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

from teaching_app.core.payment_gateway import PaymentGatewayError
from teaching_app.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    body = ErrorResponse(message=message).model_dump()
    return JSONResponse(status_code=status_code, content=body, headers=headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    message = "invalid request"
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        message = f"invalid request: {location} {first.get('msg', '')}".strip()
    return error_response(422, message)


async def invalid_id_handler(request: Request, exc: InvalidId) -> JSONResponse:
    logger.warning(f"Invalid identifier on {request.method} {request.url.path}: {exc}")
    return error_response(status.HTTP_400_BAD_REQUEST, "invalid identifier")


async def store_error_handler(request: Request, exc: PyMongoError) -> JSONResponse:
    logger.error(f"❌ Store error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return error_response(status.HTTP_503_SERVICE_UNAVAILABLE, "database unavailable")


async def gateway_error_handler(request: Request, exc: PaymentGatewayError) -> JSONResponse:
    logger.error(f"❌ Payment gateway error on {request.url.path}: {exc.message}")
    return error_response(status.HTTP_502_BAD_GATEWAY, "payment gateway error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(InvalidId, invalid_id_handler)
    app.add_exception_handler(PyMongoError, store_error_handler)
    app.add_exception_handler(PaymentGatewayError, gateway_error_handler)
