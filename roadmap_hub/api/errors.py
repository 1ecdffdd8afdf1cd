from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from roadmap_hub.api.responses import request_meta

logger = logging.getLogger(__name__)

API_PREFIX = "/api/"


class ApiException(Exception):
    def __init__(self, *, status_code: int, code: str, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.message = message


def error_payload(request: Request, *, code: str, message: str, details: object = None) -> dict[str, object]:
    error: dict[str, object] = {"code": code, "message": message}
    if details is not None:
        error["details"] = details
    return {"error": error, "meta": request_meta(request)}


def register_api_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ApiException)
    async def handle_api_exception(request: Request, exc: ApiException) -> JSONResponse:
        logger.info(
            "api.error",
            extra={
                "event": "api.error",
                "path": request.url.path,
                "status_code": exc.status_code,
                "code": exc.code,
            },
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=error_payload(request, code=exc.code, message=exc.message),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        if not request.url.path.startswith(API_PREFIX):
            return JSONResponse(status_code=422, content={"detail": exc.errors()})
        return JSONResponse(
            status_code=422,
            content=error_payload(
                request,
                code="validation_error",
                message="Request validation failed.",
                details=[
                    {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
                    for error in exc.errors()
                ],
            ),
        )
