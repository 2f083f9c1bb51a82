"""Exception handlers that give every non-2xx response the same `{"error": str}` body."""
from __future__ import annotations
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import structlog

log = structlog.get_logger()


def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    detail = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return JSONResponse(status_code=exc.status_code, content={"error": detail}, headers=exc.headers)


def _validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Missing query params name the param; anything wrong with a body is a generic 400.
    for err in exc.errors():
        loc = err.get("loc") or ()
        if len(loc) == 2 and loc[0] == "query" and err.get("type") == "missing":
            return JSONResponse(status_code=400, content={"error": f"{loc[1]} query param required"})
    return JSONResponse(status_code=400, content={"error": "Missing required fields"})


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    log.exception("unhandled_error", path=request.url.path, method=request.method)
    return JSONResponse(status_code=500, content={"error": "Server error"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
