from __future__ import annotations
import uuid
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from minio.error import MinioException
from sqlalchemy.exc import SQLAlchemyError
from urllib3.exceptions import HTTPError as TransportError
from ambassador_api.config import settings
from ambassador_api.db import init_models
from ambassador_api.errors import register_exception_handlers
from ambassador_api.logging_setup import configure_logging
from ambassador_api.routes.system import router as system_router
from ambassador_api.routes.auth import router as auth_router
from ambassador_api.routes.ambassadors import router as ambassadors_router
from ambassador_api.routes.events import router as events_router
from ambassador_api.routes.submissions import router as submissions_router
from ambassador_api.routes.screenshots import router as screenshots_router
from ambassador_api.routes.leaderboard import router as leaderboard_router
from ambassador_api.services.storage import get_vault
import structlog

configure_logging()
log = structlog.get_logger()

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    log.info("startup", env=settings.environment, version=settings.app_version, git_sha=settings.git_sha)
    try:
        await init_models()
    except (SQLAlchemyError, OSError):
        log.exception("store_init_failed")
    try:
        get_vault().ensure_bucket()
    except (MinioException, TransportError, OSError):
        log.exception("vault_init_failed")
    yield
    # Shutdown
    log.info("shutdown")

app = FastAPI(
    title=f"{settings.app_display_name} API",
    version=settings.app_version,
    lifespan=lifespan,
    description=f"{settings.app_display_name} API for event tracking and proof-of-engagement submissions",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.environment == "dev" else settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(system_router)
app.include_router(auth_router)
app.include_router(ambassadors_router)
app.include_router(events_router)
app.include_router(submissions_router)
app.include_router(screenshots_router)
app.include_router(leaderboard_router)

@app.middleware("http")
async def add_request_id(request: Request, call_next):
    rid = request.headers.get("x-request-id") or str(uuid.uuid4())
    request.state.request_id = rid
    structlog.contextvars.bind_contextvars(request_id=rid)
    try:
        response: Response = await call_next(request)
    finally:
        structlog.contextvars.clear_contextvars()
    response.headers["X-Request-ID"] = rid
    return response
