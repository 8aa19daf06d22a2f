import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from promapi.response import write_error_response
from promapi.routers import health
from promapi.routers.buildinfo import make_buildinfo_router
from promapi.schemas.envelope import ErrorType
from promapi.settings import Settings, settings as default_settings

logger = logging.getLogger(__name__)

API_PREFIX = "/api/"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    cfg: Settings = app.state.settings
    logger.info(
        "Serving Prometheus API shim for %s %s (emulating Prometheus %s)",
        cfg.binary_name,
        cfg.binary_version,
        cfg.prometheus_version,
    )
    yield
    logger.info("Shutting down")


def _error_type_for(status_code: int) -> ErrorType:
    if status_code == 404:
        return ErrorType.NOT_FOUND
    if status_code >= 500:
        return ErrorType.INTERNAL
    return ErrorType.BAD_DATA


def create_app(settings: Settings | None = None) -> FastAPI:
    cfg = settings or default_settings

    application = FastAPI(
        title="promapi",
        version=cfg.binary_version,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    application.state.settings = cfg

    application.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(health.router)
    application.include_router(
        make_buildinfo_router(
            logging.getLogger("promapi.buildinfo"),
            cfg.binary_name,
            cfg.binary_version,
            cfg.buildinfo,
        )
    )

    @application.exception_handler(StarletteHTTPException)
    async def api_http_error_handler(request: Request, exc: StarletteHTTPException) -> Response:
        # Only the Prometheus API surface speaks the Prometheus envelope.
        if not request.url.path.startswith(API_PREFIX):
            return await http_exception_handler(request, exc)
        return write_error_response(
            logger,
            exc.status_code,
            request.url.path,
            _error_type_for(exc.status_code),
            str(exc.detail),
        )

    @application.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        return write_error_response(
            logger,
            500,
            request.url.path,
            ErrorType.INTERNAL,
            "An unexpected error occurred.",
        )

    return application


app = create_app()
