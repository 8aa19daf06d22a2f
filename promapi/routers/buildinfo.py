"""Emulation of the Prometheus ``/api/v1/status/buildinfo`` endpoint.

Grafana probes this endpoint to determine the Prometheus flavor, e.g. to
check whether the ruler API is enabled.
"""

from __future__ import annotations

import logging
import platform
from collections.abc import Callable

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from promapi.buildinfo import resolve_build_timestamp
from promapi.response import write_success_response
from promapi.schemas.buildinfo import PrometheusVersion
from promapi.schemas.envelope import SuccessResponse
from promapi.settings import BuildinfoSettings

BUILDINFO_PATH = "/api/v1/status/buildinfo"

BuildinfoHandler = Callable[[], JSONResponse]


def make_buildinfo_handler(
    logger: logging.Logger,
    binary_name: str,
    binary_version: str,
    info: BuildinfoSettings | None = None,
) -> BuildinfoHandler:
    """Build a request handler serving static version information.

    Args:
        logger: Logger used by the handler and the timestamp lookup.
        binary_name: Name of the embedding binary, e.g. ``"frontend"``.
        binary_version: Version of the embedding binary.
        info: Emulated constants; defaults mirror Prometheus 1.8.2.

    The handler reads nothing from the request and always answers 200. It is
    synchronous so FastAPI runs the stat call in its threadpool.
    """
    info = info or BuildinfoSettings()

    def buildinfo() -> JSONResponse:
        response = PrometheusVersion(
            version=info.prometheus_version,
            revision=f"{info.revision_prefix}/{binary_name}-{binary_version}",
            branch=info.build_branch,
            build_user=info.build_user,
            build_date=resolve_build_timestamp(logger),
            go_version=platform.python_version(),
        )
        return write_success_response(logger, 200, BUILDINFO_PATH, response)

    return buildinfo


def make_buildinfo_router(
    logger: logging.Logger,
    binary_name: str,
    binary_version: str,
    info: BuildinfoSettings | None = None,
) -> APIRouter:
    router = APIRouter(tags=["status"])
    handler = make_buildinfo_handler(logger, binary_name, binary_version, info)
    for method in ("GET", "POST"):
        router.add_api_route(
            BUILDINFO_PATH,
            handler,
            methods=[method],
            operation_id=f"buildinfo_{method.lower()}",
            response_model=SuccessResponse[PrometheusVersion],
            response_model_by_alias=True,
        )
    return router
