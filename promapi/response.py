"""Writers for the Prometheus API JSON envelope."""

from __future__ import annotations

import logging
from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from promapi.schemas.envelope import ErrorResponse, ErrorType


def write_success_response(
    logger: logging.Logger, status_code: int, path: str, data: Any
) -> JSONResponse:
    """Wrap ``data`` in a success envelope.

    ``path`` is the logical endpoint name and only used for logging.
    """
    body = {"status": "success", "data": jsonable_encoder(data, by_alias=True)}
    logger.debug("Writing %d response for %s", status_code, path)
    return JSONResponse(status_code=status_code, content=body)


def write_error_response(
    logger: logging.Logger,
    status_code: int,
    path: str,
    error_type: ErrorType,
    error: str,
) -> JSONResponse:
    """Render a Prometheus error envelope."""
    if status_code >= 500:
        logger.error("API error on %s (%s): %s", path, error_type, error)
    else:
        logger.warning("API error on %s (%s): %s", path, error_type, error)

    body = ErrorResponse(error_type=error_type, error=error)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True, mode="json"),
    )
