from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


def _to_camel(name: str) -> str:
    """Convert snake_case to camelCase."""
    parts = name.split("_")
    return parts[0] + "".join(p.capitalize() for p in parts[1:])


class PrometheusVersion(BaseModel):
    """Payload of ``/api/v1/status/buildinfo`` as served by Prometheus."""

    model_config = ConfigDict(populate_by_name=True, alias_generator=_to_camel)

    version: str = Field(min_length=1)
    revision: str = Field(min_length=1)
    branch: str = Field(min_length=1)
    build_user: str = Field(min_length=1)
    build_date: str = Field(min_length=1)
    go_version: str = Field(min_length=1)
