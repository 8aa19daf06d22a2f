from fastapi import APIRouter, Request

from promapi.schemas.health import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    return HealthResponse(status="ok", version=request.app.state.settings.binary_version)
