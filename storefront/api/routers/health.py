# storefront/api/routers/health.py
from fastapi import APIRouter, Request

from storefront.domain.schemas import HealthOut

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthOut)
def health(request: Request):
    healthy = request.app.state.health_check()
    return HealthOut(
        status="healthy" if healthy else "unhealthy",
        service=request.app.state.service_name,
    )
