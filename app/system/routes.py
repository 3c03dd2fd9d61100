from fastapi import APIRouter

from app.system.schemas import HealthResponse

router = APIRouter(tags=["System"])


@router.get("/health", response_model=HealthResponse)
def health_route():
    return HealthResponse(ok=True)
