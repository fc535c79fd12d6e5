from fastapi import APIRouter

from fitcheck.schemas.evaluation import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse, summary="Health Check", description="Liveness check.")
async def health_check():
    return {"ok": True}
