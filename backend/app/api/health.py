"""Health check endpoint."""

from fastapi import APIRouter

from app.schemas.common import HealthRead

router = APIRouter()


@router.get("/health", response_model=HealthRead)
async def health():
    return {"status": "healthy", "service": "example-api"}
