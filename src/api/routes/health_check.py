from fastapi import APIRouter, status

from config import ApplicationConfig

router = APIRouter()


@router.get("/health", status_code=status.HTTP_200_OK)
async def health():
    """Liveness probe"""
    return {
        "status": "UP",
        "service": ApplicationConfig.SERVICE_NAME,
        "version": ApplicationConfig.SERVICE_VERSION,
    }
