# seerai/api/routes/root_routes.py
from fastapi import APIRouter

from seerai.core.config import APP_NAME, APP_VERSION
from seerai.models.api_models import RootResponse

router = APIRouter()


@router.get("/", response_model=RootResponse)
async def read_root():
    return RootResponse(
        message=f"Welcome to {APP_NAME}",
        version=APP_VERSION,
        endpoints={
            "health": "GET /api/tarot/health",
            "reading": "POST /api/tarot/reading",
        },
    )
