# seerai/api/routes/tarot_routes.py
import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException

from seerai.core.config import APP_NAME
from seerai.core.dependencies import get_llm_gateway
from seerai.core.errors import GatewayError, ValidationError
from seerai.models.api_models import ErrorResponse, HealthResponse
from seerai.models.tarot_models import TarotReadingResponse
from seerai.services.llm.llm_services import LLMGateway
from seerai.services.tarot_services import generate_reading

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error while generating tarot reading"

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    return HealthResponse(
        status="healthy",
        message=f"{APP_NAME} is running",
        timestamp=datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
    )


@router.post(
    "/reading",
    response_model=TarotReadingResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def create_reading(
    payload: Any = Body(None),
    gateway: LLMGateway = Depends(get_llm_gateway),
):
    """
    Generate a past/present/future reading for a question and three cards.
    """
    try:
        return await generate_reading(payload, gateway)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except GatewayError as e:
        logger.error(f"Tarot reading failed at the LLM gateway: {e}")
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR_MESSAGE)
    except Exception as e:
        logger.exception(f"Error in tarot reading route: {e}")
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR_MESSAGE)
