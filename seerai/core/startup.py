# seerai/core/startup.py
import logging
from typing import Optional

from fastapi import FastAPI

from seerai.core.config import Settings
from seerai.services.llm.llm_services import LLMGateway

logger = logging.getLogger(__name__)


def init_app_state(app: FastAPI, settings: Settings, gateway: Optional[LLMGateway] = None) -> None:
    """
    Attach settings and the LLM gateway to the app. Runs at app creation so a
    misconfigured provider stops the process before it serves anything.
    """
    try:
        app.state.settings = settings
        app.state.llm_gateway = gateway or LLMGateway.from_settings(settings)
        logger.info(f"LLM gateway ready ({settings.LLM_CLIENT}, model {app.state.llm_gateway.model})")
    except Exception as e:
        logger.error(f"Failed to initialize LLM gateway: {e}")
        raise


async def startup_event(app: FastAPI):
    """
    Log where the API is reachable once the server is up.
    """
    settings: Settings = app.state.settings
    base_url = f"http://localhost:{settings.PORT}"
    logger.info(f"SeerAI Tarot Backend running on port {settings.PORT}")
    logger.info(f"Health Check: {base_url}/api/tarot/health")
    logger.info(f"Tarot Reading: {base_url}/api/tarot/reading")
