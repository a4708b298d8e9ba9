# seerai/services/tarot_services.py
import logging
import time
from typing import Any

from seerai.models.tarot_models import TarotReadingResponse
from seerai.services.llm.llm_services import LLMGateway
from seerai.services.tarot_normalizer import normalize_reading
from seerai.services.tarot_prompts import SYSTEM_INSTRUCTION, build_reading_prompt
from seerai.services.tarot_validation import validate_reading_request

logger = logging.getLogger(__name__)


async def generate_reading(payload: Any, gateway: LLMGateway) -> TarotReadingResponse:
    """
    Validate the request, ask the model for a reading and normalize its answer.
    Raises ValidationError for bad input and GatewayError when the model call fails.
    """
    request = validate_reading_request(payload)
    logger.info(f"Generating tarot reading for cards: {[card.name for card in request.selected_cards]}")

    prompt = build_reading_prompt(request)
    logger.debug(prompt)

    llm_start = time.time()
    raw_text = await gateway.generate(prompt, SYSTEM_INSTRUCTION)
    logger.debug(f"LLM response time: {time.time() - llm_start:.4f} seconds")

    return normalize_reading(raw_text, request.selected_cards)
