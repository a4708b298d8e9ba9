# seerai/services/tarot_validation.py
import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from seerai.core.errors import ValidationError
from seerai.models.tarot_models import READING_CARD_COUNT, TarotCard, TarotReadingRequest

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Missing required fields: question and selectedCards are required"
CARD_COUNT_MESSAGE = f"Exactly {READING_CARD_COUNT} cards must be selected for a tarot reading"


def validate_reading_request(payload: Any) -> TarotReadingRequest:
    """
    Check the raw request body and turn it into a TarotReadingRequest.
    Raises ValidationError with a client-facing reason on any violation.
    """
    if not isinstance(payload, dict):
        raise ValidationError(MISSING_FIELDS_MESSAGE)

    question = payload.get("question")
    selected_cards = payload.get("selectedCards")

    if not isinstance(question, str) or not question or selected_cards is None:
        logger.warning("Rejected reading request: missing question or selectedCards")
        raise ValidationError(MISSING_FIELDS_MESSAGE)

    if not isinstance(selected_cards, list) or len(selected_cards) != READING_CARD_COUNT:
        count = len(selected_cards) if isinstance(selected_cards, list) else "non-list"
        logger.warning(f"Rejected reading request: {count} cards selected")
        raise ValidationError(CARD_COUNT_MESSAGE)

    cards = []
    for index, raw_card in enumerate(selected_cards):
        try:
            cards.append(TarotCard.model_validate(raw_card))
        except PydanticValidationError as e:
            fields = ", ".join(".".join(str(part) for part in err["loc"]) or "card" for err in e.errors())
            logger.warning(f"Rejected reading request: card {index} invalid ({fields})")
            raise ValidationError(f"Invalid card at position {index}: check {fields}") from e

    return TarotReadingRequest(question=question, selected_cards=cards)
