# seerai/services/tarot_normalizer.py
import logging
from dataclasses import dataclass
from typing import List, Union

from pydantic import ValidationError as PydanticValidationError

from seerai.models.tarot_models import POSITIONS, TarotCard, TarotCardReading, TarotReadingResponse

logger = logging.getLogger(__name__)

FALLBACK_READING = "A mystical reading reveals insights about your question."
FALLBACK_INTERPRETATION = "The cards speak of transformation and growth."
FALLBACK_ADVICE = "Trust your intuition and embrace the journey ahead."
FALLBACK_CARD_MEANING = "This card holds significance for your journey."


@dataclass(frozen=True)
class ParseFailure:
    reason: str


ParseResult = Union[TarotReadingResponse, ParseFailure]


def parse_reading_response(raw_text: str) -> ParseResult:
    """Strictly parse model output as a TarotReadingResponse. Never raises."""
    try:
        return TarotReadingResponse.model_validate_json(raw_text)
    except PydanticValidationError as e:
        # Covers both malformed JSON and a well-formed document of the wrong shape.
        first = e.errors()[0] if e.errors() else {}
        return ParseFailure(reason=f"{first.get('type', 'invalid')}: {first.get('msg', str(e))}")


def build_fallback_reading(raw_text: str, cards: List[TarotCard]) -> TarotReadingResponse:
    """
    Rebuild a response from plain prose: blank-line separated paragraphs become
    reading, interpretation and advice in that order; card meanings come from
    the caller's own card descriptions.
    """
    # Known weak spot: assumes the model separates sections with exactly one blank line.
    sections = raw_text.split("\n\n")

    def section(index: int, placeholder: str) -> str:
        if index < len(sections) and sections[index]:
            return sections[index]
        return placeholder

    return TarotReadingResponse(
        reading=section(0, FALLBACK_READING),
        interpretation=section(1, FALLBACK_INTERPRETATION),
        advice=section(2, FALLBACK_ADVICE),
        cards=[
            TarotCardReading(
                name=card.name,
                position=position,
                meaning=card.description or FALLBACK_CARD_MEANING,
            )
            for position, card in zip(POSITIONS, cards)
        ],
    )


def normalize_reading(raw_text: str, cards: List[TarotCard]) -> TarotReadingResponse:
    result = parse_reading_response(raw_text)
    if isinstance(result, ParseFailure):
        logger.warning(f"Model output was not a valid reading, using fallback ({result.reason})")
        return build_fallback_reading(raw_text, cards)
    return result
