# seerai/services/tarot_prompts.py
from seerai.models.tarot_models import POSITIONS, TarotCard, TarotReadingRequest

SYSTEM_INSTRUCTION = "You are a professional tarot reader. Always respond with valid JSON format as requested."

OUTPUT_SCHEMA = """{
  "reading": "General reading text",
  "interpretation": "Detailed interpretation text",
  "advice": "Practical advice text",
  "cards": [
    {
      "name": "Card name",
      "position": "past|present|future",
      "meaning": "Specific meaning for this position"
    }
  ]
}"""


def format_card_line(position: str, card: TarotCard) -> str:
    suit = f" ({card.suit})" if card.suit else ""
    return f"{position}: {card.name}{suit} - {card.description or ''}"


def build_reading_prompt(request: TarotReadingRequest) -> str:
    """
    Build the user prompt for a three-card reading.
    Pure: the same request always yields the same text.
    """
    cards_description = "\n".join(
        format_card_line(position, card)
        for position, card in zip(POSITIONS, request.selected_cards)
    )

    return (
        "You are a professional tarot reader with deep knowledge of tarot symbolism and interpretation.\n\n"
        f"Question: \"{request.question}\"\n\n"
        "Selected cards and their positions:\n"
        f"{cards_description}\n\n"
        "Please provide a comprehensive tarot reading that includes:\n\n"
        "1. A general reading that connects all three cards and addresses the question\n"
        "2. A detailed interpretation of how the cards relate to each other\n"
        "3. Practical advice based on the reading\n"
        "4. Individual meanings for each card in their specific positions (past, present, future)\n\n"
        "Format your response as a JSON object with the following structure:\n"
        f"{OUTPUT_SCHEMA}\n\n"
        "Make the reading insightful, compassionate, and practical while maintaining the mystical nature of tarot."
    )
