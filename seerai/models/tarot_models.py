# seerai/models/tarot_models.py
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Position = Literal["past", "present", "future"]

# Index in selectedCards -> temporal role.
POSITIONS: tuple = ("past", "present", "future")

READING_CARD_COUNT = len(POSITIONS)


class TarotCard(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    suit: Optional[str] = None
    arcana: Literal["major", "minor"]
    description: Optional[str] = None


class TarotReadingRequest(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    question: str
    selected_cards: List[TarotCard] = Field(alias="selectedCards")


class TarotCardReading(BaseModel):
    name: str
    position: Position
    meaning: str


class TarotReadingResponse(BaseModel):
    reading: str
    interpretation: str
    advice: str
    cards: List[TarotCardReading] = Field(min_length=READING_CARD_COUNT, max_length=READING_CARD_COUNT)
