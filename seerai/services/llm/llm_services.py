# seerai/services/llm/llm_services.py
import logging
from typing import Optional

from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from seerai.core.config import Settings
from seerai.core.errors import GatewayError
from seerai.services.llm.llm_utils import JSON_MIME_TYPE, build_llm_client

logger = logging.getLogger(__name__)


class LLMGateway:
    """
    Single-shot completion against a configured genai client.
    Decoding parameters are fixed at construction; there are no retries.
    """

    def __init__(
        self,
        client: genai.Client,
        model: str,
        temperature: float = 0.7,
        max_output_tokens: int = 2000,
        json_mode: bool = True,
    ):
        self.client = client
        self.model = model
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens
        self.json_mode = json_mode

    @classmethod
    def from_settings(cls, settings: Settings, client: Optional[genai.Client] = None) -> "LLMGateway":
        return cls(
            client=client or build_llm_client(settings),
            model=settings.TAROT_MODEL,
            temperature=settings.TAROT_TEMPERATURE,
            max_output_tokens=settings.TAROT_MAX_OUTPUT_TOKENS,
            json_mode=settings.TAROT_JSON_MODE,
        )

    def _config(self, system_instruction: str) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            system_instruction=system_instruction,
            temperature=self.temperature,
            max_output_tokens=self.max_output_tokens,
            response_mime_type=JSON_MIME_TYPE if self.json_mode else None,
        )

    async def generate(self, prompt: str, system_instruction: str) -> str:
        """Return the text of the first candidate, or raise GatewayError."""
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=self._config(system_instruction),
            )
        except genai_errors.APIError as e:
            logger.error(f"LLM API error ({self.model}): {e.code} {e.status}")
            raise GatewayError("Language model request failed") from e
        except Exception as e:
            logger.exception(f"Unexpected error calling LLM ({self.model}): {e}")
            raise GatewayError("Language model request failed") from e

        text = response.text if response is not None else None
        if not text:
            logger.error(f"LLM ({self.model}) returned no text content")
            raise GatewayError("No response content received from the language model")
        return text
