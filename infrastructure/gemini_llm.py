"""Gemini LLM service implementation."""

from google import genai
from transcription_common.logging import setup_logging

from exceptions import LLMServiceError

from .interfaces import LLMService

logger = setup_logging()


class GeminiLLMService(LLMService):
    """LLM service implementation using Google Gemini in JSON response mode."""

    def __init__(self, client: genai.Client, model_name: str):
        self._client = client
        self._model_name = model_name

    def complete_json(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float,
    ) -> str | None:
        try:
            response = self._client.models.generate_content(
                model=self._model_name,
                contents=user_prompt,
                config={
                    "response_mime_type": "application/json",
                    "system_instruction": system_prompt,
                    "temperature": temperature,
                },
            )
        except Exception as e:
            logger.exception("Gemini API call failed", extra={"model": self._model_name})
            raise LLMServiceError(f"Gemini request failed: {e}", cause=e) from e

        if not response.text:
            logger.warning("Gemini returned empty response", extra={"model": self._model_name})
            return None

        logger.info(
            "LLM completion received",
            extra={"model": self._model_name, "length": len(response.text)},
        )
        return response.text
