"""Abstract interface for LLM service operations."""

from abc import ABC, abstractmethod


class LLMService(ABC):
    """Abstract base class for LLM backends."""

    @abstractmethod
    def complete_json(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float,
    ) -> str | None:
        """
        Requests a JSON-formatted completion.

        Args:
            system_prompt: Instructions describing the expected JSON shape.
            user_prompt: The request, including the transcript text.
            temperature: Sampling temperature.

        Returns:
            The raw reply text, or None if the model returned no content.
            The reply is not guaranteed to be valid JSON.

        Raises:
            LLMServiceError: If the LLM call fails.
        """
        pass
