"""Transcript summarization through an LLM."""

import json

from pydantic import ValidationError
from transcription_common.logging import setup_logging

from exceptions import LLMServiceError, SummarizationError
from infrastructure.interfaces import LLMService

from .models import Summary

logger = setup_logging()

USER_PROMPT = """Please analyze this transcript and provide a JSON summary with:
1. keyPoints: Array of the 3-5 most important points
2. topics: Array of 2-4 main topics with topic name and description
3. actionItems: Optional array of action items or next steps if mentioned

Here's the transcript:
{transcript}"""


def parse_summary(content: str | None) -> Summary:
    """
    Parses an LLM summary reply.

    Missing or null fields default to empty lists. An empty reply yields an
    empty summary.

    Raises:
        SummarizationError: If the reply is not valid JSON or has wrongly
            typed fields.
    """
    try:
        data = json.loads(content) if content else {}
    except json.JSONDecodeError as e:
        raise SummarizationError(e) from e

    if not isinstance(data, dict):
        data = {}

    try:
        return Summary(
            key_points=data.get("keyPoints") or [],
            topics=data.get("topics") or [],
            action_items=data.get("actionItems") or [],
        )
    except ValidationError as e:
        raise SummarizationError(e) from e


class Summarizer:
    """Produces key points, topics and action items for a transcript."""

    def __init__(self, llm_service: LLMService, system_prompt: str, temperature: float = 0.5):
        self._llm = llm_service
        self._system_prompt = system_prompt
        self._temperature = temperature

    def summarize(self, transcript: str) -> Summary:
        """
        Summarizes a transcript.

        Raises:
            SummarizationError: If the LLM call fails or its reply cannot be parsed.
        """
        try:
            content = self._llm.complete_json(
                self._system_prompt,
                USER_PROMPT.format(transcript=transcript),
                self._temperature,
            )
        except LLMServiceError as e:
            raise SummarizationError(e) from e

        summary = parse_summary(content)
        logger.info(
            "Summary generated",
            extra={
                "key_points": len(summary.key_points),
                "topics": len(summary.topics),
                "action_items": len(summary.action_items),
            },
        )
        return summary
