"""Speaker identification through an LLM with local recovery."""

import json
from typing import Any

from transcription_common.logging import setup_logging

from infrastructure.interfaces import LLMService

from .diarization_recovery import DiarizationRecovery
from .models import SpeakerSegment

logger = setup_logging()

USER_PROMPT = """Below is a transcript from a conversation with AT LEAST 2 different speakers. Identify who says what by analyzing patterns like questions/answers and topic shifts.

Format your response EXACTLY like this with NO EXTRA TEXT:
[
  {{"speaker": "Speaker 1", "text": "What they said"}},
  {{"speaker": "Speaker 2", "text": "The response"}}
]

Transcript:
{transcript}"""


def parse_reply(content: str | None) -> Any:
    """Parses a reply as JSON; returns None when it is empty or not JSON."""
    if not content:
        return None
    try:
        return json.loads(content)
    except json.JSONDecodeError:
        logger.warning("Speaker identification reply is not valid JSON")
        return None


class Diarizer:
    """Segments a transcript by speaker. Never raises."""

    def __init__(
        self,
        llm_service: LLMService,
        system_prompt: str,
        recovery: DiarizationRecovery,
        temperature: float = 0.2,
    ):
        self._llm = llm_service
        self._system_prompt = system_prompt
        self._recovery = recovery
        self._temperature = temperature

    def identify_speakers(self, transcript: str) -> list[SpeakerSegment]:
        """
        Returns speaker segments covering the transcript.

        Always returns at least one segment: on any failure the whole
        transcript is attributed to an unknown speaker.
        """
        try:
            content = self._llm.complete_json(
                self._system_prompt,
                USER_PROMPT.format(transcript=transcript),
                self._temperature,
            )
            if not content:
                logger.warning("Empty response from speaker identification")
                return self._recovery.fallback(transcript)
            segments = self._recovery.recover(parse_reply(content), transcript)
        except Exception:
            logger.exception("Speaker identification failed")
            return self._recovery.fallback(transcript)

        logger.info("Speakers identified", extra={"segment_count": len(segments)})
        return segments
