"""Normalization of speaker segmentation replies into speaker segments.

LLM replies for speaker segmentation arrive in several shapes, and sometimes
not as JSON at all. Each RecoveryStrategy recognises one shape and returns
segments, or None when the reply does not match. DiarizationRecovery tries
the strategies in a fixed order and falls back to a single segment holding
the whole transcript.
"""

import math
import re
from abc import ABC, abstractmethod
from typing import Any, Sequence

from transcription_common.logging import setup_logging

from config import DiarizationConfig, TurnTakingHeuristics

from .models import SpeakerSegment

logger = setup_logging()

_SENTENCE_BOUNDARY = re.compile(r"(?<=[.?!])\s+")


def split_sentences(text: str) -> list[str]:
    """Splits text after '.', '?' or '!' followed by whitespace."""
    return [s for s in _SENTENCE_BOUNDARY.split(text.strip()) if s.strip()]


def normalize_entries(entries: list[Any], unknown_label: str) -> list[SpeakerSegment]:
    """
    Converts untyped reply entries into speaker segments.

    Entries that are not objects or carry no text are dropped. A missing or
    blank speaker becomes unknown_label.
    """
    segments: list[SpeakerSegment] = []
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        text = entry.get("text")
        if not isinstance(text, str) or not text.strip():
            continue
        speaker = entry.get("speaker")
        speaker = str(speaker).strip() if speaker is not None else ""
        segments.append(SpeakerSegment(speaker=speaker or unknown_label, text=text.strip()))
    return segments


class RecoveryStrategy(ABC):
    """One step of the reply normalization chain."""

    name = "strategy"

    @abstractmethod
    def recover(self, reply: Any, transcript: str) -> list[SpeakerSegment] | None:
        """
        Attempts to produce segments.

        Args:
            reply: The parsed JSON reply, or None if there was no usable reply.
            transcript: The original transcript text.

        Returns:
            A non-empty list of segments, or None if this strategy does not apply.
        """
        pass


class ArrayReplyStrategy(RecoveryStrategy):
    """Accepts a top-level array, splitting a lone segment into two speakers."""

    name = "array"

    def __init__(self, speaker_labels: tuple[str, str], unknown_label: str):
        self._speaker_labels = speaker_labels
        self._unknown_label = unknown_label

    def recover(self, reply: Any, transcript: str) -> list[SpeakerSegment] | None:
        if not isinstance(reply, list):
            return None
        segments = normalize_entries(reply, self._unknown_label)
        if not segments:
            return None
        if len(segments) == 1:
            return self._split_in_halves(segments[0]) or segments
        return segments

    def _split_in_halves(self, segment: SpeakerSegment) -> list[SpeakerSegment] | None:
        sentences = split_sentences(segment.text)
        if len(sentences) < 2:
            return None
        middle = math.ceil(len(sentences) / 2)
        first, second = self._speaker_labels
        return [
            SpeakerSegment(speaker=first, text=" ".join(sentences[:middle])),
            SpeakerSegment(speaker=second, text=" ".join(sentences[middle:])),
        ]


class WrappedArrayReplyStrategy(RecoveryStrategy):
    """Accepts an object carrying the segments under a known key."""

    name = "wrapped_array"

    def __init__(self, unknown_label: str, keys: Sequence[str] = ("segments", "speakers")):
        self._unknown_label = unknown_label
        self._keys = tuple(keys)

    def recover(self, reply: Any, transcript: str) -> list[SpeakerSegment] | None:
        if not isinstance(reply, dict):
            return None
        for key in self._keys:
            entries = reply.get(key)
            if isinstance(entries, list):
                segments = normalize_entries(entries, self._unknown_label)
                if segments:
                    return segments
        return None


class KeyValueReplyStrategy(RecoveryStrategy):
    """Reads an object as a single segment or as speaker-keyed text."""

    name = "key_value"

    def recover(self, reply: Any, transcript: str) -> list[SpeakerSegment] | None:
        if not isinstance(reply, dict):
            return None

        segments: list[SpeakerSegment] = []
        for key, value in reply.items():
            if key == "speaker" and isinstance(reply.get("text"), str):
                segments.append(SpeakerSegment(speaker=str(value), text=reply["text"]))
            elif "speaker" in key.lower() and isinstance(value, str):
                segments.append(SpeakerSegment(speaker=key, text=value))

        segments = [s for s in segments if s.text.strip()]
        return segments or None


class TurnTakingStrategy(RecoveryStrategy):
    """Splits the transcript locally, switching speakers on turn-taking cues."""

    name = "turn_taking"

    def __init__(self, heuristics: TurnTakingHeuristics):
        self._heuristics = heuristics

    def recover(self, reply: Any, transcript: str) -> list[SpeakerSegment] | None:
        sentences = split_sentences(transcript)
        if len(sentences) <= 2:
            return None

        first, second = self._heuristics.speaker_labels
        segments: list[SpeakerSegment] = []
        speaker = first
        run = [sentences[0]]

        for previous, current in zip(sentences, sentences[1:]):
            if self.is_turn_change(previous, current):
                segments.append(SpeakerSegment(speaker=speaker, text=" ".join(run)))
                speaker = second if speaker == first else first
                run = [current]
            else:
                run.append(current)

        segments.append(SpeakerSegment(speaker=speaker, text=" ".join(run)))
        return segments

    def is_turn_change(self, previous: str, current: str) -> bool:
        """Whether the speaker likely changed between two consecutive sentences."""
        if self._heuristics.switch_after_question and previous.rstrip().endswith("?"):
            return True
        previous_lower = previous.lower()
        if any(phrase in previous_lower for phrase in self._heuristics.previous_sentence_phrases):
            return True
        current_lower = current.lower()
        return any(phrase in current_lower for phrase in self._heuristics.current_sentence_phrases)


class DiarizationRecovery:
    """Runs recovery strategies in order until one produces segments."""

    def __init__(self, strategies: Sequence[RecoveryStrategy], unknown_label: str = "Unknown"):
        self._strategies = list(strategies)
        self._unknown_label = unknown_label

    def recover(self, reply: Any, transcript: str) -> list[SpeakerSegment]:
        for strategy in self._strategies:
            segments = strategy.recover(reply, transcript)
            if segments:
                logger.info(
                    "Speaker segments recovered",
                    extra={"strategy": strategy.name, "segment_count": len(segments)},
                )
                return segments

        logger.warning("No recovery strategy matched, using a single segment")
        return self.fallback(transcript)

    def fallback(self, transcript: str) -> list[SpeakerSegment]:
        """The whole transcript attributed to an unknown speaker."""
        return [SpeakerSegment(speaker=self._unknown_label, text=transcript)]


def default_recovery(config: DiarizationConfig) -> DiarizationRecovery:
    """Builds the standard recovery chain from configuration."""
    unknown = config.unknown_speaker_label
    return DiarizationRecovery(
        [
            ArrayReplyStrategy(config.heuristics.speaker_labels, unknown),
            WrappedArrayReplyStrategy(unknown),
            KeyValueReplyStrategy(),
            TurnTakingStrategy(config.heuristics),
        ],
        unknown_label=unknown,
    )
