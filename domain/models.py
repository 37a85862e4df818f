"""Domain models for the transcription service."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class UploadedAudio(BaseModel, frozen=True):
    """An accepted upload sitting in scratch storage."""

    path: Path
    content_type: str
    size: int
    original_filename: str


class CompressionResult(BaseModel, frozen=True):
    """Outcome of a compression attempt."""

    path: Path
    was_compressed: bool
    size: int


class TranscriptionOutput(BaseModel, frozen=True):
    """Raw result returned by a transcription backend."""

    text: str
    duration: float = 0


class Transcript(BaseModel):
    """A finished transcription as returned to the client."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    text: str
    duration: float = 0
    filename: str | None = None
    was_compressed: bool = False


class SpeakerSegment(BaseModel):
    """A run of transcript text attributed to one speaker."""

    speaker: str
    text: str


class Topic(BaseModel):
    """A main topic of the transcript with a short description."""

    topic: str
    description: str = ""


class Summary(BaseModel):
    """Structured summary of a transcript."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    key_points: list[str] = Field(default_factory=list)
    topics: list[Topic] = Field(default_factory=list)
    action_items: list[str] = Field(default_factory=list)
