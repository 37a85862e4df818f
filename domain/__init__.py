"""Domain layer exports."""

from .diarization_recovery import DiarizationRecovery, default_recovery
from .diarizer import Diarizer
from .file_intake import FileIntake
from .models import (
    CompressionResult,
    SpeakerSegment,
    Summary,
    Topic,
    Transcript,
    TranscriptionOutput,
    UploadedAudio,
)
from .summarizer import Summarizer

__all__ = [
    "CompressionResult",
    "DiarizationRecovery",
    "Diarizer",
    "FileIntake",
    "SpeakerSegment",
    "Summarizer",
    "Summary",
    "Topic",
    "Transcript",
    "TranscriptionOutput",
    "UploadedAudio",
    "default_recovery",
]
