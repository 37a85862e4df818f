"""Abstract interface for transcription service operations."""

from abc import ABC, abstractmethod
from pathlib import Path

from domain.models import TranscriptionOutput


class TranscriptionService(ABC):
    """Abstract base class for speech-to-text backends."""

    @abstractmethod
    def transcribe(self, audio_path: Path) -> TranscriptionOutput:
        """
        Transcribes an audio file already within the service size limit.

        Args:
            audio_path: Path to the audio file on local disk.

        Returns:
            TranscriptionOutput with the plain text and duration in seconds.

        Raises:
            AudioFileNotFoundError: If audio_path does not exist.
            TranscriptionError: If the service call fails.
        """
        pass
