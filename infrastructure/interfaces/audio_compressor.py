"""Abstract interface for audio compression."""

from abc import ABC, abstractmethod
from pathlib import Path

from domain.models import CompressionResult


class AudioCompressor(ABC):
    """Abstract base class for audio re-encoders."""

    @abstractmethod
    def compress(self, audio_path: Path) -> CompressionResult:
        """
        Re-encodes an audio file to a smaller speech-optimized format.

        Never raises for encoder failures: the original path is returned
        with was_compressed=False instead.

        Args:
            audio_path: Path to the oversized audio file.

        Returns:
            CompressionResult with the path to use from now on.
        """
        pass
