"""Infrastructure interface exports."""

from .audio_compressor import AudioCompressor
from .llm_service import LLMService
from .transcription_service import TranscriptionService

__all__ = ["AudioCompressor", "LLMService", "TranscriptionService"]
