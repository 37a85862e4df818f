"""Infrastructure layer exports."""

from .assemblyai_transcriber import AssemblyAITranscriber
from .gemini_llm import GeminiLLMService
from .moviepy_compressor import MoviePyCompressor

__all__ = ["AssemblyAITranscriber", "GeminiLLMService", "MoviePyCompressor"]
