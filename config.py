"""Application configuration loaded from environment variables."""

import os
from pathlib import Path

from pydantic import BaseModel

MB = 1024 * 1024


class IntakeConfig(BaseModel, frozen=True):
    """Upload validation and scratch storage configuration."""

    upload_dir: Path = Path("tmp/uploads")
    max_upload_bytes: int = 100 * MB
    allowed_content_types: tuple[str, ...] = (
        "audio/mpeg",
        "audio/wav",
        "audio/mp4",
        "audio/x-m4a",
    )


class CompressionConfig(BaseModel, frozen=True):
    """Speech re-encoding configuration for oversized uploads."""

    service_limit_bytes: int = 25 * MB
    sample_rate: int = 16000
    bitrate: str = "24k"
    codec: str = "libopus"
    extension: str = ".ogg"


class AssemblyAIConfig(BaseModel, frozen=True):
    """AssemblyAI API configuration."""

    api_key: str


class GeminiConfig(BaseModel, frozen=True):
    """Gemini LLM configuration."""

    api_key: str
    model_name: str = "gemini-2.5-flash-lite"
    summary_prompt_path: Path = Path("prompts/summary_system.txt")
    diarization_prompt_path: Path = Path("prompts/diarization_system.txt")
    summary_temperature: float = 0.5
    diarization_temperature: float = 0.2


class TurnTakingHeuristics(BaseModel, frozen=True):
    """Signals that suggest the speaker changed between two sentences."""

    switch_after_question: bool = True
    previous_sentence_phrases: tuple[str, ...] = (
        "thank you",
        "could you",
        "what do you think",
    )
    current_sentence_phrases: tuple[str, ...] = (
        "yeah",
        "okay",
        "so,",
        "well,",
    )
    speaker_labels: tuple[str, str] = ("Speaker 1", "Speaker 2")


class DiarizationConfig(BaseModel, frozen=True):
    """Speaker segmentation configuration."""

    heuristics: TurnTakingHeuristics = TurnTakingHeuristics()
    unknown_speaker_label: str = "Unknown"


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    intake: IntakeConfig
    compression: CompressionConfig
    assemblyai: AssemblyAIConfig
    gemini: GeminiConfig
    diarization: DiarizationConfig = DiarizationConfig()


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        intake=IntakeConfig(
            upload_dir=Path(os.getenv("UPLOAD_DIR", "tmp/uploads")),
            max_upload_bytes=int(os.getenv("MAX_UPLOAD_BYTES", str(100 * MB))),
        ),
        compression=CompressionConfig(
            service_limit_bytes=int(os.getenv("SERVICE_LIMIT_BYTES", str(25 * MB))),
        ),
        assemblyai=AssemblyAIConfig(
            api_key=os.getenv("ASSEMBLYAI_API_KEY", ""),
        ),
        gemini=GeminiConfig(
            api_key=os.getenv("GEMINI_API_KEY", ""),
            model_name=os.getenv("GEMINI_MODEL", "gemini-2.5-flash-lite"),
        ),
    )
