"""Service composition and FastAPI dependency providers."""

from dataclasses import dataclass
from pathlib import Path

import assemblyai as aai
from fastapi import Request
from google import genai
from transcription_common import setup_logging

from config import AppConfig
from domain import Diarizer, FileIntake, Summarizer, default_recovery
from handlers import TranscriptionHandler
from infrastructure import AssemblyAITranscriber, GeminiLLMService, MoviePyCompressor

logger = setup_logging()

_BASE_DIR = Path(__file__).parent


@dataclass(frozen=True)
class ServiceContainer:
    """Services built once at startup and shared by all requests."""

    transcription_handler: TranscriptionHandler
    summarizer: Summarizer
    diarizer: Diarizer


def _read_prompt(path: Path) -> str:
    if not path.is_absolute():
        path = _BASE_DIR / path
    return path.read_text(encoding="utf-8")


def build_services(config: AppConfig) -> ServiceContainer:
    """Creates provider clients and wires the services from configuration."""
    # AssemblyAI setup
    aai.settings.api_key = config.assemblyai.api_key
    transcription_config = aai.TranscriptionConfig(punctuate=True, format_text=True)
    aai_transcriber = aai.Transcriber(config=transcription_config)

    transcription_handler = TranscriptionHandler(
        FileIntake(config.intake),
        MoviePyCompressor(config.compression),
        AssemblyAITranscriber(aai_transcriber),
        config.compression,
    )

    # Gemini setup
    gemini_client = genai.Client(api_key=config.gemini.api_key)
    llm = GeminiLLMService(gemini_client, config.gemini.model_name)

    summarizer = Summarizer(
        llm,
        _read_prompt(config.gemini.summary_prompt_path),
        config.gemini.summary_temperature,
    )
    diarizer = Diarizer(
        llm,
        _read_prompt(config.gemini.diarization_prompt_path),
        default_recovery(config.diarization),
        config.gemini.diarization_temperature,
    )

    logger.info(
        "Services initialized",
        extra={
            "upload_dir": str(config.intake.upload_dir),
            "model": config.gemini.model_name,
        },
    )
    return ServiceContainer(
        transcription_handler=transcription_handler,
        summarizer=summarizer,
        diarizer=diarizer,
    )


def get_transcription_handler(request: Request) -> TranscriptionHandler:
    """Returns the configured transcription handler."""
    return request.app.state.services.transcription_handler


def get_summarizer(request: Request) -> Summarizer:
    """Returns the configured summarizer."""
    return request.app.state.services.summarizer


def get_diarizer(request: Request) -> Diarizer:
    """Returns the configured diarizer."""
    return request.app.state.services.diarizer
