"""AssemblyAI implementation of the TranscriptionService interface."""

from pathlib import Path

import assemblyai as aai
from transcription_common.logging import setup_logging

from domain.models import TranscriptionOutput
from exceptions import AudioFileNotFoundError, TranscriptionError

from .interfaces import TranscriptionService

logger = setup_logging()


class AssemblyAITranscriber(TranscriptionService):
    """Handles audio transcription using AssemblyAI."""

    def __init__(self, transcriber: aai.Transcriber):
        self._transcriber = transcriber

    def transcribe(self, audio_path: Path) -> TranscriptionOutput:
        """
        Streams the audio file to AssemblyAI and returns the plain text.

        Service-reported failures keep the service's message. Transport
        errors keep the HTTP status when the exception carries one.
        """
        if not audio_path.exists():
            logger.error("Audio file not found", extra={"path": str(audio_path)})
            raise AudioFileNotFoundError(audio_path.name)

        try:
            with open(audio_path, "rb") as audio_stream:
                transcription = self._transcriber.transcribe(audio_stream)
        except Exception as e:
            status_code = _service_status(e)
            logger.exception(
                "AssemblyAI transcription failed",
                extra={"file_name": audio_path.name, "status_code": status_code},
            )
            if status_code is not None:
                raise TranscriptionError(
                    audio_path.name,
                    e,
                    message=_service_message(e) or str(e) or "AssemblyAI API error",
                    status_code=status_code,
                ) from e
            raise TranscriptionError(audio_path.name, e) from e

        if transcription.status == aai.TranscriptStatus.error:
            logger.error(
                "AssemblyAI reported a transcription error",
                extra={"file_name": audio_path.name, "error": transcription.error},
            )
            raise TranscriptionError(
                audio_path.name,
                message=transcription.error or "AssemblyAI API error",
            )

        duration = transcription.audio_duration or 0
        logger.info(
            "Audio transcription successful",
            extra={"file_name": audio_path.name, "duration": duration},
        )
        return TranscriptionOutput(text=transcription.text or "", duration=duration)


def _service_status(error: Exception) -> int | None:
    """Returns the HTTP status attached to an SDK or transport error, if any."""
    status = getattr(error, "status_code", None)
    if status is None:
        status = getattr(getattr(error, "response", None), "status_code", None)
    return status if isinstance(status, int) else None


def _service_message(error: Exception) -> str | None:
    """Returns the error message from the service's JSON body, if any."""
    response = getattr(error, "response", None)
    if response is None:
        return None
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    return None
