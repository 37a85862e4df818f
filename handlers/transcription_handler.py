"""Handler for the upload-to-transcript pipeline."""

from typing import BinaryIO

from transcription_common import format_file_size, setup_logging

from config import CompressionConfig
from domain import FileIntake, Transcript
from exceptions import AudioFileTooLargeError
from infrastructure.interfaces import AudioCompressor, TranscriptionService

logger = setup_logging()


class TranscriptionHandler:
    """Orchestrates intake, compression and transcription of one upload."""

    def __init__(
        self,
        intake: FileIntake,
        compressor: AudioCompressor,
        transcription_service: TranscriptionService,
        config: CompressionConfig,
    ):
        self._intake = intake
        self._compressor = compressor
        self._transcription_service = transcription_service
        self._config = config

    def process(
        self,
        data: BinaryIO,
        file_name: str | None,
        content_type: str | None,
        size: int | None = None,
    ) -> Transcript:
        """
        Stores, compresses if needed, and transcribes an uploaded audio file.

        The scratch file is removed before returning, on success and on failure.

        Returns:
            Transcript with the text, duration, original filename and
            compression flag.

        Raises:
            UnsupportedAudioTypeError: If the MIME type is not allowed.
            AudioFileTooLargeError: If the upload exceeds the upload ceiling,
                or is still over the service limit after compression.
            AudioFileNotFoundError: If the scratch file disappeared.
            TranscriptionError: If transcription fails.
        """
        audio = self._intake.accept(data, file_name, content_type, size)
        path = audio.path

        try:
            was_compressed = False
            if audio.size > self._config.service_limit_bytes:
                result = self._compressor.compress(path)
                path = result.path
                was_compressed = result.was_compressed
                if result.size > self._config.service_limit_bytes:
                    raise AudioFileTooLargeError(
                        audio.original_filename,
                        format_file_size(self._config.service_limit_bytes),
                        after_compression=True,
                    )

            output = self._transcription_service.transcribe(path)
        finally:
            self._intake.discard(path)
            if path != audio.path:
                self._intake.discard(audio.path)

        logger.info(
            "Transcription completed",
            extra={
                "file_name": audio.original_filename,
                "duration": output.duration,
                "was_compressed": was_compressed,
            },
        )
        return Transcript(
            text=output.text,
            duration=output.duration,
            filename=audio.original_filename,
            was_compressed=was_compressed,
        )
