"""MoviePy (ffmpeg) implementation of the AudioCompressor interface."""

from pathlib import Path

import moviepy
from transcription_common.logging import setup_logging

from config import CompressionConfig
from domain.models import CompressionResult

from .interfaces import AudioCompressor

logger = setup_logging()


class MoviePyCompressor(AudioCompressor):
    """Re-encodes audio to low-bitrate mono speech audio through ffmpeg."""

    def __init__(self, config: CompressionConfig):
        self._config = config

    def compress(self, audio_path: Path) -> CompressionResult:
        original_size = audio_path.stat().st_size if audio_path.exists() else 0
        output_path = audio_path.with_name(
            f"{audio_path.stem}-compressed{self._config.extension}"
        )

        logger.info(
            "Compressing audio",
            extra={"file_name": audio_path.name, "size": original_size},
        )

        try:
            self._encode(audio_path, output_path)
        except Exception:
            logger.exception("Audio compression failed", extra={"file_name": audio_path.name})
            self._remove(output_path)
            return CompressionResult(path=audio_path, was_compressed=False, size=original_size)

        compressed_size = output_path.stat().st_size if output_path.exists() else 0
        if compressed_size == 0 or compressed_size > original_size:
            logger.warning(
                "Compression produced no usable output",
                extra={
                    "file_name": audio_path.name,
                    "size": original_size,
                    "compressed_size": compressed_size,
                },
            )
            self._remove(output_path)
            return CompressionResult(path=audio_path, was_compressed=False, size=original_size)

        audio_path.unlink(missing_ok=True)
        logger.info(
            "Audio compressed",
            extra={
                "file_name": output_path.name,
                "size": original_size,
                "compressed_size": compressed_size,
            },
        )
        return CompressionResult(path=output_path, was_compressed=True, size=compressed_size)

    def _encode(self, source: Path, target: Path) -> None:
        """Writes source as mono speech audio to target, without metadata."""
        clip = moviepy.AudioFileClip(str(source), fps=self._config.sample_rate)
        try:
            clip.write_audiofile(
                str(target),
                fps=self._config.sample_rate,
                codec=self._config.codec,
                bitrate=self._config.bitrate,
                ffmpeg_params=["-ac", "1", "-map_metadata", "-1"],
                logger=None,
            )
        finally:
            clip.close()

    def _remove(self, path: Path) -> None:
        try:
            path.unlink(missing_ok=True)
        except OSError:
            logger.exception("Failed to remove partial output", extra={"path": str(path)})
