"""Validation and scratch storage of uploaded audio files."""

import os
import uuid
from pathlib import Path
from typing import BinaryIO

from transcription_common import format_file_size, setup_logging

from config import IntakeConfig
from exceptions import AudioFileTooLargeError, UnsupportedAudioTypeError

from .models import UploadedAudio

logger = setup_logging()

CHUNK_SIZE = 1024 * 1024


class FileIntake:
    """Accepts uploaded audio into a scratch directory."""

    def __init__(self, config: IntakeConfig):
        self._config = config

    def accept(
        self,
        data: BinaryIO,
        file_name: str | None,
        content_type: str | None,
        size: int | None = None,
    ) -> UploadedAudio:
        """
        Validates an upload and stores it under a generated unique name.

        Args:
            data: File-like object with the uploaded bytes.
            file_name: Client-supplied file name, used for its extension only.
            content_type: Declared MIME type of the upload.
            size: Declared size in bytes, if the transport knows it.

        Returns:
            UploadedAudio describing the stored scratch file.

        Raises:
            UnsupportedAudioTypeError: If the MIME type is not allowed.
            AudioFileTooLargeError: If the upload exceeds the ceiling.
        """
        file_name = file_name or "audio"
        if content_type not in self._config.allowed_content_types:
            logger.info(
                "Upload rejected: unsupported type",
                extra={"file_name": file_name, "content_type": content_type},
            )
            raise UnsupportedAudioTypeError(content_type)

        if size is not None and size > self._config.max_upload_bytes:
            self._reject_oversized(file_name, size)

        self._config.upload_dir.mkdir(parents=True, exist_ok=True)
        extension = os.path.splitext(file_name)[1]
        path = self._config.upload_dir / f"{uuid.uuid4().hex}{extension}"

        try:
            written = self._copy_within_limit(data, path)
        except BaseException:
            logger.exception("Upload copy failed", extra={"file_name": file_name})
            self.discard(path)
            raise
        if written is None:
            self.discard(path)
            self._reject_oversized(file_name, size)

        logger.info(
            "Upload stored",
            extra={"file_name": file_name, "path": str(path), "size": written},
        )
        return UploadedAudio(
            path=path,
            content_type=content_type,
            size=written,
            original_filename=file_name,
        )

    def discard(self, path: Path) -> None:
        """Deletes a scratch file, tolerating one that is already gone."""
        try:
            path.unlink(missing_ok=True)
        except OSError:
            logger.exception("Failed to remove scratch file", extra={"path": str(path)})

    def _copy_within_limit(self, data: BinaryIO, path: Path) -> int | None:
        """Streams data to path; returns bytes written, or None past the ceiling."""
        written = 0
        with open(path, "wb") as out:
            while chunk := data.read(CHUNK_SIZE):
                written += len(chunk)
                if written > self._config.max_upload_bytes:
                    return None
                out.write(chunk)
        return written

    def _reject_oversized(self, file_name: str, size: int | None) -> None:
        limit_label = format_file_size(self._config.max_upload_bytes)
        logger.info(
            "Upload rejected: too large",
            extra={"file_name": file_name, "size": size, "limit": limit_label},
        )
        raise AudioFileTooLargeError(file_name, limit_label)
