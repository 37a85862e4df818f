"""Custom exceptions for the transcription service."""


class AudioValidationError(Exception):
    """Base class for uploads rejected before any external call."""


class MissingAudioFileError(AudioValidationError):
    """Raised when the request carries no file part."""

    def __init__(self):
        super().__init__("No audio file provided")


class UnsupportedAudioTypeError(AudioValidationError):
    """Raised when the declared MIME type is not an accepted audio type."""

    def __init__(self, content_type: str | None):
        self.content_type = content_type
        super().__init__("Invalid file type. Only MP3, WAV, and M4A files are allowed.")


class AudioFileTooLargeError(AudioValidationError):
    """Raised when an audio file exceeds a size ceiling."""

    def __init__(self, file_name: str, limit_label: str, after_compression: bool = False):
        self.file_name = file_name
        self.limit_label = limit_label
        self.after_compression = after_compression
        message = f"File size exceeds the {limit_label} limit"
        if after_compression:
            message += " even after compression"
        super().__init__(message + ".")


class AudioFileNotFoundError(Exception):
    """Raised when an audio file to transcribe does not exist."""

    def __init__(self, file_name: str):
        self.file_name = file_name
        super().__init__(f"Audio file not found: {file_name}")


class TranscriptionError(Exception):
    """Raised when audio transcription fails."""

    def __init__(
        self,
        file_name: str,
        cause: Exception | None = None,
        message: str | None = None,
        status_code: int | None = None,
    ):
        self.file_name = file_name
        self.cause = cause
        self.status_code = status_code
        if message is None and cause is not None:
            message = f"Failed to transcribe audio: {cause}"
        elif message is None:
            message = f"Failed to transcribe audio file '{file_name}'"
        super().__init__(message)


class LLMServiceError(Exception):
    """Raised when LLM service call fails."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class SummarizationError(Exception):
    """Raised when a transcript summary cannot be produced."""

    def __init__(self, cause: Exception | None = None):
        self.cause = cause
        super().__init__(f"Failed to generate summary: {cause}")
