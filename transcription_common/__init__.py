from transcription_common.formatting import format_file_size
from transcription_common.logging import setup_logging

__all__ = [
    "setup_logging",
    "format_file_size",
]
