"""Audio transcription endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from transcription_common.logging import setup_logging

from dependencies import get_transcription_handler
from domain import Transcript
from exceptions import (
    AudioFileNotFoundError,
    AudioFileTooLargeError,
    MissingAudioFileError,
    TranscriptionError,
    UnsupportedAudioTypeError,
)
from handlers import TranscriptionHandler

logger = setup_logging()

router = APIRouter(prefix="/api", tags=["transcription"])

HandlerDep = Annotated[TranscriptionHandler, Depends(get_transcription_handler)]


@router.post("/transcribe", response_model=Transcript, response_model_exclude_none=True)
def transcribe(
    handler: HandlerDep,
    file: Annotated[UploadFile | None, File()] = None,
) -> Transcript:
    """
    Transcribes an uploaded audio file.

    Files over the speech service limit are compressed first.
    """
    if file is None:
        raise HTTPException(status_code=400, detail=str(MissingAudioFileError()))

    logger.info(
        "Received transcription request",
        extra={
            "file_name": file.filename,
            "content_type": file.content_type,
            "size": file.size,
        },
    )

    try:
        return handler.process(
            data=file.file,
            file_name=file.filename,
            content_type=file.content_type,
            size=file.size,
        )
    except UnsupportedAudioTypeError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except AudioFileTooLargeError as e:
        raise HTTPException(status_code=413, detail=str(e))
    except AudioFileNotFoundError as e:
        raise HTTPException(status_code=500, detail=str(e))
    except TranscriptionError as e:
        raise HTTPException(status_code=e.status_code or 500, detail=str(e))
    except Exception:
        logger.exception("Transcription request failed", extra={"file_name": file.filename})
        raise HTTPException(status_code=500, detail="Failed to transcribe audio")
