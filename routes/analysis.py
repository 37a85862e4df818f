"""Summary and speaker identification endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from transcription_common.logging import setup_logging

from dependencies import get_diarizer, get_summarizer
from domain import Diarizer, SpeakerSegment, Summarizer, Summary
from exceptions import SummarizationError
from response_models import HealthResponse, TextRequest

logger = setup_logging()

router = APIRouter(prefix="/api", tags=["analysis"])

SummarizerDep = Annotated[Summarizer, Depends(get_summarizer)]
DiarizerDep = Annotated[Diarizer, Depends(get_diarizer)]


def _require_text(body: TextRequest) -> str:
    if not body.text.strip():
        raise HTTPException(status_code=400, detail="Transcript text is required")
    return body.text


@router.post("/summarize", response_model=Summary)
def summarize(body: TextRequest, summarizer: SummarizerDep) -> Summary:
    """Returns key points, topics and action items for a transcript."""
    text = _require_text(body)
    try:
        return summarizer.summarize(text)
    except SummarizationError as e:
        logger.exception("Summarization failed")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/identify-speakers", response_model=list[SpeakerSegment])
def identify_speakers(body: TextRequest, diarizer: DiarizerDep) -> list[SpeakerSegment]:
    """Returns the transcript segmented by speaker."""
    return diarizer.identify_speakers(_require_text(body))


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    """Liveness probe."""
    return HealthResponse()
