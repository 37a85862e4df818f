"""Request and response models for the transcription API."""

from pydantic import BaseModel


class TextRequest(BaseModel):
    """Body of the summarize and identify-speakers endpoints."""

    text: str


class HealthResponse(BaseModel):
    """Liveness probe response."""

    status: str = "ok"
