"""Single-page transcription UI."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from template import index

router = APIRouter(tags=["ui"])


@router.get("/", response_class=HTMLResponse)
def home() -> str:
    return index
