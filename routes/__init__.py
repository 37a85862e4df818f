"""API routers."""

from .analysis import router as analysis_router
from .transcription import router as transcription_router
from .ui import router as ui_router

__all__ = ["analysis_router", "transcription_router", "ui_router"]
