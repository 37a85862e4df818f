"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from ddtrace import patch_all
from fastapi import FastAPI

from config import load_config
from dependencies import build_services
from routes import analysis_router, transcription_router, ui_router

patch_all()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Builds the provider clients once per process."""
    app.state.services = build_services(load_config())
    yield


app = FastAPI(title="Audio Transcription Service", lifespan=lifespan)
app.include_router(transcription_router)
app.include_router(analysis_router)
app.include_router(ui_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000)
