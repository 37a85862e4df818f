import pytest
from fakes import FakeCompressor, FakeLLM, FakeTranscriptionService
from fastapi import FastAPI
from fastapi.testclient import TestClient

from config import CompressionConfig, DiarizationConfig, IntakeConfig
from dependencies import get_diarizer, get_summarizer, get_transcription_handler
from domain import Diarizer, FileIntake, Summarizer, default_recovery
from handlers import TranscriptionHandler
from routes import analysis_router, transcription_router, ui_router


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def intake(upload_dir):
    return FileIntake(IntakeConfig(upload_dir=upload_dir))


@pytest.fixture
def transcriber():
    return FakeTranscriptionService()


@pytest.fixture
def compressor():
    return FakeCompressor()


@pytest.fixture
def handler(intake, compressor, transcriber):
    return TranscriptionHandler(intake, compressor, transcriber, CompressionConfig())


@pytest.fixture
def llm():
    return FakeLLM()


@pytest.fixture
def app(handler, llm):
    app = FastAPI()
    app.include_router(transcription_router)
    app.include_router(analysis_router)
    app.include_router(ui_router)
    app.dependency_overrides[get_transcription_handler] = lambda: handler
    app.dependency_overrides[get_summarizer] = lambda: Summarizer(llm, "summarize")
    app.dependency_overrides[get_diarizer] = lambda: Diarizer(
        llm, "diarize", default_recovery(DiarizationConfig())
    )
    return app


@pytest.fixture
def client(app):
    return TestClient(app)
