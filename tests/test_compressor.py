import pytest

from config import CompressionConfig
from infrastructure import MoviePyCompressor
from infrastructure import moviepy_compressor


class FakeAudioClip:
    """Stands in for moviepy.AudioFileClip; writes output_size bytes."""

    output_size = 10
    error = None
    instances = []

    def __init__(self, path, fps=None):
        self.path = path
        self.fps = fps
        self.write_kwargs = None
        self.closed = False
        FakeAudioClip.instances.append(self)

    def write_audiofile(self, target, **kwargs):
        self.write_kwargs = kwargs
        if FakeAudioClip.error:
            with open(target, "wb") as f:
                f.write(b"partial")
            raise FakeAudioClip.error
        with open(target, "wb") as f:
            f.write(b"\x00" * FakeAudioClip.output_size)

    def close(self):
        self.closed = True


@pytest.fixture
def fake_clip(monkeypatch):
    FakeAudioClip.output_size = 10
    FakeAudioClip.error = None
    FakeAudioClip.instances = []
    monkeypatch.setattr(moviepy_compressor.moviepy, "AudioFileClip", FakeAudioClip)
    return FakeAudioClip


@pytest.fixture
def source(tmp_path):
    path = tmp_path / "recording.wav"
    path.write_bytes(b"\x00" * 100)
    return path


def test_compress_replaces_original(fake_clip, source):
    result = MoviePyCompressor(CompressionConfig()).compress(source)

    assert result.was_compressed is True
    assert result.path.name == "recording-compressed.ogg"
    assert result.path.exists()
    assert result.size == 10
    assert result.size <= 100
    assert not source.exists()


def test_compress_requests_mono_speech_encoding(fake_clip, source):
    MoviePyCompressor(CompressionConfig()).compress(source)

    clip = fake_clip.instances[0]
    assert clip.fps == 16000
    assert clip.closed
    assert clip.write_kwargs["codec"] == "libopus"
    assert clip.write_kwargs["bitrate"] == "24k"
    assert clip.write_kwargs["fps"] == 16000
    assert clip.write_kwargs["ffmpeg_params"][:2] == ["-ac", "1"]


def test_compress_keeps_original_when_encoder_fails(fake_clip, source):
    fake_clip.error = OSError("ffmpeg not found")

    result = MoviePyCompressor(CompressionConfig()).compress(source)

    assert result.was_compressed is False
    assert result.path == source
    assert result.size == 100
    assert source.exists()
    assert not (source.parent / "recording-compressed.ogg").exists()


def test_compress_keeps_original_when_output_is_empty(fake_clip, source):
    fake_clip.output_size = 0

    result = MoviePyCompressor(CompressionConfig()).compress(source)

    assert result.was_compressed is False
    assert result.path == source
    assert source.exists()
    assert not (source.parent / "recording-compressed.ogg").exists()


def test_compress_keeps_original_when_output_is_larger(fake_clip, source):
    fake_clip.output_size = 500

    result = MoviePyCompressor(CompressionConfig()).compress(source)

    assert result.was_compressed is False
    assert result.path == source
    assert source.exists()


def test_compress_missing_file_does_not_raise(fake_clip, tmp_path):
    fake_clip.error = OSError("no such file")
    missing = tmp_path / "gone.wav"

    result = MoviePyCompressor(CompressionConfig()).compress(missing)

    assert result.was_compressed is False
    assert result.path == missing
